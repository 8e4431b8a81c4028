"""
Shared schema pieces: the camelCase base model, enumerations used by
more than one resource, and the pagination envelope returned by list
endpoints.
"""

from datetime import datetime
from enum import Enum
from typing import Generic, List, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base model serialised with camelCase keys.

    Input accepts either spelling so that Python callers can build
    models with keyword arguments.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RecordMeta(CamelModel):
    """Fields assigned by the store."""

    id: UUID
    created_at: datetime
    updated_at: datetime


class Size(str, Enum):
    small = "small"
    medium = "medium"
    large = "large"
    extra_large = "extra-large"


class Pagination(CamelModel):
    page: int = Field(..., ge=1, examples=[1])
    limit: int = Field(..., ge=1, examples=[10])
    total: int = Field(..., ge=0, examples=[42])
    total_pages: int = Field(..., ge=0, examples=[5])


class Paginated(CamelModel, Generic[T]):
    """``{data, pagination}`` envelope for a windowed list."""

    data: List[T]
    pagination: Pagination
