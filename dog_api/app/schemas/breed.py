"""
Pydantic models for dog breeds.

Breeds are reference data: the API only reads them, so there is no
create or update payload.
"""

from enum import Enum
from typing import List, Optional

from pydantic import Field, HttpUrl, model_validator

from .common import CamelModel, RecordMeta, Size


class BreedGroup(str, Enum):
    sporting = "sporting"
    hound = "hound"
    working = "working"
    terrier = "terrier"
    toy = "toy"
    non_sporting = "non-sporting"
    herding = "herding"
    mixed = "mixed"


class NeedsLevel(str, Enum):
    low = "low"
    moderate = "moderate"
    high = "high"
    very_high = "very-high"


class GroomingLevel(str, Enum):
    low = "low"
    moderate = "moderate"
    high = "high"


class LifeSpan(CamelModel):
    min: int = Field(..., ge=1, le=30)
    max: int = Field(..., ge=1, le=30)

    @model_validator(mode="after")
    def check_order(self) -> "LifeSpan":
        if self.min > self.max:
            raise ValueError("lifeSpan.min must not exceed lifeSpan.max")
        return self


class Breed(RecordMeta):
    name: str = Field(..., min_length=1, max_length=100)
    group: BreedGroup
    origin: str = Field(..., min_length=1, max_length=100)
    size: Size
    life_span: LifeSpan
    temperament: List[str] = Field(default_factory=list, max_length=15)
    exercise_needs: NeedsLevel
    grooming_needs: GroomingLevel
    trainability: NeedsLevel
    good_with_kids: bool
    good_with_pets: bool
    description: str = Field("", max_length=2000)
    image: Optional[HttpUrl] = None


class BreedGroupSummary(CamelModel):
    name: BreedGroup
    description: str
    count: int = Field(..., ge=0)


class BreedGroups(CamelModel):
    groups: List[BreedGroupSummary]
