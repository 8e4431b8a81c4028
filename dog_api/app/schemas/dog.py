"""
Pydantic models for dogs.

``DogBase`` holds the fields a client supplies; ``DogCreate`` is the
creation payload, ``DogUpdate`` its all‑optional counterpart for
partial updates and ``Dog`` the stored record returned by the API.
"""

from enum import Enum
from typing import List, Optional
from uuid import UUID

from pydantic import Field, HttpUrl

from .common import CamelModel, RecordMeta, Size


class Gender(str, Enum):
    male = "male"
    female = "female"


class DogBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=100, examples=["Buddy"])
    breed: str = Field(..., min_length=1, max_length=50, examples=["Golden Retriever"])
    age: int = Field(..., ge=0, le=30, examples=[3])
    weight: float = Field(..., gt=0, le=200, examples=[65])
    gender: Gender
    color: str = Field(..., min_length=1, max_length=50, examples=["Golden"])
    size: Size
    temperament: List[str] = Field(..., max_length=10)
    is_neutered: bool
    microchip_id: Optional[str] = None
    photos: List[HttpUrl] = Field(..., max_length=10)
    description: str = Field(..., max_length=1000)


class DogCreate(DogBase):
    """Schema for creating a dog."""
    pass


class DogUpdate(CamelModel):
    """Schema for updating a dog.

    All fields are optional; only provided fields will be updated.
    """

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    breed: Optional[str] = Field(None, min_length=1, max_length=50)
    age: Optional[int] = Field(None, ge=0, le=30)
    weight: Optional[float] = Field(None, gt=0, le=200)
    gender: Optional[Gender] = None
    color: Optional[str] = Field(None, min_length=1, max_length=50)
    size: Optional[Size] = None
    temperament: Optional[List[str]] = Field(None, max_length=10)
    is_neutered: Optional[bool] = None
    microchip_id: Optional[str] = None
    photos: Optional[List[HttpUrl]] = Field(None, max_length=10)
    description: Optional[str] = Field(None, max_length=1000)


class Dog(RecordMeta, DogBase):
    """Schema for reading a dog from the API."""
    pass


class DogPhotos(CamelModel):
    dog_id: UUID
    photos: List[HttpUrl]
