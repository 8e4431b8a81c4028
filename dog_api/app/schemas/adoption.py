"""
Pydantic models for adoption applications.

Applicants submit ``AdoptionApplicationCreate``; the status always
starts as ``pending`` and is moved through ``ApplicationStatusUpdate``.
"""

from enum import Enum
from typing import Optional
from uuid import UUID

from pydantic import EmailStr, Field

from .common import CamelModel, RecordMeta


class ApplicationStatus(str, Enum):
    pending = "pending"
    approved = "approved"
    rejected = "rejected"
    withdrawn = "withdrawn"


class HousingType(str, Enum):
    apartment = "apartment"
    house = "house"
    condo = "condo"
    farm = "farm"
    other = "other"


class Experience(str, Enum):
    none = "none"
    some = "some"
    experienced = "experienced"
    very_experienced = "very-experienced"


class Address(CamelModel):
    street: str = Field(..., min_length=1, max_length=200, examples=["123 Main St"])
    city: str = Field(..., min_length=1, max_length=100, examples=["Springfield"])
    state: str = Field(..., min_length=2, max_length=50, examples=["IL"])
    zip_code: str = Field(..., min_length=5, max_length=10, examples=["62701"])


class AdoptionApplicationBase(CamelModel):
    dog_id: UUID
    applicant_name: str = Field(..., min_length=1, max_length=100, examples=["John Smith"])
    applicant_email: EmailStr
    applicant_phone: str = Field(..., min_length=10, max_length=20, examples=["+1-555-0123"])
    address: Address
    housing_type: HousingType
    has_yard: bool
    has_other_pets: bool
    other_pets_details: Optional[str] = Field(None, max_length=500)
    experience: Experience
    work_schedule: str = Field(..., max_length=200)
    reason: str = Field(..., min_length=10, max_length=1000)


class AdoptionApplicationCreate(AdoptionApplicationBase):
    """Schema for submitting an application."""
    pass


class AdoptionApplication(RecordMeta, AdoptionApplicationBase):
    """Stored application, including its review state."""

    status: ApplicationStatus = ApplicationStatus.pending
    notes: Optional[str] = Field(None, max_length=1000)


class ApplicationStatusUpdate(CamelModel):
    status: ApplicationStatus
    notes: Optional[str] = Field(None, max_length=1000)


class AdoptionStats(CamelModel):
    total_dogs: int
    available_for_adoption: int
    total_applications: int
    pending_applications: int
    approved_applications: int
    rejected_applications: int
    adoption_rate: float
