"""
Pydantic models for health records, plus the vaccination history and
veterinarian directory summaries built from them.
"""

import datetime as dt
from enum import Enum
from typing import List, Optional
from uuid import UUID

from pydantic import Field, HttpUrl

from .common import CamelModel, RecordMeta


class HealthRecordType(str, Enum):
    vaccination = "vaccination"
    checkup = "checkup"
    treatment = "treatment"
    surgery = "surgery"
    emergency = "emergency"
    dental = "dental"
    grooming = "grooming"


class Medication(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    dosage: str = Field(..., min_length=1, max_length=50)
    frequency: str = Field(..., min_length=1, max_length=100)


class HealthRecordBase(CamelModel):
    dog_id: UUID
    type: HealthRecordType
    date: dt.date
    veterinarian: str = Field(..., min_length=1, max_length=100, examples=["Dr. Emily Chen"])
    clinic: str = Field(..., min_length=1, max_length=200, examples=["Happy Paws Veterinary Clinic"])
    description: str = Field(..., min_length=1, max_length=1000)
    medications: Optional[List[Medication]] = None
    cost: Optional[float] = Field(None, ge=0)
    follow_up_date: Optional[dt.date] = None
    notes: Optional[str] = Field(None, max_length=1000)
    attachments: Optional[List[HttpUrl]] = Field(None, max_length=5)


class HealthRecordCreate(HealthRecordBase):
    """Schema for creating a health record."""
    pass


class HealthRecordUpdate(CamelModel):
    """Partial update of a health record.  ``dogId`` cannot be changed."""

    type: Optional[HealthRecordType] = None
    date: Optional[dt.date] = None
    veterinarian: Optional[str] = Field(None, min_length=1, max_length=100)
    clinic: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, min_length=1, max_length=1000)
    medications: Optional[List[Medication]] = None
    cost: Optional[float] = Field(None, ge=0)
    follow_up_date: Optional[dt.date] = None
    notes: Optional[str] = Field(None, max_length=1000)
    attachments: Optional[List[HttpUrl]] = Field(None, max_length=5)


class HealthRecord(RecordMeta, HealthRecordBase):
    pass


class VaccinationHistory(CamelModel):
    dog_id: UUID
    vaccinations: List[HealthRecord]
    up_to_date: bool
    next_due: Optional[dt.date] = None


class Veterinarian(CamelModel):
    name: str
    clinic: str
    record_count: int
    specialties: List[HealthRecordType]


class VeterinarianDirectory(CamelModel):
    veterinarians: List[Veterinarian]
