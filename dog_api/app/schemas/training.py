"""
Pydantic models for training records and the summaries built from
them (per‑dog progress and the trainer directory).
"""

from datetime import date
from enum import Enum
from typing import Annotated, List, Optional
from uuid import UUID

from pydantic import Field, HttpUrl, StringConstraints

from .common import CamelModel, RecordMeta


class TrainingType(str, Enum):
    basic_obedience = "basic-obedience"
    advanced_obedience = "advanced-obedience"
    agility = "agility"
    therapy = "therapy"
    service = "service"
    behavioral = "behavioral"
    socialization = "socialization"


class TrainingStatus(str, Enum):
    in_progress = "in-progress"
    completed = "completed"
    discontinued = "discontinued"


class ProgressLevel(str, Enum):
    poor = "poor"
    fair = "fair"
    good = "good"
    excellent = "excellent"


Skill = Annotated[str, StringConstraints(min_length=1, max_length=100)]


class TrainingRecordBase(CamelModel):
    dog_id: UUID
    type: TrainingType
    trainer: str = Field(..., min_length=1, max_length=100, examples=["Mark Thompson"])
    facility: Optional[str] = Field(None, min_length=1, max_length=200)
    start_date: date
    end_date: Optional[date] = None
    status: TrainingStatus
    skills: List[Skill] = Field(default_factory=list, max_length=20)
    progress: ProgressLevel
    cost: Optional[float] = Field(None, ge=0)
    notes: Optional[str] = Field(None, max_length=1000)
    certificates: Optional[List[HttpUrl]] = Field(None, max_length=5)


class TrainingRecordCreate(TrainingRecordBase):
    """Schema for creating a training record."""
    pass


class TrainingRecordUpdate(CamelModel):
    """Fields of a training record that may change after creation."""

    status: Optional[TrainingStatus] = None
    progress: Optional[ProgressLevel] = None
    end_date: Optional[date] = None
    skills: Optional[List[Skill]] = Field(None, max_length=20)
    notes: Optional[str] = Field(None, max_length=1000)
    certificates: Optional[List[HttpUrl]] = Field(None, max_length=5)


class TrainingRecord(RecordMeta, TrainingRecordBase):
    pass


class TrainingProgress(CamelModel):
    dog_id: UUID
    total_trainings: int
    completed_trainings: int
    in_progress_trainings: int
    overall_progress: ProgressLevel
    skills: List[str]
    training_records: List[TrainingRecord]


class Trainer(CamelModel):
    name: str
    facility: Optional[str] = None
    specialties: List[TrainingType]
    record_count: int
    average_progress: ProgressLevel


class TrainerDirectory(CamelModel):
    trainers: List[Trainer]
