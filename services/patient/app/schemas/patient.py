"""Schemas for the patient queue API."""

from datetime import datetime
from typing import Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class PatientCreate(BaseModel):
    """Walk-in registration request."""
    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={
            "examples": [
                {
                    "name": "Jane Doe",
                    "age": 34,
                    "symptoms": "Sharp abdominal pain since this morning",
                    "pain_level": 7,
                    "notes": "Allergic to penicillin",
                }
            ]
        },
    )

    name: str = Field(min_length=1, description="Patient name")
    age: int = Field(gt=0, description="Age in years")
    symptoms: str = Field(min_length=1, description="Reported symptoms")
    pain_level: int = Field(ge=1, le=10, description="Self-reported pain 1-10")
    notes: Optional[str] = Field(default=None, description="Optional notes")


class PatientUpdate(BaseModel):
    """Staff override of status and/or priority class."""
    model_config = ConfigDict(str_strip_whitespace=True)

    status: Optional[str] = Field(default=None, min_length=1, description="New status, e.g. 'in-progress'")
    priority_class: Optional[int] = Field(
        default=None,
        ge=1,
        validation_alias=AliasChoices("priority_class", "triage_level_code"),
        description="New priority class (lower is more urgent)",
    )


class PatientResponse(BaseModel):
    """Full patient record."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    age: int
    symptoms: str
    pain_level: int
    notes: Optional[str] = None
    priority_class: int
    status: str
    created_at: datetime
    updated_at: datetime


class QueueEntryResponse(PatientResponse):
    """Waiting patient with queue position and projected wait."""
    position: int = Field(ge=1, description="1-based position in the queue")
    estimated_wait_min: int = Field(ge=0, description="Estimated wait in minutes")


class StorageCheckResponse(BaseModel):
    """Storage connectivity check result."""
    ok: bool
    time: datetime
