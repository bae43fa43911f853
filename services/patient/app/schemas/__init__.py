"""API schemas."""

from app.schemas.patient import (
    PatientCreate,
    PatientUpdate,
    PatientResponse,
    QueueEntryResponse,
    StorageCheckResponse,
)

__all__ = [
    "PatientCreate",
    "PatientUpdate",
    "PatientResponse",
    "QueueEntryResponse",
    "StorageCheckResponse",
]
