"""Patient registration and queue API router."""

from typing import Annotated, List

from fastapi import APIRouter, Depends, status

from app.dependencies import get_queue_service
from app.queue_service import QueueService
from app.schemas.patient import (
    PatientCreate,
    PatientUpdate,
    PatientResponse,
    QueueEntryResponse,
)

router = APIRouter(prefix="/api/patients", tags=["Patients"])

QueueServiceDep = Annotated[QueueService, Depends(get_queue_service)]


@router.post("", response_model=PatientResponse, status_code=status.HTTP_201_CREATED)
async def register_patient(data: PatientCreate, service: QueueServiceDep):
    """Register a walk-in patient and assign a triage priority."""
    patient = await service.register(
        name=data.name,
        age=data.age,
        symptoms=data.symptoms,
        pain_level=data.pain_level,
        notes=data.notes,
    )
    return PatientResponse.model_validate(patient)


@router.get("", response_model=List[QueueEntryResponse])
async def get_queue(service: QueueServiceDep):
    """Full waiting queue in serving order."""
    queue = await service.get_queue()
    return [QueueEntryResponse.model_validate(entry.to_dict()) for entry in queue]


@router.get("/records", response_model=List[PatientResponse])
async def list_patients(service: QueueServiceDep):
    """Every patient record, regardless of status."""
    patients = await service.list_patients()
    return [PatientResponse.model_validate(p) for p in patients]


@router.get("/{patient_id}/status", response_model=QueueEntryResponse)
async def get_patient_status(patient_id: int, service: QueueServiceDep):
    """Queue position and estimated wait for a waiting patient."""
    entry = await service.get_patient_status(patient_id)
    return QueueEntryResponse.model_validate(entry.to_dict())


@router.patch("/{patient_id}", response_model=PatientResponse)
async def update_patient(patient_id: int, data: PatientUpdate, service: QueueServiceDep):
    """Override a patient's status and/or priority class."""
    patient = await service.update_patient(
        patient_id,
        status=data.status,
        priority_class=data.priority_class,
    )
    return PatientResponse.model_validate(patient)


@router.get("/{patient_id}", response_model=PatientResponse)
async def get_patient(patient_id: int, service: QueueServiceDep):
    """Full patient record by id."""
    patient = await service.get_patient(patient_id)
    return PatientResponse.model_validate(patient)
