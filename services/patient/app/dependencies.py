from typing import Annotated, Optional

from fastapi import Depends

from app.config import settings
from app.queue_service import QueueService
from app.repository import SQLPatientStore
from common.database import create_engine, create_session_factory
from triage import InMemoryPatientStore, PatientStore, QueueConfig

# Process-wide store, created on first use
_store: Optional[PatientStore] = None


def get_patient_store() -> PatientStore:
    """Get the configured patient store singleton."""
    global _store
    if _store is None:
        if settings.STORAGE_BACKEND == "memory":
            _store = InMemoryPatientStore()
        else:
            engine = create_engine(settings.DATABASE_URL, echo=settings.DEBUG)
            _store = SQLPatientStore(create_session_factory(engine))
    return _store


def get_queue_config() -> QueueConfig:
    return QueueConfig(avg_service_minutes=settings.AVG_SERVICE_MINUTES)


def get_queue_service(
    store: Annotated[PatientStore, Depends(get_patient_store)],
    config: Annotated[QueueConfig, Depends(get_queue_config)],
) -> QueueService:
    return QueueService(store=store, config=config)
