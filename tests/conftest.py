"""Pytest configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from triage import InMemoryPatientStore, PatientRecord, QueueConfig, WAITING

BASE_TIME = datetime(2024, 3, 1, 8, 0, tzinfo=timezone.utc)


class StepClock:
    """Clock that advances one minute per call."""

    def __init__(self, start: datetime = BASE_TIME, step: timedelta = timedelta(minutes=1)):
        self.current = start
        self.step = step

    def __call__(self) -> datetime:
        now = self.current
        self.current += self.step
        return now


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture
def queue_config():
    """Queue config with a 20 minute average service time."""
    return QueueConfig(avg_service_minutes=20)


@pytest.fixture
def clock():
    return StepClock()


@pytest.fixture
def memory_store(clock):
    return InMemoryPatientStore(clock=clock)


@pytest.fixture
def make_patient():
    """Factory for patient records; ``minute`` offsets created_at from a base time."""

    def _make(
        patient_id: int,
        priority_class: int = 3,
        minute: int = 0,
        status: str = WAITING,
        pain_level: int = 3,
    ) -> PatientRecord:
        created = BASE_TIME + timedelta(minutes=minute)
        return PatientRecord(
            id=patient_id,
            name=f"Patient {patient_id}",
            age=40,
            symptoms="chest pain",
            pain_level=pain_level,
            priority_class=priority_class,
            status=status,
            created_at=created,
            updated_at=created,
        )

    return _make


@pytest.fixture
def sample_registration():
    """Sample registration payload."""
    return {
        "name": "Jane Doe",
        "age": 34,
        "symptoms": "Sharp abdominal pain",
        "pain_level": 7,
        "notes": "Allergic to penicillin",
    }


@pytest.fixture
async def client(memory_store, queue_config, anyio_backend) -> AsyncGenerator:
    """HTTP client for the patient service backed by the in-memory store."""
    from app.main import app
    from app.dependencies import get_patient_store, get_queue_config

    app.dependency_overrides[get_patient_store] = lambda: memory_store
    app.dependency_overrides[get_queue_config] = lambda: queue_config

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
