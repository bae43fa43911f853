"""Patient storage collaborator interface and in-memory implementation."""

import asyncio
from datetime import datetime, timedelta
from typing import Callable, Dict, List, Optional, Protocol

from .lifecycle import apply_lifecycle_update, utcnow
from .records import NewPatient, PatientRecord


class PatientStore(Protocol):
    """Storage operations the queue engine depends on.

    ``fetch_waiting_patients`` must return a single consistent read, and
    ``persist_lifecycle_update`` must apply atomically to one record.
    """

    async def fetch_waiting_patients(self) -> List[PatientRecord]: ...

    async def fetch_all_patients(self) -> List[PatientRecord]: ...

    async def fetch_patient_by_id(self, patient_id: int) -> Optional[PatientRecord]: ...

    async def insert_patient(self, fields: NewPatient) -> PatientRecord: ...

    async def persist_lifecycle_update(
        self,
        patient_id: int,
        status: Optional[str] = None,
        priority_class: Optional[int] = None,
    ) -> Optional[PatientRecord]: ...

    async def ping(self) -> datetime: ...


class InMemoryPatientStore:
    """Process-local patient store.

    Ids increase from 1 and ``created_at`` is strictly increasing in
    insertion order, even when the clock does not advance between inserts.
    """

    def __init__(self, clock: Callable[[], datetime] = utcnow):
        self._clock = clock
        self._patients: Dict[int, PatientRecord] = {}
        self._next_id = 1
        self._last_created: Optional[datetime] = None
        self._lock = asyncio.Lock()

    def _next_created_at(self) -> datetime:
        created = self._clock()
        if self._last_created is not None and created <= self._last_created:
            created = self._last_created + timedelta(microseconds=1)
        self._last_created = created
        return created

    async def fetch_waiting_patients(self) -> List[PatientRecord]:
        async with self._lock:
            return [p for p in self._patients.values() if p.is_waiting]

    async def fetch_all_patients(self) -> List[PatientRecord]:
        async with self._lock:
            return sorted(self._patients.values(), key=lambda p: p.id)

    async def fetch_patient_by_id(self, patient_id: int) -> Optional[PatientRecord]:
        async with self._lock:
            return self._patients.get(patient_id)

    async def insert_patient(self, fields: NewPatient) -> PatientRecord:
        async with self._lock:
            created = self._next_created_at()
            patient = PatientRecord(
                id=self._next_id,
                name=fields.name,
                age=fields.age,
                symptoms=fields.symptoms,
                pain_level=fields.pain_level,
                priority_class=fields.priority_class,
                status=fields.status,
                notes=fields.notes,
                created_at=created,
                updated_at=created,
            )
            self._patients[patient.id] = patient
            self._next_id += 1
            return patient

    async def persist_lifecycle_update(
        self,
        patient_id: int,
        status: Optional[str] = None,
        priority_class: Optional[int] = None,
    ) -> Optional[PatientRecord]:
        async with self._lock:
            current = self._patients.get(patient_id)
            if current is None:
                return None
            updated = apply_lifecycle_update(
                current, status=status, priority_class=priority_class, now=self._clock()
            )
            self._patients[patient_id] = updated
            return updated

    async def ping(self) -> datetime:
        return self._clock()

    def clear(self) -> None:
        self._patients.clear()
        self._next_id = 1
        self._last_created = None
