"""Queue service: runs the triage engine against the patient store."""

import logging
from datetime import datetime
from typing import List, Optional

from triage import (
    NewPatient,
    NotFound,
    PatientRecord,
    PatientStore,
    QueueConfig,
    QueueEntry,
    build_snapshot,
    check_lifecycle_update,
    classify,
    find_entry,
)

logger = logging.getLogger(__name__)


class QueueService:
    """Registration, queue views and staff overrides for walk-in patients."""

    def __init__(self, store: PatientStore, config: QueueConfig):
        self.store = store
        self.config = config

    async def register(
        self,
        name: str,
        age: int,
        symptoms: str,
        pain_level: int,
        notes: Optional[str] = None,
    ) -> PatientRecord:
        """Triage and register a new waiting patient."""
        priority_class = classify(pain_level)
        patient = await self.store.insert_patient(
            NewPatient(
                name=name,
                age=age,
                symptoms=symptoms,
                pain_level=pain_level,
                priority_class=priority_class,
                notes=notes or None,
            )
        )
        logger.info(f"Registered patient {patient.id} with pain {pain_level} as priority {priority_class}")
        return patient

    async def get_queue(self) -> List[QueueEntry]:
        """Current waiting queue in serving order."""
        waiting = await self.store.fetch_waiting_patients()
        snapshot = build_snapshot(waiting, self.config)
        logger.debug(
            f"Built queue snapshot: {len(snapshot)} waiting, "
            f"avg service {self.config.avg_service_minutes} min"
        )
        return snapshot

    async def get_patient_status(self, patient_id: int) -> QueueEntry:
        """Queue position and estimated wait for one waiting patient."""
        return find_entry(await self.get_queue(), patient_id)

    async def get_patient(self, patient_id: int) -> PatientRecord:
        patient = await self.store.fetch_patient_by_id(patient_id)
        if patient is None:
            raise NotFound("Patient not found", patient_id=patient_id)
        return patient

    async def list_patients(self) -> List[PatientRecord]:
        return await self.store.fetch_all_patients()

    async def update_patient(
        self,
        patient_id: int,
        status: Optional[str] = None,
        priority_class: Optional[int] = None,
    ) -> PatientRecord:
        """Apply a staff status and/or priority override."""
        current = await self.store.fetch_patient_by_id(patient_id)
        changes = check_lifecycle_update(current, status=status, priority_class=priority_class)

        # writes only the supplied fields
        updated = await self.store.persist_lifecycle_update(patient_id, **changes)
        if updated is None:
            raise NotFound("Patient not found", patient_id=patient_id)

        logger.info(
            f"Updated patient {patient_id}: status={updated.status}, "
            f"priority_class={updated.priority_class}"
        )
        return updated

    async def check_storage(self) -> datetime:
        """Round trip to the store, returning its current time."""
        return await self.store.ping()
