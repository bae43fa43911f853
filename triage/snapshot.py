"""Queue snapshot read model."""

from typing import Iterable, List, Sequence

from .config import QueueConfig
from .errors import NotFound
from .ordering import order_waiting
from .records import PatientRecord, QueueEntry
from .wait_estimator import estimate


def build_snapshot(
    waiting_patients: Iterable[PatientRecord],
    config: QueueConfig,
) -> List[QueueEntry]:
    """Build the ordered queue view from a consistent read of waiting patients.

    Args:
        waiting_patients: Patients with status ``waiting``; others are ignored.
        config: Queue configuration supplying the average service time.

    Returns:
        Entries in serving order with positions 1..N and wait estimates.
    """
    return [
        QueueEntry(
            patient=patient,
            position=position,
            estimated_wait_min=estimate(position, config.avg_service_minutes),
        )
        for position, patient in enumerate(order_waiting(waiting_patients), start=1)
    ]


def find_entry(snapshot: Sequence[QueueEntry], patient_id: int) -> QueueEntry:
    """Locate a patient's entry in a snapshot by canonical integer id.

    Raises:
        NotFound: If the patient is not in the waiting queue.
    """
    for entry in snapshot:
        if entry.id == patient_id:
            return entry
    raise NotFound("Patient not found in waiting queue", patient_id=patient_id)
