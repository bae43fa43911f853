"""Queue ordering policy for waiting patients."""

from typing import Iterable, List, Tuple
from datetime import datetime

from .records import PatientRecord


def queue_sort_key(patient: PatientRecord) -> Tuple[int, datetime, int]:
    """Priority class, then arrival time, then id."""
    return (patient.priority_class, patient.created_at, patient.id)


def order_waiting(patients: Iterable[PatientRecord]) -> List[PatientRecord]:
    """Return waiting patients in the order they will be served.

    Records whose status is not ``waiting`` are dropped. The result depends
    only on the records passed in.
    """
    return sorted((p for p in patients if p.is_waiting), key=queue_sort_key)
