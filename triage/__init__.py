"""Emergency walk-in triage queue engine."""

from .classifier import classify
from .config import QueueConfig
from .errors import TriageError, InvalidInput, NotFound
from .lifecycle import apply_lifecycle_update, check_lifecycle_update, lifecycle_changes
from .ordering import order_waiting, queue_sort_key
from .records import PatientRecord, NewPatient, QueueEntry, WAITING, IN_PROGRESS, DISCHARGED
from .snapshot import build_snapshot, find_entry
from .storage import PatientStore, InMemoryPatientStore
from .wait_estimator import estimate

__all__ = [
    "classify",
    "QueueConfig",
    "TriageError",
    "InvalidInput",
    "NotFound",
    "apply_lifecycle_update",
    "check_lifecycle_update",
    "lifecycle_changes",
    "order_waiting",
    "queue_sort_key",
    "PatientRecord",
    "NewPatient",
    "QueueEntry",
    "WAITING",
    "IN_PROGRESS",
    "DISCHARGED",
    "build_snapshot",
    "find_entry",
    "PatientStore",
    "InMemoryPatientStore",
    "estimate",
]
