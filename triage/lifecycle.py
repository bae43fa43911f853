"""Patient status and priority transitions."""

from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .errors import InvalidInput, NotFound
from .records import PatientRecord


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def lifecycle_changes(
    status: Optional[str] = None,
    priority_class: Optional[int] = None,
) -> Dict[str, Any]:
    """Fields an update sets; omitted fields keep their current value."""
    changes: Dict[str, Any] = {}
    if status is not None:
        changes["status"] = status
    if priority_class is not None:
        changes["priority_class"] = priority_class
    return changes


def check_lifecycle_update(
    patient: Optional[PatientRecord],
    status: Optional[str] = None,
    priority_class: Optional[int] = None,
) -> Dict[str, Any]:
    """Validate a staff update and return the fields it sets.

    Raises:
        InvalidInput: If neither status nor priority_class is given.
        NotFound: If patient is None.
    """
    changes = lifecycle_changes(status, priority_class)
    if not changes:
        raise InvalidInput("Nothing to update")
    if patient is None:
        raise NotFound("Patient not found")
    return changes


def apply_lifecycle_update(
    patient: Optional[PatientRecord],
    status: Optional[str] = None,
    priority_class: Optional[int] = None,
    now: Optional[datetime] = None,
) -> PatientRecord:
    """Apply a staff update to a patient.

    Fields left as None keep their current value. Any status value and any
    transition is accepted; restricting them is left to the caller.

    Args:
        patient: Current record, or None if the id did not resolve.
        status: New status, if changing.
        priority_class: New priority class, if overriding triage.
        now: Timestamp for ``updated_at``; defaults to the current UTC time.

    Returns:
        A new record with the changes applied.

    Raises:
        InvalidInput: If neither status nor priority_class is given.
        NotFound: If patient is None.
    """
    changes = check_lifecycle_update(patient, status, priority_class)
    return replace(patient, **changes, updated_at=now or utcnow())
