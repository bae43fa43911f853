"""Patient records and queue entries."""

from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Any, Dict, Optional

WAITING = "waiting"
IN_PROGRESS = "in-progress"
DISCHARGED = "discharged"


@dataclass(frozen=True)
class PatientRecord:
    """A registered walk-in patient.

    ``priority_class`` is lower for more urgent patients. ``created_at`` is set
    once by the store and breaks ties between equal priorities.
    """
    id: int
    name: str
    age: int
    symptoms: str
    pain_level: int
    priority_class: int
    status: str
    created_at: datetime
    updated_at: datetime
    notes: Optional[str] = None

    @property
    def is_waiting(self) -> bool:
        return self.status == WAITING

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class QueueEntry:
    """A waiting patient with its queue position and projected wait."""
    patient: PatientRecord
    position: int
    estimated_wait_min: int

    @property
    def id(self) -> int:
        return self.patient.id

    def to_dict(self) -> Dict[str, Any]:
        data = self.patient.to_dict()
        data["position"] = self.position
        data["estimated_wait_min"] = self.estimated_wait_min
        return data


@dataclass(frozen=True)
class NewPatient:
    """Fields supplied at registration; the store assigns id and timestamps."""
    name: str
    age: int
    symptoms: str
    pain_level: int
    priority_class: int
    notes: Optional[str] = None
    status: str = WAITING
