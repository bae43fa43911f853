"""Queue engine configuration."""

from dataclasses import dataclass

DEFAULT_AVG_SERVICE_MINUTES = 20


@dataclass(frozen=True)
class QueueConfig:
    """Configuration for wait estimation.

    Attributes:
        avg_service_minutes: Assumed average minutes to fully service one patient.
    """
    avg_service_minutes: int = DEFAULT_AVG_SERVICE_MINUTES

    def __post_init__(self):
        if isinstance(self.avg_service_minutes, bool) or not isinstance(self.avg_service_minutes, int):
            raise ValueError("avg_service_minutes must be an integer")
        if self.avg_service_minutes < 1:
            raise ValueError("avg_service_minutes must be positive")
