"""Linear wait time projection."""

from .errors import InvalidInput


def estimate(position: int, avg_service_minutes: int) -> int:
    """Estimated wait in minutes for a 1-based queue position.

    The patient at position 1 is next and waits 0 minutes; each patient
    ahead adds ``avg_service_minutes``.
    """
    if isinstance(position, bool) or not isinstance(position, int) or position < 1:
        raise InvalidInput(f"Queue position must be a positive integer, got {position!r}")
    return (position - 1) * avg_service_minutes
