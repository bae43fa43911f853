"""Pain score to priority class triage rule."""

from .errors import InvalidInput

MIN_PAIN = 1
MAX_PAIN = 10


def classify(pain: int) -> int:
    """Map a self-reported pain score to a priority class.

    Args:
        pain: Integer pain score in [1, 10].

    Returns:
        Priority class 1 (most urgent), 2 or 3.

    Raises:
        InvalidInput: If pain is not an integer or is outside [1, 10].
    """
    if isinstance(pain, bool) or not isinstance(pain, int):
        raise InvalidInput(f"Pain level must be an integer, got {pain!r}")
    if pain < MIN_PAIN or pain > MAX_PAIN:
        raise InvalidInput(f"Pain level must be {MIN_PAIN}-{MAX_PAIN}, got {pain}")

    if pain >= 8:
        return 1
    if pain >= 5:
        return 2
    return 3
