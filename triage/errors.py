"""Errors raised by the triage queue engine."""


class TriageError(Exception):
    """Base class for recoverable triage queue errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(TriageError):
    """A value is malformed or outside its domain."""


class NotFound(TriageError):
    """The referenced patient is absent from the relevant set."""

    def __init__(self, message: str = "Patient not found", patient_id=None):
        super().__init__(message)
        self.patient_id = patient_id
