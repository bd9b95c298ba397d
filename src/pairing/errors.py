"""
Errors raised by the pairing core.
"""


class SchedulingError(ValueError):
    """Base class for invalid scheduling requests."""


class InvalidInput(SchedulingError):
    """Participant list, round count or weekday is out of range."""


class MalformedDate(SchedulingError):
    """Date text matches neither YYYY-MM-DD nor DD/MM/YYYY."""
