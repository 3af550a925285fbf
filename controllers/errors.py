from __future__ import annotations


class TrackerError(ValueError):
    """Base class for user-facing input errors; state is left unchanged."""


class ValidationError(TrackerError):
    """A required field is missing or malformed."""


class DuplicateError(TrackerError):
    """The tracking number is already tracked."""
