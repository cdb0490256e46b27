from __future__ import annotations


class CalendarError(Exception):
    """Base class for failures that abort a calendar run."""


class RepositoryAccessError(CalendarError):
    """Raised when the repository, its history or its config cannot be read."""


class DataIntegrityError(CalendarError):
    """Raised when an author or config email is not valid text."""
