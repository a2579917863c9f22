"""
Exception types for the Doomsday Clock snapshot pipeline.

Every failure that aborts a run derives from DoomsdayClockError, so the
entry point can report any of them the same way. Individual malformed rows
are NOT errors: they are skipped by the timeline builder.
"""

from typing import Optional


class DoomsdayClockError(Exception):
    """Base class for all fatal pipeline errors."""


class FetchError(DoomsdayClockError):
    """
    Raised when the source page cannot be fetched.

    Covers both non-2xx responses and transport failures (DNS, connection
    reset, ...). For transport failures status_code is None.

    Attributes:
        status_code: HTTP status code, or None for transport failures
        reason: HTTP reason phrase or transport error description
    """

    def __init__(self, status_code: Optional[int], reason: str):
        self.status_code = status_code
        self.reason = reason
        if status_code is None:
            message = f"Fetch failed: {reason}"
        else:
            message = f"Fetch failed: {status_code} {reason}"
        super().__init__(message)


class StructureError(DoomsdayClockError):
    """Raised when the timeline marker or its table cannot be found."""


class EmptyResultError(DoomsdayClockError):
    """Raised when no valid timeline rows survive extraction."""
