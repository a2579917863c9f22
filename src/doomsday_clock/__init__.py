"""
doomsday-clock: Doomsday Clock timeline snapshot builder.

Main package exports for user-facing API.
"""

from doomsday_clock.api import TimelinePipeline
from doomsday_clock.exceptions import (
    DoomsdayClockError,
    FetchError,
    StructureError,
    EmptyResultError
)
from doomsday_clock.models import TimelineEntry, Snapshot

__all__ = [
    'TimelinePipeline',
    'DoomsdayClockError',
    'FetchError',
    'StructureError',
    'EmptyResultError',
    'TimelineEntry',
    'Snapshot',
    'build_snapshot'
]


def build_snapshot(document: str) -> Snapshot:
    """
    Build a snapshot from an already-fetched page without touching the network.

    Args:
        document: Raw HTML of the encyclopedia page

    Returns:
        Snapshot with current, modern and full timeline

    Raises:
        StructureError: If the timeline table cannot be found
        EmptyResultError: If no valid rows were parsed

    Example:
        >>> from doomsday_clock import build_snapshot
        >>> snapshot = build_snapshot(open('page.html').read())
        >>> snapshot.current.seconds_to_midnight
        89
    """
    return TimelinePipeline().build_snapshot(document)
