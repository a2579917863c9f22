"""
Pydantic models for the timeline snapshot.

This module contains the immutable, validated records that flow from the
table parser to the snapshot writer.
"""

from doomsday_clock.models.timeline import (
    TimelineEntry,
    CurrentReading,
    Snapshot,
    format_timestamp
)

__all__ = [
    'TimelineEntry',
    'CurrentReading',
    'Snapshot',
    'format_timestamp',
]
