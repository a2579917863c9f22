"""
Service layer for doomsday-clock.

- PageFetcher: Single HTTP GET of the source page
- timeline_builder: Row mapping, de-duplication and derived views
- SnapshotWriter: JSON serialization to disk
"""

from doomsday_clock.services.fetcher import PageFetcher
from doomsday_clock.services.timeline_builder import (
    row_to_entry,
    rows_to_entries,
    build_timeline,
    current_entry,
    modern_entries
)
from doomsday_clock.services.snapshot_writer import SnapshotWriter, render_snapshot

__all__ = [
    'PageFetcher',
    'row_to_entry',
    'rows_to_entries',
    'build_timeline',
    'current_entry',
    'modern_entries',
    'SnapshotWriter',
    'render_snapshot',
]
