"""
High-level pipeline orchestrator for the Doomsday Clock snapshot.

TimelinePipeline coordinates the complete workflow:
- Fetch the source page (via PageFetcher)
- Locate the timeline table and extract rows
- Normalize values and aggregate the timeline
- Write the JSON snapshot (via SnapshotWriter)

Design Philosophy:
- Stateless: every run recomputes the snapshot from scratch
- Fail fast: any error aborts the run before anything is written
- Injectable services for offline testing
"""

import logging
from datetime import datetime
from typing import Optional

from doomsday_clock.config import AppConfig, get_app_config
from doomsday_clock.models import CurrentReading, Snapshot, format_timestamp
from doomsday_clock.parsers import locate_table, extract_rows
from doomsday_clock.services.fetcher import PageFetcher
from doomsday_clock.services.snapshot_writer import SnapshotWriter
from doomsday_clock.services.timeline_builder import (
    rows_to_entries,
    build_timeline,
    current_entry,
    modern_entries
)

logger = logging.getLogger(__name__)


class TimelinePipeline:
    """
    Fetch -> parse -> aggregate -> write.

    Usage:
        >>> pipeline = TimelinePipeline()
        >>> snapshot = pipeline.run()
        Wrote doomsday.json with 25 rows (modern: 12)

    Offline (already-fetched document):
        >>> snapshot = TimelinePipeline().build_snapshot(page_html)
        >>> snapshot.current.year
        2025
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        fetcher: Optional[PageFetcher] = None,
        writer: Optional[SnapshotWriter] = None
    ):
        """
        Args:
            config: Application config (defaults to get_app_config())
            fetcher: Page fetcher (defaults to one built from config)
            writer: Snapshot writer (defaults to one built from config)
        """
        self.config = config or get_app_config()
        self.fetcher = fetcher or PageFetcher(
            url=self.config.source_url,
            headers=self.config.request_headers,
            timeout=self.config.request_timeout
        )
        self.writer = writer or SnapshotWriter(output_path=self.config.output_path)

    def build_snapshot(
        self,
        document: str,
        generated_at: Optional[datetime] = None
    ) -> Snapshot:
        """
        Build a snapshot from an already-fetched document.

        Args:
            document: Raw page markup
            generated_at: Timestamp to record (defaults to now, UTC)

        Returns:
            Validated Snapshot

        Raises:
            StructureError: If the timeline table cannot be located
            EmptyResultError: If no valid rows were extracted
        """
        table = locate_table(document, marker=self.config.timeline_marker)
        rows = extract_rows(table)
        logger.info(f"Extracted {len(rows)} candidate rows from timeline table")

        entries = rows_to_entries(rows)
        timeline = build_timeline(entries)
        modern = modern_entries(timeline, since_year=self.config.modern_since_year)
        logger.info(
            f"Parsed {len(timeline)} timeline rows "
            f"({len(entries) - len(timeline)} duplicate years collapsed)"
        )

        return Snapshot(
            source=self.fetcher.url,
            updated_at=format_timestamp(generated_at),
            current=CurrentReading.from_entry(current_entry(timeline)),
            modern=modern,
            timeline=timeline
        )

    def run(self) -> Snapshot:
        """
        Execute the full workflow and write the snapshot.

        Returns:
            The written Snapshot

        Raises:
            FetchError, StructureError, EmptyResultError: Run aborted,
                nothing written
        """
        document = self.fetcher.fetch()
        snapshot = self.build_snapshot(document)

        path = self.writer.write(snapshot)
        print(snapshot.summary(str(path)))
        return snapshot
