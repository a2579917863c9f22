"""
Timeline building: rows -> entries -> sorted, de-duplicated timeline.

Row mapping is lenient (bad rows are skipped and logged); aggregation is
strict (an empty result aborts the run).
"""

import logging
import re
from typing import Dict, Iterable, List, Optional, Sequence

from pydantic import ValidationError

from doomsday_clock.config import MODERN_SINCE_YEAR
from doomsday_clock.exceptions import EmptyResultError
from doomsday_clock.models import TimelineEntry
from doomsday_clock.parsers.time_parser import parse_seconds_to_midnight

logger = logging.getLogger(__name__)

# A run of exactly four digits, not part of a longer number
YEAR_PATTERN = re.compile(r'(?<!\d)\d{4}(?!\d)', re.ASCII)


def parse_year(text: str) -> Optional[int]:
    """
    Return the first standalone 4-digit number in text, or None.

    Longer digit runs are not years: "19471" yields None rather than 1947.
    """
    match = YEAR_PATTERN.search(text)
    if not match:
        return None
    return int(match.group(0))


def row_to_entry(cells: Sequence[str]) -> Optional[TimelineEntry]:
    """
    Map one table row to a TimelineEntry.

    Args:
        cells: Cleaned cell texts; cells[0] holds the year,
               cells[1] the time to midnight

    Returns:
        TimelineEntry, or None if the row has no usable year/value
    """
    if len(cells) < 2:
        return None

    year = parse_year(cells[0])
    if year is None:
        logger.debug(f"Skipping row without year: {list(cells)}")
        return None

    seconds = parse_seconds_to_midnight(cells[1])
    if seconds is None:
        logger.debug(f"Skipping {year} row without time value: {cells[1]!r}")
        return None

    try:
        return TimelineEntry(year=year, seconds=seconds)
    except ValidationError as e:
        logger.debug(f"Skipping invalid {year} row: {e.errors()[0]['msg']}")
        return None


def rows_to_entries(rows: Iterable[Sequence[str]]) -> List[TimelineEntry]:
    """Map rows to entries, dropping rows that cannot be mapped."""
    entries = []
    skipped = 0
    for cells in rows:
        entry = row_to_entry(cells)
        if entry is None:
            skipped += 1
            continue
        entries.append(entry)

    if skipped:
        logger.info(f"Skipped {skipped} rows without a usable year/value pair")
    return entries


def build_timeline(entries: Iterable[TimelineEntry]) -> List[TimelineEntry]:
    """
    De-duplicate by year (last write wins) and sort ascending.

    Args:
        entries: Entries in table order, possibly with repeated years

    Returns:
        Timeline sorted by year, one entry per year

    Raises:
        EmptyResultError: If no entries were given

    Example:
        >>> build_timeline([TimelineEntry(year=2020, seconds=100),
        ...                 TimelineEntry(year=2020, seconds=90)])
        [TimelineEntry(year=2020, seconds=90)]
    """
    by_year: Dict[int, int] = {}
    for entry in entries:
        by_year[entry.year] = entry.seconds

    if not by_year:
        raise EmptyResultError("No timeline rows parsed")

    return [
        TimelineEntry(year=year, seconds=seconds)
        for year, seconds in sorted(by_year.items())
    ]


def current_entry(timeline: Sequence[TimelineEntry]) -> TimelineEntry:
    """Latest setting: the last entry of a sorted timeline."""
    if not timeline:
        raise EmptyResultError("No timeline rows parsed")
    return timeline[-1]


def modern_entries(
    timeline: Sequence[TimelineEntry],
    since_year: int = MODERN_SINCE_YEAR
) -> List[TimelineEntry]:
    """Entries with year >= since_year, preserving order."""
    return [entry for entry in timeline if entry.year >= since_year]
