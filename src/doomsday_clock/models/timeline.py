"""
Timeline models for the Doomsday Clock snapshot.

TimelineEntry is the unit produced by the table parser; Snapshot is the
record written to disk. All models are frozen: a run builds them once and
serializes them, nothing mutates them afterwards.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, field_validator, ConfigDict

from doomsday_clock.validators import validate_year, validate_seconds


class TimelineEntry(BaseModel):
    """
    One (year, seconds-to-midnight) setting of the clock.

    Attributes:
        year: 4-digit calendar year the setting was announced
        seconds: Seconds remaining before midnight (non-negative)

    Example:
        >>> TimelineEntry(year=2023, seconds=90)
        TimelineEntry(year=2023, seconds=90)
    """

    year: int = Field(
        ...,
        description="Calendar year of the clock setting",
        examples=[2023]
    )

    seconds: int = Field(
        ...,
        description="Seconds remaining before midnight",
        examples=[90]
    )

    _validate_year = field_validator('year')(validate_year)
    _validate_seconds = field_validator('seconds')(validate_seconds)

    model_config = ConfigDict(frozen=True)

    def __repr__(self) -> str:
        return f"TimelineEntry(year={self.year}, seconds={self.seconds})"

    def __str__(self) -> str:
        return f"{self.year}: {self.seconds} s to midnight"


class CurrentReading(BaseModel):
    """Serialized shape of the latest clock setting."""

    year: int = Field(..., description="Year of the latest setting")
    seconds_to_midnight: int = Field(..., description="Latest seconds to midnight")

    _validate_year = field_validator('year')(validate_year)
    _validate_seconds = field_validator('seconds_to_midnight')(validate_seconds)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_entry(cls, entry: TimelineEntry) -> 'CurrentReading':
        return cls(year=entry.year, seconds_to_midnight=entry.seconds)


def format_timestamp(moment: Optional[datetime] = None) -> str:
    """
    Format a moment as an ISO-8601 UTC timestamp with millisecond precision.

    Naive datetimes are assumed to already be in UTC.

    Example:
        >>> format_timestamp(datetime(2025, 1, 28, 15, 4, 5, 123000))
        '2025-01-28T15:04:05.123Z'
    """
    if moment is None:
        moment = datetime.now(timezone.utc)
    elif moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


class Snapshot(BaseModel):
    """
    Output record of one run.

    Attributes:
        source: URL the timeline was extracted from
        updated_at: Generation timestamp (ISO-8601, UTC, 'Z' suffix)
        current: Entry with the maximum year
        modern: Entries from the modern era, in timeline order
        timeline: Full de-duplicated timeline sorted by year

    The JSON layout is produced by to_dict(), whose key order is part of the
    output contract.
    """

    source: str = Field(..., description="Source page URL")
    updated_at: str = Field(..., description="ISO-8601 generation timestamp")
    current: CurrentReading = Field(..., description="Latest clock setting")
    modern: List[TimelineEntry] = Field(default_factory=list)
    timeline: List[TimelineEntry] = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-ready dict in output field order."""
        return {
            'source': self.source,
            'updated_at': self.updated_at,
            'current': self.current.model_dump(),
            'modern': [entry.model_dump() for entry in self.modern],
            'timeline': [entry.model_dump() for entry in self.timeline],
        }

    def summary(self, output_path: str) -> str:
        """One-line completion message."""
        return (
            f"Wrote {output_path} with {len(self.timeline)} rows "
            f"(modern: {len(self.modern)})"
        )
