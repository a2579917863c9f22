"""
Unit tests for SnapshotWriter.
"""

import json
import pytest

from doomsday_clock.models import TimelineEntry, CurrentReading, Snapshot
from doomsday_clock.services.snapshot_writer import SnapshotWriter, render_snapshot


@pytest.fixture
def snapshot():
    timeline = [
        TimelineEntry(year=1947, seconds=420),
        TimelineEntry(year=2025, seconds=89),
    ]
    return Snapshot(
        source="https://en.wikipedia.org/wiki/Doomsday_Clock",
        updated_at="2025-01-28T15:04:05.123Z",
        current=CurrentReading.from_entry(timeline[-1]),
        modern=timeline[1:],
        timeline=timeline
    )


def test_render_uses_two_space_indent_and_trailing_newline(snapshot):
    content = render_snapshot(snapshot)

    assert content.startswith('{\n  "source": "https://en.wikipedia.org/wiki/Doomsday_Clock",\n')
    assert content.endswith("}\n")
    assert not content.endswith("\n\n")


def test_render_field_order(snapshot):
    data = json.loads(render_snapshot(snapshot))

    assert list(data) == ['source', 'updated_at', 'current', 'modern', 'timeline']
    assert data['current'] == {'year': 2025, 'seconds_to_midnight': 89}


def test_render_keeps_non_ascii():
    entry = TimelineEntry(year=2025, seconds=89)
    snapshot = Snapshot(
        source="https://de.wikipedia.org/wiki/Atomkriegsuhr_–_Übersicht",
        updated_at="2025-01-28T15:04:05.123Z",
        current=CurrentReading.from_entry(entry),
        timeline=[entry]
    )

    assert "Übersicht" in render_snapshot(snapshot)


def test_default_path_from_config(tmp_path):
    writer = SnapshotWriter()

    assert str(writer.output_path) == "doomsday.json"


def test_explicit_path_skips_config(tmp_path, snapshot, monkeypatch):
    """Explicit output path works even when the environment is invalid."""
    monkeypatch.setenv('DOOMSDAY_MODERN_SINCE_YEAR', 'soon')

    path = SnapshotWriter(tmp_path / "doomsday.json").write(snapshot)

    assert path.exists()


def test_write_creates_file(tmp_path, snapshot):
    path = SnapshotWriter(tmp_path / "doomsday.json").write(snapshot)

    assert path == tmp_path / "doomsday.json"
    assert json.loads(path.read_text(encoding='utf-8')) == snapshot.to_dict()


def test_write_creates_parent_directory(tmp_path, snapshot):
    path = SnapshotWriter(tmp_path / "public" / "data" / "doomsday.json").write(snapshot)

    assert path.exists()


def test_write_overwrites_existing_file(tmp_path, snapshot):
    target = tmp_path / "doomsday.json"
    target.write_text("stale content that is much longer than nothing", encoding='utf-8')

    SnapshotWriter(target).write(snapshot)

    assert target.read_text(encoding='utf-8') == render_snapshot(snapshot)


def test_write_relative_path_in_working_directory(tmp_path, snapshot):
    # conftest runs each test inside tmp_path
    SnapshotWriter().write(snapshot)

    assert (tmp_path / "doomsday.json").exists()
