"""
Snapshot writer: serializes a Snapshot to a JSON file.

Output is UTF-8, 2-space indented, with a trailing newline, written in a
single call so an existing file is either fully replaced or untouched.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from doomsday_clock.config import get_app_config
from doomsday_clock.models import Snapshot

logger = logging.getLogger(__name__)


def render_snapshot(snapshot: Snapshot) -> str:
    """Render the snapshot as JSON text (with trailing newline)."""
    return json.dumps(snapshot.to_dict(), indent=2, ensure_ascii=False) + "\n"


class SnapshotWriter:
    """
    Write snapshots to a fixed output path.

    Usage:
        writer = SnapshotWriter()
        path = writer.write(snapshot)
    """

    def __init__(self, output_path: Optional[Union[str, Path]] = None):
        """
        Args:
            output_path: Target file (overrides config if provided)
        """
        if output_path is None:
            output_path = get_app_config().output_path
        self.output_path = Path(output_path)

    def write(self, snapshot: Snapshot) -> Path:
        """
        Serialize snapshot, overwriting any existing file.

        Returns:
            Path of the written file
        """
        content = render_snapshot(snapshot)

        if self.output_path.parent != Path('.'):
            self.output_path.parent.mkdir(parents=True, exist_ok=True)

        self.output_path.write_text(content, encoding='utf-8')
        logger.info(f"Saved snapshot to {self.output_path} ({len(content)} bytes)")
        return self.output_path
