"""
Command-line entry point for the scheduled job.

Takes no arguments: source URL, output path and the rest come from
configuration (defaults are the fixed constants in doomsday_clock.config).

Usage:
    python -m doomsday_clock
    doomsday-clock

Exit codes:
    0  snapshot written
    1  any failure (nothing written)
"""

import logging
import sys

from doomsday_clock.api import TimelinePipeline
from doomsday_clock.config import get_app_config

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Send log records to stderr so stdout only carries the summary line."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
        stream=sys.stderr
    )


def main() -> int:
    """Run the pipeline once and return the process exit code."""
    try:
        config = get_app_config()
        configure_logging(config.log_level)
        TimelinePipeline(config=config).run()
    except Exception as e:
        logger.error(f"Snapshot run failed: {e}", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0
