"""
User-facing API for doomsday-clock.

This module provides the pipeline that turns the encyclopedia page into a
JSON snapshot.
"""

from doomsday_clock.api.pipeline import TimelinePipeline

__all__ = [
    'TimelinePipeline'
]
