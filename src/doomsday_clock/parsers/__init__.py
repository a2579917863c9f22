"""
HTML parsing modules for the Doomsday Clock timeline.

- Table location by proximity to a marker text (lxml structural query)
- Row/cell extraction with markup stripped and entities decoded
- Normalization of mixed minute/second notations to seconds
"""

from .table_locator import locate_table, parse_document
from .table_parser import extract_rows, parse_row, clean_cell_text
from .time_parser import parse_seconds_to_midnight

__all__ = [
    # Table location
    'locate_table',
    'parse_document',
    # Rows and cells
    'extract_rows',
    'parse_row',
    'clean_cell_text',
    # Values
    'parse_seconds_to_midnight',
]
