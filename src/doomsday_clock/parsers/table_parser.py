"""
Table parsing utilities for the timeline table.

Extracts rows of cleaned cell text from an HTML table element.
"""

from typing import List
from lxml import etree


def clean_cell_text(text: str) -> str:
    """
    Normalize text extracted from a cell.

    Entities are already decoded by the HTML parser; non-breaking spaces
    (from &nbsp;) become plain spaces and surrounding whitespace is trimmed.

    Args:
        text: Raw cell text content

    Returns:
        Cleaned text (may be empty)
    """
    return text.replace('\xa0', ' ').strip()


def parse_row(row_elem: etree._Element) -> List[str]:
    """
    Extract non-empty cell strings from a table row.

    Args:
        row_elem: lxml Element for TR

    Returns:
        Cell texts in column order, empty cells dropped
    """
    cells = []
    for cell in row_elem.xpath('./th | ./td'):
        text = clean_cell_text(cell.text_content())
        if text:
            cells.append(text)
    return cells


def extract_rows(table_elem: etree._Element, min_cells: int = 2) -> List[List[str]]:
    """
    Extract rows of cell text from a table.

    Header and spacer rows lack a usable year + value pair, so rows with
    fewer than `min_cells` non-empty cells are skipped.

    Args:
        table_elem: lxml Element for TABLE
        min_cells: Minimum non-empty cells for a row to be kept

    Returns:
        List of rows, each a list of cell strings:
        [
            ['1947', '7', ...],
            ['1949', '3', ...],
            ...
        ]
    """
    rows = []
    for tr in table_elem.iter('tr'):
        row = parse_row(tr)
        if len(row) >= min_cells:
            rows.append(row)
    return rows
