"""
Locate the timeline table inside the encyclopedia page.

The page carries exactly one relevant table next to the text
"Timeline of the Doomsday Clock" (its caption on the live page). The marker
is searched in text content and attribute values, in document order, and
the table is selected by proximity:

1. the nearest <table> enclosing the first marker occurrence, or
2. failing that, the nearest <table> following it (marker used as a heading).
"""

import logging
from typing import Optional
from lxml import etree, html

from doomsday_clock.config import TIMELINE_MARKER
from doomsday_clock.exceptions import StructureError

logger = logging.getLogger(__name__)


def parse_document(document: str) -> etree._Element:
    """
    Parse an HTML document into an lxml tree.

    Args:
        document: Raw page markup

    Returns:
        Root <html> element

    Raises:
        StructureError: If the document is empty or cannot be parsed
    """
    if not document or not document.strip():
        raise StructureError("Document is empty")

    try:
        return html.document_fromstring(document)
    except (etree.ParserError, ValueError) as e:
        raise StructureError(f"Could not parse document: {e}") from e


def find_marker_anchor(root: etree._Element, marker: str) -> Optional[etree._Element]:
    """
    Find the element carrying the first occurrence of the marker.

    Text nodes and attribute values are searched together; the XPath union
    returns them in document order.

    Args:
        root: Parsed document
        marker: Literal text to look for

    Returns:
        Element owning the matching text/attribute, or None if absent
    """
    hits = root.xpath(
        '(//text()[contains(., $marker)] | //@*[contains(., $marker)])',
        marker=marker
    )
    if not hits:
        return None

    first = hits[0]
    anchor = first.getparent()
    # Tail text lives inside the parent of the element it trails
    if getattr(first, 'is_tail', False) and anchor.getparent() is not None:
        anchor = anchor.getparent()
    return anchor


def locate_table(document: str, marker: str = TIMELINE_MARKER) -> etree._Element:
    """
    Return the <table> element nearest to the marker text.

    When the marker sits outside any table, the first following table is
    returned even if no table precedes the marker; this intentionally
    differs from a raw "<table ... </table>" offset scan around the marker,
    which fails in that case and spans both tables when tables surround it.

    Args:
        document: Raw page markup
        marker: Literal text identifying the timeline table

    Returns:
        lxml Element for the timeline TABLE

    Raises:
        StructureError: If the marker is missing or no table surrounds/follows it

    Example:
        >>> table = locate_table(page_html)
        >>> table.tag
        'table'
    """
    root = parse_document(document)

    anchor = find_marker_anchor(root, marker)
    if anchor is None:
        raise StructureError("Could not find timeline section")

    if anchor.tag == 'table':
        return anchor

    enclosing = next(anchor.iterancestors('table'), None)
    if enclosing is not None:
        logger.debug(f"Marker found inside <{anchor.tag}> of enclosing table")
        return enclosing

    following = anchor.xpath('following::table[1]')
    if following:
        logger.debug(f"Marker found in <{anchor.tag}>, using following table")
        return following[0]

    raise StructureError("Could not locate timeline table")
