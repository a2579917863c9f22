"""
Parse "time to midnight" cell text into seconds.

Cells on the source page mix several notations:

    "1+5⁄12(85 s)"   fractional minutes with the exact value in seconds
    "100 s"          seconds only
    "2"              whole minutes

An explicit seconds token always wins; otherwise the first number is read
as minutes.
"""

import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional

# Digits, optional whitespace, then a standalone "s"
SECONDS_PATTERN = re.compile(r'(\d+)\s*s\b', re.IGNORECASE | re.ASCII)

# First signed integer or decimal
NUMBER_PATTERN = re.compile(r'-?\d+(?:\.\d+)?', re.ASCII)

WHITESPACE_PATTERN = re.compile(r'\s+')


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs to single spaces and trim."""
    return WHITESPACE_PATTERN.sub(' ', text).strip()


def minutes_to_seconds(minutes: Decimal) -> Optional[int]:
    """
    Convert minutes to whole seconds, rounding half away from zero.

    Decimal arithmetic keeps values such as 0.0125 minutes (0.75 s) exact
    before rounding. Values too large for the decimal context cannot be
    rounded and yield None.
    """
    try:
        return int((minutes * 60).quantize(Decimal('1'), rounding=ROUND_HALF_UP))
    except InvalidOperation:
        return None


def parse_seconds_to_midnight(text: str) -> Optional[int]:
    """
    Extract seconds-to-midnight from a cell.

    Args:
        text: Decoded cell text

    Returns:
        Seconds as an int, or None if no number can be extracted or the
        number is too large to convert

    Example:
        >>> parse_seconds_to_midnight("1+5⁄12(85 s)")
        85
        >>> parse_seconds_to_midnight("2")
        120
        >>> parse_seconds_to_midnight("n/a") is None
        True
    """
    normalized = normalize_whitespace(text)

    seconds_match = SECONDS_PATTERN.search(normalized)
    if seconds_match:
        try:
            return int(seconds_match.group(1))
        except ValueError:
            # Exceeds the interpreter's integer string conversion limit
            return None

    number_match = NUMBER_PATTERN.search(normalized)
    if not number_match:
        return None

    return minutes_to_seconds(Decimal(number_match.group(0)))
