"""
Reusable field validators for Pydantic models.

Designed to be attached with Pydantic's @field_validator decorator so every
model carrying a year or a seconds value enforces the same invariants.
"""


def validate_year(year: int) -> int:
    """
    Validate a 4-digit calendar year.

    Args:
        year: Year to validate

    Returns:
        The year unchanged

    Raises:
        ValueError: If the year is outside 1000..9999

    Example:
        >>> validate_year(1947)
        1947
        >>> validate_year(947)
        Traceback (most recent call last):
        ...
        ValueError: Year must be a 4-digit calendar year, got 947
    """
    if not 1000 <= year <= 9999:
        raise ValueError(f"Year must be a 4-digit calendar year, got {year}")
    return year


def validate_seconds(seconds: int) -> int:
    """
    Validate a seconds-to-midnight value (non-negative integer).

    Args:
        seconds: Seconds remaining before midnight

    Returns:
        The value unchanged

    Raises:
        ValueError: If seconds is negative
    """
    if seconds < 0:
        raise ValueError(f"Seconds to midnight cannot be negative, got {seconds}")
    return seconds
