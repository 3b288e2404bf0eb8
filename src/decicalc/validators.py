"""Parsing and length validation for display text."""

import re
from decimal import Decimal

from decicalc.exceptions import NumberFormatError, TooLongValueError
from decicalc.formatting import format_number, is_sentinel

# Display limits
MAX_NUMBER_LENGTH = 30
MAX_PRECISION = 6

_NUMBER_PATTERN = re.compile(r"-?(?:\d+\.?\d*|\.\d+)")


def parse_number(text: str) -> Decimal:
    """
    Read display text as a decimal.

    Sentinel renderings ("∞", "too long value") read as zero. Partial
    entries such as "5." are accepted; exponents, NaN and infinity are not.

    Args:
        text: The display text

    Returns:
        The exact decimal value of the text

    Raises:
        NumberFormatError: If the text is not a plain decimal number
    """
    if is_sentinel(text):
        return Decimal(0)

    if not _NUMBER_PATTERN.fullmatch(text):
        raise NumberFormatError(text)

    return Decimal(text)


def text_length(text: str) -> int:
    """Length of display text, not counting a leading minus sign."""
    return len(text) - (1 if text.startswith("-") else 0)


def number_length(value: Decimal) -> int:
    """Length of the rendered value, not counting its sign."""
    return text_length(format_number(value))


def validate_length(value: Decimal, operation: str | None = None) -> Decimal:
    """
    Validate that a value fits the display.

    Args:
        value: The value to validate
        operation: Name of the operation that produced it, for error context

    Returns:
        The validated value

    Raises:
        TooLongValueError: If the rendered value exceeds MAX_NUMBER_LENGTH
    """
    if number_length(value) > MAX_NUMBER_LENGTH:
        raise TooLongValueError(value, operation)

    return value
