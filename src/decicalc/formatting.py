"""Rendering of decimal values as display text."""

from decimal import Decimal

ZERO_TEXT = "0"
TOO_LONG_VALUE_TEXT = "too long value"
INFINITY_TEXT = "∞"

# Terminal renderings that read back as zero
SENTINEL_TEXTS = frozenset({TOO_LONG_VALUE_TEXT, INFINITY_TEXT})


def format_number(value: Decimal) -> str:
    """
    Render a decimal in plain positional notation.

    Zero renders as "0" whatever its sign or scale, trailing fractional
    zeros are stripped and whole values carry no decimal point.

    Example:
        >>> format_number(Decimal("12.500000"))
        '12.5'
        >>> format_number(Decimal("1E+3"))
        '1000'
    """
    if value == 0:
        return ZERO_TEXT

    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def is_sentinel(text: str) -> bool:
    return text in SENTINEL_TEXTS
