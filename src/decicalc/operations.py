"""Arbitrary-precision arithmetic with display-bound rounding."""

import math
from decimal import ROUND_DOWN, ROUND_HALF_UP, Context, Decimal, Overflow

from decicalc.exceptions import DivisionByZeroError, NumberFormatError, TooLongValueError
from decicalc.validators import MAX_NUMBER_LENGTH, MAX_PRECISION, number_length

# Wide enough that sums and products of display-sized operands are exact
ARITHMETIC_CONTEXT = Context(prec=4 * MAX_NUMBER_LENGTH + MAX_PRECISION, rounding=ROUND_HALF_UP)

# Truncating quotients first keeps the later half-up rounding exact
DIVISION_CONTEXT = Context(prec=4 * MAX_NUMBER_LENGTH + MAX_PRECISION, rounding=ROUND_DOWN)

PRECISION_QUANTUM = Decimal(1).scaleb(-MAX_PRECISION)

MAX_NUMBER = Decimal("9" * MAX_NUMBER_LENGTH)


def from_float(value: float) -> Decimal:
    """Convert a float through its shortest repr, not its binary expansion."""
    return Decimal(repr(value))


def round_to_precision(value: Decimal) -> Decimal:
    """
    Round to MAX_PRECISION fractional digits, half-up.

    Raises:
        TooLongValueError: If the integer part alone cannot fit the display
    """
    if value and value.adjusted() >= MAX_NUMBER_LENGTH:
        raise TooLongValueError(value, "rounding")

    return value.quantize(PRECISION_QUANTUM, rounding=ROUND_HALF_UP, context=ARITHMETIC_CONTEXT)


def strip_trailing_zeros(value: Decimal) -> Decimal:
    return value.normalize(ARITHMETIC_CONTEXT)


def is_integer(value: Decimal) -> bool:
    return value == value.to_integral_value(rounding=ROUND_HALF_UP)


# Left operands above this cannot be raised past the square without overflowing
POWER_GUARD_THRESHOLD = round_to_precision(from_float(math.sqrt(float(MAX_NUMBER))))


def add(a: Decimal, b: Decimal) -> Decimal:
    """Exact sum of a and b."""
    return ARITHMETIC_CONTEXT.add(a, b)


def subtract(a: Decimal, b: Decimal) -> Decimal:
    """Exact difference of a and b."""
    return ARITHMETIC_CONTEXT.subtract(a, b)


def multiply(a: Decimal, b: Decimal) -> Decimal:
    """Exact product of a and b."""
    return ARITHMETIC_CONTEXT.multiply(a, b)


def divide(a: Decimal, b: Decimal) -> Decimal:
    """
    Divide a by b, rounded half-up to MAX_PRECISION fractional digits.

    Properties:
        - Identity: divide(a, 1) == a (for a with at most MAX_PRECISION decimals)
        - Trailing zeros stripped: divide(1, 2) == Decimal("0.5")

    Args:
        a: Dividend
        b: Divisor

    Returns:
        Rounded quotient of a and b

    Raises:
        DivisionByZeroError: If b is zero
        TooLongValueError: If the quotient cannot fit the display
    """
    if b == 0:
        raise DivisionByZeroError(a)

    quotient = DIVISION_CONTEXT.divide(a, b)
    return strip_trailing_zeros(round_to_precision(quotient))


def _bounded_product(a: Decimal, b: Decimal) -> Decimal:
    """Exact product, rounded if longer than the display."""
    product = strip_trailing_zeros(multiply(a, b))
    if number_length(product) > MAX_NUMBER_LENGTH:
        product = round_to_precision(product)
        if number_length(product) > MAX_NUMBER_LENGTH:
            raise TooLongValueError(product, "exponentiation")
    return product


def _reciprocal_power(base: Decimal, exponent: int) -> Decimal:
    """base ** exponent for a non-zero base and negative exponent."""
    try:
        result = DIVISION_CONTEXT.power(base, exponent)
    except Overflow as e:
        raise TooLongValueError(base, "exponentiation") from e
    return strip_trailing_zeros(round_to_precision(result))


def integer_power(base: Decimal, exponent: int) -> Decimal:
    """
    Raise base to a whole exponent by repeated exact multiplication.

    Multiplies by squaring, so huge exponents cost a few dozen steps. Each
    intermediate product longer than the display is rounded to
    MAX_PRECISION, so fractional bases stay bounded, while integer growth
    is caught as soon as it overflows. No square beyond the exponent is
    taken, so an intermediate overflow means the result overflows too.
    Rounding happens at different points than in a step-by-step loop, so
    results for fractional bases can differ from one in the last place.

    Negative exponents are computed in one step at working precision and
    rounded once, so a denominator that would round away to zero never
    turns into a division by zero.

    Args:
        base: The base number
        exponent: The whole exponent, possibly negative

    Returns:
        base raised to exponent

    Raises:
        DivisionByZeroError: If base is zero and exponent is negative
        TooLongValueError: If an intermediate product cannot fit the display
    """
    if exponent == 0:
        return Decimal(1)
    if base == 0:
        if exponent < 0:
            raise DivisionByZeroError(Decimal(1))
        return Decimal(0)
    if base == 1:
        return Decimal(1)
    if exponent == 1:
        return base
    if exponent < 0:
        return _reciprocal_power(base, exponent)

    result = Decimal(1)
    square = base
    while True:
        if exponent & 1:
            result = _bounded_product(result, square)
        exponent >>= 1
        if not exponent:
            return result
        square = _bounded_product(square, square)


def float_power(base: Decimal, exponent: Decimal) -> Decimal:
    """
    Raise base to a fractional exponent through floating point.

    Raises:
        NumberFormatError: If the power is undefined in the reals
        TooLongValueError: If the float result overflows
    """
    try:
        result = math.pow(float(base), float(exponent))
    except ValueError as e:
        raise NumberFormatError((base, exponent), "power is undefined") from e
    except OverflowError as e:
        raise TooLongValueError((base, exponent), "exponentiation") from e

    return round_to_precision(from_float(result))


def power(base: Decimal, exponent: Decimal) -> Decimal:
    """
    Raise base to exponent.

    Bases above POWER_GUARD_THRESHOLD fail fast for exponents above 2. The
    guard is a heuristic: near the threshold it can reject results that
    would fit, and it ignores negative bases, which the multiplication loop
    catches instead.

    Raises:
        DivisionByZeroError: If base is zero and exponent is negative
        NumberFormatError: If the power is undefined in the reals
        TooLongValueError: If the result cannot fit the display
    """
    if base > POWER_GUARD_THRESHOLD and exponent > 2:
        raise TooLongValueError(base, "exponentiation")

    if is_integer(exponent):
        return integer_power(base, int(exponent))

    return float_power(base, exponent)


def square_root(value: Decimal) -> Decimal:
    """
    Square root through floating point, rounded to MAX_PRECISION.

    Raises:
        NumberFormatError: If value is negative
    """
    try:
        root = math.sqrt(float(value))
    except ValueError as e:
        raise NumberFormatError(value, "square root of a negative number") from e

    return round_to_precision(from_float(root))
