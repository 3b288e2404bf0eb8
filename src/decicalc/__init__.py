"""
Button-driven calculator engine over exact decimal arithmetic.

The package splits into:
- A command state machine (Calculator) writing to an abstract Display
- Decimal arithmetic bounded by a 30-character, 6-decimal display
- A keypad adapter and per-session registry for embedding behind a UI or API
"""

from decicalc.core import Calculator, EngineState, Mode, Operator
from decicalc.display import Display, TextDisplay
from decicalc.exceptions import (
    CalculatorError,
    DivisionByZeroError,
    NumberFormatError,
    TooLongValueError,
    UnknownKeyError,
)
from decicalc.formatting import INFINITY_TEXT, TOO_LONG_VALUE_TEXT, format_number
from decicalc.keypad import Keypad, Snapshot
from decicalc.operations import (
    add,
    divide,
    integer_power,
    multiply,
    power,
    round_to_precision,
    square_root,
    subtract,
)
from decicalc.session import CalculatorSession, SessionRegistry
from decicalc.validators import (
    MAX_NUMBER_LENGTH,
    MAX_PRECISION,
    number_length,
    parse_number,
    validate_length,
)

__all__ = [
    "INFINITY_TEXT",
    "MAX_NUMBER_LENGTH",
    "MAX_PRECISION",
    "TOO_LONG_VALUE_TEXT",
    "Calculator",
    "CalculatorError",
    "CalculatorSession",
    "Display",
    "DivisionByZeroError",
    "EngineState",
    "Keypad",
    "Mode",
    "NumberFormatError",
    "Operator",
    "SessionRegistry",
    "Snapshot",
    "TextDisplay",
    "TooLongValueError",
    "UnknownKeyError",
    "add",
    "divide",
    "format_number",
    "integer_power",
    "multiply",
    "number_length",
    "parse_number",
    "power",
    "round_to_precision",
    "square_root",
    "subtract",
    "validate_length",
]

__version__ = "0.1.0"
