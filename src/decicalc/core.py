"""Calculator engine driven by discrete button commands."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from functools import wraps
from typing import TYPE_CHECKING

from decicalc.display import Display, TextDisplay
from decicalc.exceptions import (
    DivisionByZeroError,
    NumberFormatError,
    TooLongValueError,
    UnknownKeyError,
)
from decicalc.formatting import INFINITY_TEXT, TOO_LONG_VALUE_TEXT, ZERO_TEXT, format_number
from decicalc.operations import add, divide, multiply, power, round_to_precision, square_root, subtract
from decicalc.validators import MAX_NUMBER_LENGTH, parse_number, text_length, validate_length

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

DIGITS = "0123456789"


class Mode(Enum):
    """Whether the engine is taking digits or has a result on display."""

    GET_NUMBER = "get_number"
    GET_OPERATION = "get_operation"


class Operator(Enum):
    NONE = "none"
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    POW = "^"


_OPERATIONS: dict[Operator, Callable[[Decimal, Decimal], Decimal]] = {
    Operator.ADD: add,
    Operator.SUB: subtract,
    Operator.MUL: multiply,
    Operator.DIV: divide,
    Operator.POW: power,
}


@dataclass(frozen=True)
class EngineState:
    """Immutable snapshot of the engine state."""

    mode: Mode
    operator: Operator
    left_operand: Decimal
    memory: Decimal

    def __str__(self) -> str:
        return (
            f"{self.mode.name} {self.operator.name} "
            f"left={format_number(self.left_operand)} memory={format_number(self.memory)}"
        )


def command(method: Callable[..., None]) -> Callable[..., Calculator]:
    """
    Run an engine method behind the error-recovery boundary.

    Calculation errors never reach the caller: the display shows the
    matching sentinel and the engine waits for the next operation.
    Unknown keys are caller mistakes and propagate.
    """

    @wraps(method)
    def wrapper(self: Calculator, *args, **kwargs) -> Calculator:
        try:
            method(self, *args, **kwargs)
        except UnknownKeyError:
            raise
        except DivisionByZeroError as e:
            logger.info("%s: %s", method.__name__, e)
            self._recover(INFINITY_TEXT)
        except TooLongValueError as e:
            logger.info("%s: %s", method.__name__, e)
            self._recover(TOO_LONG_VALUE_TEXT)
        except NumberFormatError as e:
            logger.info("%s: %s", method.__name__, e)
            self._recover(ZERO_TEXT)
        except Exception:
            logger.exception("Unexpected failure in %s, resetting", method.__name__)
            self._recover(ZERO_TEXT)
        return self

    return wrapper


class Calculator:
    """
    A button-driven calculator over exact decimal arithmetic.

    The display holds the right operand while digits are entered and the
    formatted result otherwise. Every command returns the calculator, so
    key sequences chain.

    Example:
        >>> calc = Calculator()
        >>> calc.digit(1).divide().digit(3).equals().display_text
        '0.333333'
        >>> calc.multiply().digit(3).equals().display_text
        '0.999999'
    """

    def __init__(self, display: Display | None = None) -> None:
        """
        Initialize the calculator with a zero state.

        Args:
            display: Surface to write to (default: a fresh TextDisplay)
        """
        self._display = display if display is not None else TextDisplay()
        if self._display.length() == 0:
            self._display.set_text(ZERO_TEXT)
        self._mode = Mode.GET_NUMBER
        self._operator = Operator.NONE
        self._left_operand = Decimal(0)
        self._memory = Decimal(0)

    @property
    def display_text(self) -> str:
        return self._display.get_text()

    @property
    def display(self) -> Display:
        return self._display

    @property
    def state(self) -> EngineState:
        """Snapshot of mode, pending operator, left operand and memory."""
        return EngineState(
            mode=self._mode,
            operator=self._operator,
            left_operand=self._left_operand,
            memory=self._memory,
        )

    def bind_display(self, display: Display) -> Calculator:
        """Move to a new display surface, carrying the current text over."""
        text = self._display.get_text()
        self._display = display
        self._display.set_text(text)
        return self

    # Display access

    def _read_value(self) -> Decimal:
        return parse_number(self._display.get_text())

    def _append(self, symbol: str) -> None:
        if text_length(self._display.get_text()) + 1 <= MAX_NUMBER_LENGTH:
            self._display.append(symbol)

    def _show(self, value: Decimal) -> None:
        if value == 0:
            self._display.set_text(ZERO_TEXT)
        else:
            self._display.set_text(format_number(validate_length(value)))

    def _recover(self, text: str) -> None:
        self._display.set_text(text)
        self._mode = Mode.GET_OPERATION
        self._operator = Operator.NONE
        self._left_operand = Decimal(0)

    def _calculate(self) -> Decimal:
        """Apply the pending operator to the left operand and the display."""
        right = self._read_value()
        operation = _OPERATIONS.get(self._operator)
        result = right if operation is None else operation(self._left_operand, right)
        return validate_length(round_to_precision(result), self._operator.name)

    # Entry

    @command
    def digit(self, d: int | str) -> None:
        """Enter a digit; a lone leading zero is never repeated."""
        symbol = str(d)
        if len(symbol) != 1 or symbol not in DIGITS:
            raise UnknownKeyError(symbol)

        if self._mode is not Mode.GET_NUMBER:
            self._mode = Mode.GET_NUMBER
            self._display.set_text("")
        if self._display.get_text() == ZERO_TEXT:
            if symbol == "0":
                return
            self._display.set_text("")
        self._append(symbol)

    @command
    def point(self) -> None:
        self._mode = Mode.GET_NUMBER
        if "." not in self._display.get_text():
            self._append(".")

    @command
    def delete_last(self) -> None:
        """Drop the last character and re-read the left operand from what is left."""
        text = self._display.get_text()
        if len(text) > 1:
            self._mode = Mode.GET_NUMBER
            self._display.set_text(text[:-1])
            self._left_operand = self._read_value()
        elif len(text) == 1:
            self._display.set_text(ZERO_TEXT)

    @command
    def toggle_sign(self) -> None:
        if self._read_value() != 0:
            text = self._display.get_text()
            self._display.set_text(text[1:] if text.startswith("-") else "-" + text)

    @command
    def clear_all(self) -> None:
        """Reset everything except memory."""
        self._mode = Mode.GET_NUMBER
        self._operator = Operator.NONE
        self._left_operand = Decimal(0)
        self._display.set_text(ZERO_TEXT)

    # Evaluation

    @command
    def binary_operator(self, operator: Operator) -> None:
        """
        Select the pending operator.

        While a number is being entered, the previous pending operation is
        evaluated first and its result becomes the left operand. Pressing
        operators in a row only replaces the pending one.
        """
        if operator not in _OPERATIONS:
            raise UnknownKeyError(str(operator))

        if self._mode is Mode.GET_NUMBER:
            self._left_operand = self._calculate()
            self._show(self._left_operand)
            self._mode = Mode.GET_OPERATION
        self._operator = operator

    def add(self) -> Calculator:
        return self.binary_operator(Operator.ADD)

    def subtract(self) -> Calculator:
        return self.binary_operator(Operator.SUB)

    def multiply(self) -> Calculator:
        return self.binary_operator(Operator.MUL)

    def divide(self) -> Calculator:
        return self.binary_operator(Operator.DIV)

    def power(self) -> Calculator:
        return self.binary_operator(Operator.POW)

    @command
    def equals(self) -> None:
        self._left_operand = self._calculate()
        self._show(self._left_operand)
        self._mode = Mode.GET_OPERATION
        self._operator = Operator.NONE

    @command
    def sqrt(self) -> None:
        """Replace the displayed value with its square root, dropping any pending operator."""
        self._left_operand = square_root(self._read_value())
        self._mode = Mode.GET_OPERATION
        self._operator = Operator.NONE
        self._show(self._left_operand)

    # Memory

    @command
    def memory_recall(self) -> None:
        self._show(self._memory)

    @command
    def memory_add(self) -> None:
        self._memory = add(self._memory, self._read_value())

    @command
    def memory_subtract(self) -> None:
        self._memory = subtract(self._memory, self._read_value())

    def __repr__(self) -> str:
        return (
            f"Calculator(display={self.display_text!r}, mode={self._mode.name}, "
            f"operator={self._operator.name})"
        )
