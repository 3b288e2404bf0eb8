"""Custom exceptions for the decicalc package."""

from typing import Any


class CalculatorError(Exception):
    """Base exception for all calculator errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value}"
        return self.message


class DivisionByZeroError(CalculatorError):
    """Raised when the right operand of a division is zero."""

    def __init__(self, numerator: Any) -> None:
        super().__init__("Division by zero", numerator)
        self.numerator = numerator


class TooLongValueError(CalculatorError):
    """Raised when a result cannot be shown within the display length cap."""

    def __init__(self, value: Any = None, operation: str | None = None) -> None:
        message = "Value too long" if operation is None else f"Value too long in {operation}"
        super().__init__(message, value)
        self.operation = operation


class NumberFormatError(CalculatorError):
    """Raised when display text is not a number, or a float domain error occurs."""

    def __init__(self, value: Any, reason: str = "malformed number") -> None:
        super().__init__(reason, value)
        self.reason = reason


class UnknownKeyError(CalculatorError):
    """Raised by the keypad when a label maps to no command."""

    def __init__(self, label: str) -> None:
        super().__init__("Unknown key", label)
        self.label = label
