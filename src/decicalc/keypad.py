"""Keypad adapter translating button labels into engine commands."""

from __future__ import annotations

from dataclasses import dataclass
from operator import methodcaller
from typing import TYPE_CHECKING

from decicalc.core import Calculator, EngineState
from decicalc.exceptions import UnknownKeyError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

# Each row is (labels, engine command); alternate labels cover ASCII and
# typographic variants of the same button.
KEY_DEFINITIONS: list[tuple[tuple[str, ...], Callable[[Calculator], Calculator]]] = [
    *(((str(d),), methodcaller("digit", d)) for d in range(10)),
    ((".",), methodcaller("point")),
    (("+",), methodcaller("add")),
    (("-", "−"), methodcaller("subtract")),
    (("*", "×"), methodcaller("multiply")),
    (("/", "÷"), methodcaller("divide")),
    (("^", "x^y"), methodcaller("power")),
    (("√", "sqrt"), methodcaller("sqrt")),
    (("=",), methodcaller("equals")),
    (("C", "AC"), methodcaller("clear_all")),
    (("⌫", "DEL"), methodcaller("delete_last")),
    (("±", "+/-"), methodcaller("toggle_sign")),
    (("M", "MR"), methodcaller("memory_recall")),
    (("M+",), methodcaller("memory_add")),
    (("M-", "M−"), methodcaller("memory_subtract")),
]

KEYS: dict[str, Callable[[Calculator], Calculator]] = {
    label: action for labels, action in KEY_DEFINITIONS for label in labels
}


@dataclass(frozen=True)
class Snapshot:
    """What a caller sees after a key press: the display text and engine state."""

    display: str
    state: EngineState

    def as_dict(self) -> dict[str, str]:
        return {
            "display": self.display,
            "mode": self.state.mode.name,
            "operator": self.state.operator.name,
            "left_operand": str(self.state.left_operand),
            "memory": str(self.state.memory),
        }


class Keypad:
    """
    Button front end for a Calculator.

    Example:
        >>> Keypad().feed(["1", "2", "+", "3", "="]).display
        '15'
    """

    def __init__(self, calculator: Calculator | None = None) -> None:
        self._calculator = calculator if calculator is not None else Calculator()

    @property
    def calculator(self) -> Calculator:
        return self._calculator

    def snapshot(self) -> Snapshot:
        return Snapshot(display=self._calculator.display_text, state=self._calculator.state)

    def press(self, label: str) -> Snapshot:
        """
        Press one button.

        Args:
            label: Button label, e.g. "7", "÷", "M+"

        Returns:
            The display and state after the command

        Raises:
            UnknownKeyError: If no button carries the label
        """
        try:
            action = KEYS[label]
        except KeyError:
            raise UnknownKeyError(label) from None

        action(self._calculator)
        return self.snapshot()

    def feed(self, labels: Iterable[str]) -> Snapshot:
        """
        Press buttons in order. A plain string is pressed character by
        character, so "12+3=" works but multi-character labels need a list.
        """
        snapshot = self.snapshot()
        for label in labels:
            snapshot = self.press(label)
        return snapshot
