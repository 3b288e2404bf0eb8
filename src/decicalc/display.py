"""Display surfaces the engine writes its text to."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Display(Protocol):
    """
    Text surface holding the number being entered or the last result.

    The engine only reads and writes text; rendering belongs to the
    implementation (a widget, a web response, a terminal line).
    """

    def get_text(self) -> str: ...

    def set_text(self, text: str) -> None: ...

    def append(self, text: str) -> None: ...

    def length(self) -> int: ...


class TextDisplay:
    """In-memory display."""

    def __init__(self, text: str = "0") -> None:
        self._text = text

    def get_text(self) -> str:
        return self._text

    def set_text(self, text: str) -> None:
        self._text = text

    def append(self, text: str) -> None:
        self._text += text

    def length(self) -> int:
        return len(self._text)

    def __repr__(self) -> str:
        return f"TextDisplay({self._text!r})"
