"""Per-session calculators for multi-client embedding."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from decicalc.keypad import Keypad, Snapshot

if TYPE_CHECKING:
    from collections.abc import Callable, Hashable, Iterable

logger = logging.getLogger(__name__)


class CalculatorSession:
    """A keypad whose commands are serialised by a lock."""

    def __init__(self, session_id: Hashable, keypad: Keypad | None = None) -> None:
        self.session_id = session_id
        self._keypad = keypad if keypad is not None else Keypad()
        self._lock = threading.Lock()

    def press(self, label: str) -> Snapshot:
        with self._lock:
            return self._keypad.press(label)

    def feed(self, labels: Iterable[str]) -> Snapshot:
        """Press a whole sequence without interleaving other callers."""
        with self._lock:
            return self._keypad.feed(labels)

    def snapshot(self) -> Snapshot:
        with self._lock:
            return self._keypad.snapshot()

    def __repr__(self) -> str:
        return f"CalculatorSession({self.session_id!r})"


class SessionRegistry:
    """
    Isolated calculators keyed by session id.

    Sessions are created on first use and never share state. Commands
    within one session run one at a time; different sessions run freely.

    Example:
        >>> registry = SessionRegistry()
        >>> registry.press("alice", "7").display
        '7'
        >>> registry.press("bob", "=").display
        '0'
    """

    def __init__(self, keypad_factory: Callable[[], Keypad] = Keypad) -> None:
        self._keypad_factory = keypad_factory
        self._sessions: dict[Hashable, CalculatorSession] = {}
        self._lock = threading.Lock()

    def get(self, session_id: Hashable) -> CalculatorSession:
        """Return the session for an id, creating it if needed."""
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                session = CalculatorSession(session_id, self._keypad_factory())
                self._sessions[session_id] = session
                logger.debug("Created calculator session %r", session_id)
            return session

    def press(self, session_id: Hashable, label: str) -> Snapshot:
        return self.get(session_id).press(label)

    def discard(self, session_id: Hashable) -> bool:
        """Drop a session. Returns whether it existed."""
        with self._lock:
            removed = self._sessions.pop(session_id, None) is not None
        if removed:
            logger.debug("Discarded calculator session %r", session_id)
        return removed

    def __contains__(self, session_id: object) -> bool:
        with self._lock:
            return session_id in self._sessions

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
