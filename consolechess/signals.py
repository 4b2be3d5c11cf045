"""Minimal signal/slot plumbing and the game's notification hubs."""

from __future__ import annotations

from typing import Any, Callable


class Connection:
    """Handle to one slot connected to a signal."""

    def __init__(self, signal: Signal, slot: Callable[..., Any]) -> None:
        self._signal = signal
        self._slot = slot
        self._connected = True

    @property
    def connected(self) -> bool:
        return self._connected

    def disconnect(self) -> None:
        """Stop the slot from receiving further emissions; repeating this is harmless."""
        if self._connected:
            self._connected = False
            self._signal._remove(self)


class Signal:
    """Calls its connected slots, in connection order, each time it is emitted."""

    def __init__(self) -> None:
        self._connections: list[Connection] = []

    def connect(self, slot: Callable[..., Any]) -> Connection:
        connection = Connection(self, slot)
        self._connections.append(connection)
        return connection

    def emit(self, *args: Any) -> None:
        for connection in list(self._connections):
            if connection.connected:
                connection._slot(*args)

    __call__ = emit

    def __len__(self) -> int:
        return len(self._connections)

    def _remove(self, connection: Connection) -> None:
        try:
            self._connections.remove(connection)
        except ValueError:
            pass


class PieceSignalDirector:
    """Announces finished moves, with and without the resulting check state."""

    def __init__(self) -> None:
        self._move_signal = Signal()
        self._move_with_check_signal = Signal()

    def connect_move(self, subscriber: Callable[[], Any]) -> Connection:
        return self._move_signal.connect(subscriber)

    def connect_move_with_check(self, subscriber: Callable[[bool], Any]) -> Connection:
        return self._move_with_check_signal.connect(subscriber)

    def invite(self) -> None:
        self._move_signal.emit()

    def invite_check(self, is_check: bool) -> None:
        self._move_with_check_signal.emit(is_check)


class Inputer:
    """Base for input sources that announce their prompts to subscribers."""

    def __init__(self) -> None:
        self._signal_enter = Signal()

    def connect_enter(self, subscriber: Callable[[str], Any]) -> Connection:
        return self._signal_enter.connect(subscriber)

    def _prompt(self, text: str) -> None:
        self._signal_enter.emit(text)