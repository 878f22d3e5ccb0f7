from __future__ import annotations

from collections import deque
from typing import Iterable, Optional, Sequence

import pytest

from vie.backend.events import Event
from vie.backend.keys import Key
from vie.ui.frame import Cell
from vie.ui.geometry import Rect


class RecordingCanvas:
    """Canvas double that records every call in order.

    ``fail_on`` names an operation (``"draw"``, ``"flush"``, ...) that raises
    ``OSError`` instead of being recorded.
    """

    def __init__(self, width: int = 10, height: int = 10) -> None:
        self.area = Rect(width, height)
        self.calls: list[tuple] = []
        self.fail_on: Optional[str] = None
        self.drawn: list[list[Cell]] = []

    def _check(self, operation: str) -> None:
        if self.fail_on == operation:
            raise OSError(f"{operation} failed")

    def clear(self) -> None:
        self._check("clear")
        self.calls.append(("clear",))

    def draw(self, cells: Sequence[Cell]) -> None:
        self._check("draw")
        cells = list(cells)
        self.drawn.append(cells)
        self.calls.append(("draw", "".join(cell.symbol for cell in cells)))

    def flush(self) -> None:
        self._check("flush")
        self.calls.append(("flush",))

    def hide_cursor(self) -> None:
        self._check("hide")
        self.calls.append(("hide",))

    def show_cursor(self) -> None:
        self._check("show")
        self.calls.append(("show",))

    def position_cursor(self, row: int, col: int) -> None:
        self._check("position")
        self.calls.append(("position", row, col))

    def size(self) -> Rect:
        self._check("size")
        return self.area


class ScriptedEventLoop:
    """Event loop double replaying a fixed list of events."""

    def __init__(self, events: Iterable[Event] = ()) -> None:
        self.events: deque[Event] = deque(events)

    def push_keys(self, *keys: Key) -> None:
        self.events.extend(Event.input(key) for key in keys)

    def read_event(self) -> Event:
        if not self.events:
            raise AssertionError("event loop ran out of scripted events")
        return self.events.popleft()


@pytest.fixture
def canvas() -> RecordingCanvas:
    return RecordingCanvas()


@pytest.fixture
def event_loop() -> ScriptedEventLoop:
    return ScriptedEventLoop()
