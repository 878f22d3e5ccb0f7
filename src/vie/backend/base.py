"""Interfaces the editor core expects from a terminal backend.

Every method may raise :class:`OSError`; the core turns those into
:class:`vie.errors.BackendError` and stops.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

from .events import Event

if TYPE_CHECKING:  # pragma: no cover - typing only
    from vie.ui.frame import Cell
    from vie.ui.geometry import Rect


class Canvas(Protocol):
    """Character-grid surface the viewport draws to."""

    def clear(self) -> None:
        ...

    def draw(self, cells: Sequence["Cell"]) -> None:
        ...

    def flush(self) -> None:
        ...

    def hide_cursor(self) -> None:
        ...

    def show_cursor(self) -> None:
        ...

    def position_cursor(self, row: int, col: int) -> None:
        ...

    def size(self) -> "Rect":
        ...


class EventLoop(Protocol):
    """Blocking source of input, tick and error events."""

    def read_event(self) -> Event:
        ...


__all__ = ["Canvas", "EventLoop"]
