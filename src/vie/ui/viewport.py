"""Double-buffered draw cycle between the frame buffers and the canvas."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional

from vie.errors import BackendError
from vie.runtime import telemetry

from .component import Component
from .frame import Buffer
from .geometry import Position, Rect

if TYPE_CHECKING:  # pragma: no cover - typing only
    from vie.backend.base import Canvas


class Frame:
    """The next frame to be shown.

    Handed to the draw callback so it can render components into the live
    buffer and choose where the cursor ends up.
    """

    __slots__ = ("_buffer", "cursor_position")

    def __init__(self, buffer: Buffer) -> None:
        self._buffer = buffer
        self.cursor_position = Position()

    @property
    def area(self) -> Rect:
        return self._buffer.area

    def render(self, component: Component) -> None:
        component.render(self._buffer)

    def set_cursor_position(self, position: Position) -> None:
        self.cursor_position = position


DrawCallback = Callable[[Frame], None]


class Viewport:
    """Owns the two frame buffers and drives the canvas."""

    def __init__(self, canvas: Canvas, *, area: Optional[Rect] = None) -> None:
        self.logger = telemetry.get_logger("vie.viewport")
        self._canvas = canvas
        if area is None:
            try:
                area = canvas.size()
            except OSError as exc:
                raise BackendError("unable to set viewport area", cause=exc) from exc
        self._area = area
        self._buffers = (Buffer.empty(area), Buffer.empty(area))
        self._current = 0

    @property
    def area(self) -> Rect:
        return self._area

    @property
    def current_buffer_index(self) -> int:
        return self._current

    @property
    def current_buffer(self) -> Buffer:
        return self._buffers[self._current]

    @property
    def previous_buffer(self) -> Buffer:
        return self._buffers[1 - self._current]

    def draw(self, render: DrawCallback) -> None:
        """Render a frame and send only the changed cells to the canvas.

        Any canvas failure aborts the draw before the buffers are swapped,
        so the next draw still diffs against what is really on screen.
        """

        with telemetry.span(
            "viewport::draw",
            logger_name="vie.viewport",
            component="viewport",
            metadata={"buffer": self._current},
        ) as handle:
            current = self._buffers[self._current]
            try:
                self._call("unable to hide cursor pre draw", self._canvas.hide_cursor)

                frame = Frame(current)
                render(frame)

                changes = self.previous_buffer.diff(current)
                handle.add_metadata("changed_cells", len(changes))

                self._call("unable to draw buffer diff", self._canvas.draw, changes)
                cursor = frame.cursor_position
                self._call(
                    "unable to set cursor position for next frame render",
                    self._canvas.position_cursor,
                    cursor.row,
                    cursor.col,
                )
                self._call("unable to show cursor post draw", self._canvas.show_cursor)
            except Exception:
                # The half-rendered frame must not be diffed by the retry.
                current.reset()
                raise

            self._swap_buffers()

            self._call("unable to flush canvas", self._canvas.flush)
            telemetry.record_event(
                "viewport.draw",
                level="debug",
                data={"changed_cells": len(changes), "buffer": self._current},
                logger_name="vie.viewport",
            )

    def clear(self) -> None:
        """Wipe the screen and forget what was drawn last."""

        self._call("unable to clear canvas", self._canvas.clear)
        for buffer in self._buffers:
            buffer.reset()

    def _swap_buffers(self) -> None:
        self._buffers[1 - self._current].reset()
        self._current = 1 - self._current

    def _call(self, context: str, operation: Callable[..., object], *args: object) -> None:
        try:
            operation(*args)
        except OSError as exc:
            raise BackendError(context, cause=exc) from exc


__all__ = ["Frame", "Viewport", "DrawCallback"]
