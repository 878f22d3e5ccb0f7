"""Terminal backend built on blessed.

``TerminalCanvas`` writes the diffed cells with cursor addressing and color
sequences; ``TerminalEventLoop`` polls the keyboard on a background thread
and hands events to the main loop through a queue.
"""

from __future__ import annotations

import queue
import sys
import threading
from contextlib import ExitStack
from typing import IO, List, Optional, Sequence

import blessed
from blessed.keyboard import Keystroke

from vie.runtime import telemetry
from vie.ui.frame import Cell
from vie.ui.geometry import Rect
from vie.ui.style import ANSI_INDEX, Color, DEFAULT_STYLE, Style

from .events import Event
from .keys import Key, KeyCode

_SEQUENCE_KEYS = {
    "KEY_ENTER": KeyCode.ENTER,
    "KEY_TAB": KeyCode.TAB,
    "KEY_BACKSPACE": KeyCode.BACKSPACE,
    "KEY_ESCAPE": KeyCode.ESC,
    "KEY_LEFT": KeyCode.LEFT,
    "KEY_RIGHT": KeyCode.RIGHT,
    "KEY_UP": KeyCode.UP,
    "KEY_DOWN": KeyCode.DOWN,
    "KEY_INSERT": KeyCode.INSERT,
    "KEY_IC": KeyCode.INSERT,
    "KEY_DELETE": KeyCode.DELETE,
    "KEY_DC": KeyCode.DELETE,
    "KEY_HOME": KeyCode.HOME,
    "KEY_END": KeyCode.END,
    "KEY_PGUP": KeyCode.PAGE_UP,
    "KEY_PGDOWN": KeyCode.PAGE_DOWN,
}

_CONTROL_CHARS = {
    "\r": KeyCode.ENTER,
    "\n": KeyCode.ENTER,
    "\t": KeyCode.TAB,
    "\x1b": KeyCode.ESC,
    "\x7f": KeyCode.BACKSPACE,
    "\x08": KeyCode.BACKSPACE,
}


def key_from_keystroke(keystroke: Keystroke) -> Key:
    """Map a blessed keystroke onto the editor's closed key set."""

    if keystroke.is_sequence:
        code = _SEQUENCE_KEYS.get(keystroke.name or "")
        return Key.of(code) if code is not None else Key.of(KeyCode.UNKNOWN)

    text = str(keystroke)
    if len(text) != 1:
        return Key.of(KeyCode.UNKNOWN)
    if text in _CONTROL_CHARS:
        return Key.of(_CONTROL_CHARS[text])
    if ord(text) < 0x20:
        return Key.ctrl(chr(ord(text) + 0x60))
    return Key.character(text)


class TerminalCanvas:
    """Canvas writing to a blessed terminal.

    Use as a context manager: entering switches to the alternate screen and
    cbreak mode, leaving always restores the terminal, even when the editor
    is unwinding from an error.
    """

    def __init__(
        self,
        terminal: Optional[blessed.Terminal] = None,
        *,
        stream: Optional[IO[str]] = None,
    ) -> None:
        self.term = terminal or blessed.Terminal(stream=stream or sys.stdout)
        self.logger = telemetry.get_logger("vie.backend.terminal")
        self._pending: List[str] = []
        self._modes = ExitStack()

    def __enter__(self) -> "TerminalCanvas":
        with ExitStack() as stack:
            stack.enter_context(self.term.fullscreen())
            stack.enter_context(self.term.cbreak())
            # Only reached once both modes are active.
            self._modes = stack.pop_all()
        telemetry.record_event(
            "terminal.acquire",
            data={"width": self.term.width, "height": self.term.height},
            logger_name="vie.backend.terminal",
        )
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self._pending.clear()
        try:
            self._modes.close()
        finally:
            self._modes = ExitStack()
            self._write(self.term.normal + self.term.normal_cursor)
            telemetry.record_event(
                "terminal.release",
                data={"error": exc_type.__name__ if exc_type else None},
                logger_name="vie.backend.terminal",
            )
        return False

    def clear(self) -> None:
        self._pending.append(self.term.home + self.term.clear)

    def draw(self, cells: Sequence[Cell]) -> None:
        current: Style = DEFAULT_STYLE
        for cell in cells:
            self._pending.append(self.term.move_yx(cell.position.row, cell.position.col))
            if cell.style != current:
                self._pending.append(self._style_sequence(cell.style))
                current = cell.style
            self._pending.append(cell.symbol)
        if current != DEFAULT_STYLE:
            self._pending.append(self.term.normal)

    def flush(self) -> None:
        payload = "".join(self._pending)
        self._pending.clear()
        self._write(payload)

    def hide_cursor(self) -> None:
        self._pending.append(self.term.hide_cursor)

    def show_cursor(self) -> None:
        self._pending.append(self.term.normal_cursor)

    def position_cursor(self, row: int, col: int) -> None:
        self._pending.append(self.term.move_yx(row, col))

    def size(self) -> Rect:
        return Rect(self.term.width, self.term.height)

    def _write(self, payload: str) -> None:
        if not payload:
            return
        stream = self.term.stream
        stream.write(payload)
        stream.flush()

    def _style_sequence(self, style: Style) -> str:
        parts = [self.term.normal]
        if not style.foreground.is_reset:
            parts.append(self._color_sequence(style.foreground, background=False))
        if not style.background.is_reset:
            parts.append(self._color_sequence(style.background, background=True))
        return "".join(parts)

    def _color_sequence(self, color: Color, *, background: bool) -> str:
        if color.rgb is not None:
            factory = self.term.on_color_rgb if background else self.term.color_rgb
            return str(factory(*color.rgb))
        index = color.index if color.index is not None else ANSI_INDEX[color.named]
        factory = self.term.on_color if background else self.term.color
        return str(factory(index))


class TerminalEventLoop:
    """Reads keys on a daemon thread and queues them as events.

    The thread blocks on ``inkey`` for at most ``tick_rate`` seconds; when
    nothing arrives it queues a ``Tick``. A read failure queues one final
    ``Error`` and ends the thread.
    """

    def __init__(
        self,
        terminal: blessed.Terminal,
        *,
        tick_rate: float = 0.25,
        start: bool = True,
    ) -> None:
        self.term = terminal
        self.tick_rate = tick_rate
        self.logger = telemetry.get_logger("vie.backend.events")
        self._events: "queue.Queue[Event]" = queue.Queue()
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None
        if start:
            self.start()

    def start(self) -> None:
        if self._thread is not None:
            return
        self._thread = threading.Thread(
            target=self._poll, name="vie-input", daemon=True
        )
        self._thread.start()

    def stop(self) -> None:
        self._stop.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            # inkey returns within tick_rate, so the wait is bounded.
            thread.join(timeout=self.tick_rate * 2)
            if thread.is_alive():
                telemetry.record_event(
                    "events.stop_timeout",
                    level="warning",
                    data={"tick_rate": self.tick_rate},
                    logger_name="vie.backend.events",
                )

    def read_event(self) -> Event:
        if self._thread is None:
            raise RuntimeError("event loop has not been started")
        return self._events.get()

    def _poll(self) -> None:
        while not self._stop.is_set():
            try:
                keystroke = self.term.inkey(timeout=self.tick_rate)
            except (OSError, ValueError) as exc:
                self._events.put(Event.failure(exc))
                return
            if not keystroke:
                self._events.put(Event.tick())
                continue
            self._events.put(Event.input(key_from_keystroke(keystroke)))


__all__ = ["TerminalCanvas", "TerminalEventLoop", "key_from_keystroke"]
