"""Main loop tying the event source, the mode engine and the viewport."""

from __future__ import annotations

from typing import Callable, Optional

from vie.backend.base import Canvas, EventLoop
from vie.backend.events import Event, EventKind
from vie.commands import Command, CommandKind, ModeKind
from vie.config import EditorConfig
from vie.errors import BackendError
from vie.modes.base_mode import ModeBus, ModeResult
from vie.modes.execute_mode import ExecuteMode
from vie.modes.mode_manager import ModeManager, create_default_manager
from vie.runtime import telemetry
from vie.ui.geometry import Position, Rect
from vie.ui.viewport import Frame, Viewport
from vie.ui.widgets import CommandLineView, StatusBar

Dispatch = Callable[[Command], None]


class Editor:
    """Reads events until a ``Quit`` command arrives, redrawing after each.

    Commands other than ``Quit`` go to ``dispatch``, the document layer.
    That layer reports back through ``cursor_position`` and ``line_count``,
    which the status bar displays.
    """

    def __init__(
        self,
        event_loop: EventLoop,
        canvas: Canvas,
        config: Optional[EditorConfig] = None,
        *,
        dispatch: Optional[Dispatch] = None,
        file_name: str = "",
        bus: Optional[ModeBus] = None,
    ) -> None:
        self.logger = telemetry.get_logger("vie.editor")
        self.config = config or EditorConfig()
        self.viewport = Viewport(canvas)
        self.manager: ModeManager = create_default_manager(self.config, bus=bus)
        self.file_name = file_name
        self.cursor_position = Position()
        self.line_count = 0
        self.message = ""
        self._event_loop = event_loop
        self._dispatch = dispatch
        self._should_quit = False

        area = self.viewport.area
        self.status_area = Rect.positioned(area.width, 1, area.left, max(area.bottom - 2, 0))
        self.command_area = Rect.positioned(area.width, 1, area.left, max(area.bottom - 1, 0))

    @property
    def mode(self) -> ModeKind:
        kind = self.manager.active_kind
        if kind is None:  # pragma: no cover - default manager always has a mode
            raise RuntimeError("No active mode registered")
        return kind

    @property
    def should_quit(self) -> bool:
        return self._should_quit

    def run(self) -> None:
        telemetry.record_event(
            "editor.start", data={"file": self.file_name}, logger_name="vie.editor"
        )
        while not self._should_quit:
            self.handle_event(self._event_loop.read_event())
            self.render()
        telemetry.record_event("editor.stop", logger_name="vie.editor")

    def handle_event(self, event: Event) -> None:
        if event.kind is EventKind.ERROR:
            raise BackendError("unable to read event", cause=event.error) from event.error
        if event.kind is EventKind.TICK or event.key is None:
            return

        self.message = ""
        result = self.manager.handle_key(event.key)
        self._handle_result(result)

    def _handle_result(self, result: ModeResult) -> None:
        if result.status == "command_error":
            self.message = f"Not an editor command: {result.message}"
        command = result.command
        if command is None or command.kind is CommandKind.ENTER_MODE:
            return
        if command.kind is CommandKind.QUIT:
            self._should_quit = True
            return
        if self._dispatch is not None:
            self._dispatch(command)

    def render(self) -> None:
        active = self.manager.active_mode

        def draw(frame: Frame) -> None:
            frame.render(
                StatusBar(
                    area=self.status_area,
                    mode=self.mode.label,
                    file_name=self.file_name,
                    line_count=self.line_count,
                    cursor_position=self.cursor_position,
                    message=self.message,
                )
            )
            if isinstance(active, ExecuteMode):
                line = active.command_line
                frame.render(CommandLineView(area=self.command_area, text=line.contents))
                frame.set_cursor_position(
                    Position(
                        col=self.command_area.left + line.cursor_col,
                        row=self.command_area.top,
                    )
                )
            else:
                frame.set_cursor_position(self.cursor_position)

        self.viewport.draw(draw)


__all__ = ["Editor", "Dispatch"]
