"""Components drawn by the editor around the document view."""

from __future__ import annotations

from dataclasses import dataclass, field

from .frame import Buffer
from .geometry import Position, Rect
from .style import Color, Style

STATUS_BAR_STYLE = Style(
    foreground=Color.from_rgb(63, 63, 63),
    background=Color.from_rgb(239, 239, 239),
)


@dataclass(slots=True)
class StatusBar:
    """Single row summarising mode, file and cursor location."""

    area: Rect
    mode: str
    file_name: str = ""
    line_count: int = 0
    cursor_position: Position = field(default_factory=Position)
    message: str = ""

    def text(self) -> str:
        status = f"Mode: [{self.mode}]    File: {self.file_name}"
        if self.message:
            status = f"{status}    {self.message}"
        indicator = (
            f"L: {self.cursor_position.row}/{self.line_count} "
            f"C: {self.cursor_position.col + 1}"
        )
        padding = self.area.width - len(status) - len(indicator)
        if padding > 0:
            status += " " * padding
        return f"{status}{indicator}"[: self.area.width]

    def render(self, buffer: Buffer) -> None:
        buffer.write_line(self.area.top, self.text(), STATUS_BAR_STYLE)


@dataclass(slots=True)
class CommandLineView:
    """Draws the text typed in execute mode on its own row."""

    area: Rect
    text: str

    def render(self, buffer: Buffer) -> None:
        buffer.write_line(self.area.top, self.text)


__all__ = ["StatusBar", "CommandLineView", "STATUS_BAR_STYLE"]
