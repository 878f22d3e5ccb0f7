"""Grid primitives, frame buffers and the draw cycle."""

from .component import Component
from .frame import BLANK, Buffer, Cell
from .geometry import Position, Rect
from .style import DEFAULT_STYLE, RESET_COLOR, Color, NamedColor, Style
from .viewport import DrawCallback, Frame, Viewport
from .widgets import CommandLineView, StatusBar

__all__ = [
    "BLANK",
    "Buffer",
    "Cell",
    "Color",
    "CommandLineView",
    "Component",
    "DEFAULT_STYLE",
    "DrawCallback",
    "Frame",
    "NamedColor",
    "RESET_COLOR",
    "Position",
    "Rect",
    "StatusBar",
    "Style",
    "Viewport",
]
