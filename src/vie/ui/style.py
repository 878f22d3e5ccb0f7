"""Cell colors and styles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union


class NamedColor(str, Enum):
    RESET = "reset"
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    GRAY = "gray"
    DARK_GRAY = "dark_gray"
    LIGHT_RED = "light_red"
    LIGHT_GREEN = "light_green"
    LIGHT_YELLOW = "light_yellow"
    LIGHT_BLUE = "light_blue"
    LIGHT_MAGENTA = "light_magenta"
    LIGHT_CYAN = "light_cyan"
    WHITE = "white"


# Position of each named color in the 16-color terminal palette.
ANSI_INDEX = {
    NamedColor.BLACK: 0,
    NamedColor.RED: 1,
    NamedColor.GREEN: 2,
    NamedColor.YELLOW: 3,
    NamedColor.BLUE: 4,
    NamedColor.MAGENTA: 5,
    NamedColor.CYAN: 6,
    NamedColor.GRAY: 7,
    NamedColor.DARK_GRAY: 8,
    NamedColor.LIGHT_RED: 9,
    NamedColor.LIGHT_GREEN: 10,
    NamedColor.LIGHT_YELLOW: 11,
    NamedColor.LIGHT_BLUE: 12,
    NamedColor.LIGHT_MAGENTA: 13,
    NamedColor.LIGHT_CYAN: 14,
    NamedColor.WHITE: 15,
}


def _check_byte(value: int, label: str) -> int:
    if not 0 <= value <= 255:
        raise ValueError(f"{label} must be within 0..255, got {value}")
    return value


@dataclass(frozen=True, slots=True)
class Color:
    """Terminal color: a named color, a 256-palette index or an RGB triple.

    ``Color.of("reset")`` (``RESET_COLOR``) is the terminal default.
    """

    named: Optional[NamedColor] = None
    index: Optional[int] = None
    rgb: Optional[Tuple[int, int, int]] = None

    def __post_init__(self) -> None:
        chosen = [v for v in (self.named, self.index, self.rgb) if v is not None]
        if len(chosen) != 1:
            raise ValueError("Color needs exactly one of named, index or rgb")
        if self.index is not None:
            _check_byte(self.index, "ANSI index")
        if self.rgb is not None:
            for channel in self.rgb:
                _check_byte(channel, "RGB channel")

    @classmethod
    def of(cls, name: Union[NamedColor, str]) -> "Color":
        return cls(named=NamedColor(name))

    @classmethod
    def ansi(cls, index: int) -> "Color":
        return cls(index=index)

    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int) -> "Color":
        return cls(rgb=(red, green, blue))

    @property
    def is_reset(self) -> bool:
        return self.named is NamedColor.RESET

    def __repr__(self) -> str:
        if self.named is not None:
            return f"Color.of({self.named.value!r})"
        if self.index is not None:
            return f"Color.ansi({self.index})"
        return "Color.from_rgb({}, {}, {})".format(*self.rgb or (0, 0, 0))


RESET_COLOR = Color(named=NamedColor.RESET)


@dataclass(frozen=True, slots=True)
class Style:
    """Foreground and background of a cell."""

    foreground: Color = RESET_COLOR
    background: Color = RESET_COLOR


DEFAULT_STYLE = Style()

__all__ = ["Color", "NamedColor", "Style", "DEFAULT_STYLE", "RESET_COLOR", "ANSI_INDEX"]
