"""Normalized key presses accepted by the editor."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class KeyCode(str, Enum):
    ENTER = "enter"
    TAB = "tab"
    BACKSPACE = "backspace"
    ESC = "esc"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    INSERT = "insert"
    DELETE = "delete"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    CHAR = "char"
    CTRL = "ctrl"
    UNKNOWN = "unknown"


_CHARACTER_CODES = frozenset({KeyCode.CHAR, KeyCode.CTRL})


@dataclass(frozen=True, slots=True)
class Key:
    """Single key press.

    ``char`` is set for ``CHAR`` and ``CTRL`` keys only.
    """

    code: KeyCode
    char: Optional[str] = None

    def __post_init__(self) -> None:
        if self.code in _CHARACTER_CODES:
            if not self.char or len(self.char) != 1:
                raise ValueError(f"{self.code.name} key needs exactly one character")
        elif self.char is not None:
            raise ValueError(f"{self.code.name} key does not carry a character")

    @classmethod
    def of(cls, code: KeyCode) -> "Key":
        return cls(code)

    @classmethod
    def character(cls, char: str) -> "Key":
        return cls(KeyCode.CHAR, char)

    @classmethod
    def ctrl(cls, char: str) -> "Key":
        return cls(KeyCode.CTRL, char.lower())

    @property
    def is_char(self) -> bool:
        return self.code is KeyCode.CHAR

    @property
    def printable(self) -> bool:
        return self.is_char and bool(self.char) and self.char.isprintable()

    @property
    def token(self) -> str:
        """Name used by keymap bindings."""

        if self.code is KeyCode.CHAR:
            return str(self.char)
        if self.code is KeyCode.CTRL:
            return f"ctrl+{self.char}"
        return self.code.name

    def __str__(self) -> str:
        return self.token


def keys_from_text(text: str) -> list[Key]:
    """Spell ``text`` out as a sequence of character key presses."""

    return [Key.character(char) for char in text]


__all__ = ["Key", "KeyCode", "keys_from_text"]
