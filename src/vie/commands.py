"""Editing intents produced by the mode engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class ModeKind(str, Enum):
    NORMAL = "normal"
    INSERT = "insert"
    EXECUTE = "execute"

    @property
    def label(self) -> str:
        return self.value.upper()


class CommandKind(str, Enum):
    ENTER_MODE = "enter_mode"
    INSERT_CHAR = "insert_char"
    INSERT_LINE_BREAK = "insert_line_break"
    DELETE_CHAR_FORWARD = "delete_char_forward"
    DELETE_CHAR_BACKWARD = "delete_char_backward"
    MOVE_CURSOR_UP = "move_cursor_up"
    MOVE_CURSOR_DOWN = "move_cursor_down"
    MOVE_CURSOR_LEFT = "move_cursor_left"
    MOVE_CURSOR_RIGHT = "move_cursor_right"
    MOVE_CURSOR_LINE_START = "move_cursor_line_start"
    MOVE_CURSOR_LINE_END = "move_cursor_line_end"
    MOVE_CURSOR_PAGE_UP = "move_cursor_page_up"
    MOVE_CURSOR_PAGE_DOWN = "move_cursor_page_down"
    SAVE = "save"
    SAVE_AS = "save_as"
    QUIT = "quit"


COUNTED_KINDS = frozenset(
    {
        CommandKind.MOVE_CURSOR_UP,
        CommandKind.MOVE_CURSOR_DOWN,
        CommandKind.MOVE_CURSOR_LEFT,
        CommandKind.MOVE_CURSOR_RIGHT,
    }
)

Argument = Union[ModeKind, str, int, None]


@dataclass(frozen=True, slots=True)
class Command:
    """A single editing intent.

    ``argument`` depends on ``kind``: the target :class:`ModeKind` for
    ``ENTER_MODE``, the character for ``INSERT_CHAR``, the repeat count for
    the four directional moves and the file name for ``SAVE_AS``.
    """

    kind: CommandKind
    argument: Argument = None

    def __post_init__(self) -> None:
        kind = self.kind
        arg = self.argument
        if kind is CommandKind.ENTER_MODE:
            if not isinstance(arg, ModeKind):
                raise TypeError("ENTER_MODE needs a ModeKind")
        elif kind is CommandKind.INSERT_CHAR:
            if not isinstance(arg, str) or len(arg) != 1:
                raise TypeError("INSERT_CHAR needs a single character")
        elif kind in COUNTED_KINDS:
            if isinstance(arg, bool) or not isinstance(arg, int) or arg < 1:
                raise ValueError(f"{kind.name} needs a positive count")
        elif kind is CommandKind.SAVE_AS:
            if not isinstance(arg, str) or not arg:
                raise ValueError("SAVE_AS needs a file name")
        elif arg is not None:
            raise TypeError(f"{kind.name} takes no argument")

    @property
    def count(self) -> int:
        return self.argument if self.kind in COUNTED_KINDS else 1  # type: ignore[return-value]

    @property
    def mode(self) -> Optional[ModeKind]:
        return self.argument if self.kind is CommandKind.ENTER_MODE else None  # type: ignore[return-value]

    def __repr__(self) -> str:
        if self.argument is None:
            return f"Command({self.kind.name})"
        return f"Command({self.kind.name}, {self.argument!r})"


def enter_mode(mode: ModeKind) -> Command:
    return Command(CommandKind.ENTER_MODE, mode)


def insert_char(char: str) -> Command:
    return Command(CommandKind.INSERT_CHAR, char)


def insert_line_break() -> Command:
    return Command(CommandKind.INSERT_LINE_BREAK)


def delete_char_forward() -> Command:
    return Command(CommandKind.DELETE_CHAR_FORWARD)


def delete_char_backward() -> Command:
    return Command(CommandKind.DELETE_CHAR_BACKWARD)


def move_up(count: int = 1) -> Command:
    return Command(CommandKind.MOVE_CURSOR_UP, count)


def move_down(count: int = 1) -> Command:
    return Command(CommandKind.MOVE_CURSOR_DOWN, count)


def move_left(count: int = 1) -> Command:
    return Command(CommandKind.MOVE_CURSOR_LEFT, count)


def move_right(count: int = 1) -> Command:
    return Command(CommandKind.MOVE_CURSOR_RIGHT, count)


def move_line_start() -> Command:
    return Command(CommandKind.MOVE_CURSOR_LINE_START)


def move_line_end() -> Command:
    return Command(CommandKind.MOVE_CURSOR_LINE_END)


def move_page_up() -> Command:
    return Command(CommandKind.MOVE_CURSOR_PAGE_UP)


def move_page_down() -> Command:
    return Command(CommandKind.MOVE_CURSOR_PAGE_DOWN)


def save() -> Command:
    return Command(CommandKind.SAVE)


def save_as(name: str) -> Command:
    return Command(CommandKind.SAVE_AS, name)


def quit_editor() -> Command:
    return Command(CommandKind.QUIT)


__all__ = [
    "Command",
    "CommandKind",
    "ModeKind",
    "COUNTED_KINDS",
    "enter_mode",
    "insert_char",
    "insert_line_break",
    "delete_char_forward",
    "delete_char_backward",
    "move_up",
    "move_down",
    "move_left",
    "move_right",
    "move_line_start",
    "move_line_end",
    "move_page_up",
    "move_page_down",
    "save",
    "save_as",
    "quit_editor",
]
