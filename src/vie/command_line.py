"""Editable command-line row and the grammar evaluated on submit.

The grammar is anchored at both ends::

    command   := ':' (quit | save | save_as)
    quit      := 'q'
    save      := 'w'
    save_as   := 'w' ' ' filename      ; one or more characters, verbatim
"""

from __future__ import annotations

import re
from typing import Optional

from vie import commands
from vie.commands import Command, CommandKind, ModeKind

PROMPT = ":"

_GRAMMAR = re.compile(r":(?:(?P<quit>q)|(?P<save>w)(?: (?P<filename>.+))?)", re.DOTALL)


def parse_command_line(text: str) -> Optional[Command]:
    """Return the command spelled by ``text`` or ``None`` if not recognised."""

    match = _GRAMMAR.fullmatch(text)
    if match is None:
        return None
    if match.group("quit"):
        return commands.quit_editor()
    filename = match.group("filename")
    if filename is not None:
        return commands.save_as(filename)
    return commands.save()


class CommandLine:
    """Text typed in execute mode plus the cursor column within it.

    The row always starts with the ``:`` prompt; the cursor never moves in
    front of it.
    """

    def __init__(self) -> None:
        self._text = PROMPT
        self._cursor = len(PROMPT)

    @property
    def contents(self) -> str:
        return self._text

    @property
    def cursor_col(self) -> int:
        return self._cursor

    def __len__(self) -> int:
        return len(self._text)

    def reset(self) -> None:
        self._text = PROMPT
        self._cursor = len(PROMPT)

    def execute_command(self, command: Command) -> Optional[Command]:
        """Apply an editing command to the row.

        Returns ``EnterMode(NORMAL)`` when the edit empties the row, which
        means the command line should be abandoned. Commands that do not edit
        a single line are ignored.
        """

        kind = command.kind
        start = len(PROMPT)
        if kind is CommandKind.INSERT_CHAR:
            char = str(command.argument)
            self._text = self._text[: self._cursor] + char + self._text[self._cursor :]
            self._cursor += 1
        elif kind is CommandKind.MOVE_CURSOR_LEFT:
            self._cursor = max(start, self._cursor - command.count)
        elif kind is CommandKind.MOVE_CURSOR_RIGHT:
            self._cursor = min(len(self._text), self._cursor + command.count)
        elif kind is CommandKind.MOVE_CURSOR_LINE_START:
            self._cursor = start
        elif kind is CommandKind.MOVE_CURSOR_LINE_END:
            self._cursor = len(self._text)
        elif kind is CommandKind.DELETE_CHAR_FORWARD:
            if self._cursor < len(self._text):
                self._text = self._text[: self._cursor] + self._text[self._cursor + 1 :]
            return self._abandon_if_empty()
        elif kind is CommandKind.DELETE_CHAR_BACKWARD:
            if self._cursor > start:
                self._cursor -= 1
                self._text = self._text[: self._cursor] + self._text[self._cursor + 1 :]
            return self._abandon_if_empty()
        return None

    def take(self) -> str:
        """Return the typed text and clear the row."""

        text = self._text
        self.reset()
        return text

    def _abandon_if_empty(self) -> Optional[Command]:
        if len(self._text) > len(PROMPT):
            return None
        self.reset()
        return commands.enter_mode(ModeKind.NORMAL)

    def __repr__(self) -> str:
        return f"CommandLine({self._text!r}, cursor={self._cursor})"


__all__ = ["CommandLine", "PROMPT", "parse_command_line"]
