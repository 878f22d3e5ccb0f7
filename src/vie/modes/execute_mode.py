"""Execute mode: the ``:`` command line with inline editing."""

from __future__ import annotations

from vie import commands
from vie.backend.keys import Key
from vie.command_line import CommandLine
from vie.commands import CommandKind, ModeKind
from vie.runtime import telemetry

from .base_mode import Mode, ModeContext, ModeResult
from .keymap_helpers import execute_match, require_keymap_registry

# Commands that edit the command line itself instead of the document.
LINE_EDIT_KINDS = frozenset(
    {
        CommandKind.INSERT_CHAR,
        CommandKind.DELETE_CHAR_FORWARD,
        CommandKind.DELETE_CHAR_BACKWARD,
        CommandKind.MOVE_CURSOR_LEFT,
        CommandKind.MOVE_CURSOR_RIGHT,
        CommandKind.MOVE_CURSOR_LINE_START,
        CommandKind.MOVE_CURSOR_LINE_END,
    }
)


class ExecuteMode(Mode):
    """Owns a fresh :class:`CommandLine` for as long as the mode is active.

    The line is published as ``context.extras["command_line"]`` so the submit
    and abort actions can reach it.
    """

    kind = ModeKind.EXECUTE

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("vie.modes.execute")
        self._keymaps = require_keymap_registry(context)
        self._line = CommandLine()
        self._submitted: str | None = None

    @property
    def command_line(self) -> CommandLine:
        return self._line

    def on_enter(self, previous: ModeKind | None) -> None:
        del previous
        self.context.extras["command_line"] = self._line
        self.context.bus.emit("command.start", None)

    def on_exit(self, next_mode: ModeKind | None) -> None:
        del next_mode
        # Submitting empties the line, so report what was typed instead.
        text = self._submitted if self._submitted is not None else self._line.contents
        self.context.bus.emit("command.end", text)
        if self.context.extras.get("command_line") is self._line:
            del self.context.extras["command_line"]

    def handle_key(self, key: Key) -> ModeResult:
        match = self._keymaps.resolve(self.name, key)
        if match is not None:
            outcome = execute_match(self.context, match)
            if outcome.command is not None and outcome.command.kind in LINE_EDIT_KINDS:
                return self._edit(outcome.command)
            if outcome.status in ("command_submit", "command_error"):
                self._submitted = outcome.message
            return outcome

        if key.printable:
            return self._edit(commands.insert_char(str(key.char)))

        return ModeResult(consumed=False, status="miss", message="unhandled")

    def _edit(self, command: commands.Command) -> ModeResult:
        follow_up = self._line.execute_command(command)
        if follow_up is not None:
            return ModeResult(consumed=True, command=follow_up, status="command_cancel")
        return ModeResult(consumed=True, status="editing", message=self._line.contents)


__all__ = ["ExecuteMode", "LINE_EDIT_KINDS"]
