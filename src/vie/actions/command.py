"""Actions that finish or abandon the execute-mode command line."""

from __future__ import annotations

from typing import TYPE_CHECKING

from vie import commands
from vie.command_line import CommandLine, parse_command_line
from vie.commands import ModeKind
from vie.modes.base_mode import ModeContext, ModeResult
from vie.runtime import telemetry

if TYPE_CHECKING:  # pragma: no cover - typing only
    from vie.keymaps import ResolutionMatch


def _command_line(context: ModeContext) -> CommandLine:
    line = context.extras.get("command_line")
    if not isinstance(line, CommandLine):
        raise RuntimeError("ModeContext.extras missing 'command_line'")
    return line


def submit_command_line(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    """Parse the typed text and always fall back to normal mode."""

    del match
    text = _command_line(context).take()
    context.bus.emit("command.submit", text)
    command = parse_command_line(text)
    if command is None:
        telemetry.record_event(
            "command.unrecognised",
            level="warning",
            data={"text": text},
            logger_name="vie.modes.execute",
        )
        context.bus.emit("command.error", text)
        return ModeResult(
            consumed=True,
            switch_to=ModeKind.NORMAL,
            status="command_error",
            message=text,
        )
    return ModeResult(
        consumed=True,
        command=command,
        switch_to=ModeKind.NORMAL,
        status="command_submit",
        message=text,
    )


def abort_command_line(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del match
    _command_line(context).reset()
    return ModeResult(
        consumed=True,
        command=commands.enter_mode(ModeKind.NORMAL),
        status="command_cancel",
    )


__all__ = ["submit_command_line", "abort_command_line"]
