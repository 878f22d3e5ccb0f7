"""Cursor motions bound to navigation keys."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from vie import commands
from vie.commands import Command
from vie.modes.base_mode import ModeContext, ModeResult

if TYPE_CHECKING:  # pragma: no cover - typing only
    from vie.keymaps import ResolutionMatch

Action = Callable[[ModeContext, "ResolutionMatch"], ModeResult]


def _motion(factory: Callable[[], Command]) -> Action:
    def action(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
        del context, match
        return ModeResult(consumed=True, command=factory())

    action.__name__ = factory.__name__
    return action


move_left = _motion(commands.move_left)
move_right = _motion(commands.move_right)
move_up = _motion(commands.move_up)
move_down = _motion(commands.move_down)
move_line_start = _motion(commands.move_line_start)
move_line_end = _motion(commands.move_line_end)
move_page_up = _motion(commands.move_page_up)
move_page_down = _motion(commands.move_page_down)


__all__ = [
    "move_left",
    "move_right",
    "move_up",
    "move_down",
    "move_line_start",
    "move_line_end",
    "move_page_up",
    "move_page_down",
]
