"""Text editing actions for insert and execute modes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from vie import commands
from vie.modes.base_mode import ModeContext, ModeResult

if TYPE_CHECKING:  # pragma: no cover - typing only
    from vie.keymaps import ResolutionMatch


def insert_line_break(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del context, match
    return ModeResult(consumed=True, command=commands.insert_line_break())


def delete_char_backward(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del context, match
    return ModeResult(consumed=True, command=commands.delete_char_backward())


def delete_char_forward(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del context, match
    return ModeResult(consumed=True, command=commands.delete_char_forward())


__all__ = ["insert_line_break", "delete_char_backward", "delete_char_forward"]
