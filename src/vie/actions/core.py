"""Mode transition actions shared across modes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from vie import commands
from vie.commands import ModeKind
from vie.modes.base_mode import ModeContext, ModeResult

if TYPE_CHECKING:  # pragma: no cover - typing only
    from vie.keymaps import ResolutionMatch


def enter_insert_mode(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del context, match
    return ModeResult(
        consumed=True,
        command=commands.enter_mode(ModeKind.INSERT),
        message="enter_insert",
    )


def enter_execute_mode(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del context, match
    return ModeResult(
        consumed=True,
        command=commands.enter_mode(ModeKind.EXECUTE),
        message="enter_execute",
    )


def exit_to_normal_mode(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del context, match
    return ModeResult(
        consumed=True,
        command=commands.enter_mode(ModeKind.NORMAL),
        message="exit_to_normal",
    )


__all__ = ["enter_insert_mode", "enter_execute_mode", "exit_to_normal_mode"]
