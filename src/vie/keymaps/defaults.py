"""Built-in keymaps that seed each mode with its default bindings."""

from __future__ import annotations

from vie.commands import ModeKind

from .models import ActionRef, Binding
from .registry import KeymapRegistry

# (action id, attribute on ``vie.actions``, description)
_ACTION_TABLE: tuple[tuple[str, str, str], ...] = (
    ("core.enter_insert", "enter_insert_mode", "Enter insert mode"),
    ("core.enter_execute", "enter_execute_mode", "Enter execute mode"),
    ("core.exit_to_normal", "exit_to_normal_mode", "Return to normal mode"),
    ("motion.left", "move_left", "Move cursor left"),
    ("motion.right", "move_right", "Move cursor right"),
    ("motion.up", "move_up", "Move cursor up"),
    ("motion.down", "move_down", "Move cursor down"),
    ("motion.line_start", "move_line_start", "Move cursor to line start"),
    ("motion.line_end", "move_line_end", "Move cursor to line end"),
    ("motion.page_up", "move_page_up", "Move cursor one page up"),
    ("motion.page_down", "move_page_down", "Move cursor one page down"),
    ("edit.line_break", "insert_line_break", "Insert a line break"),
    ("edit.delete_backward", "delete_char_backward", "Delete character before cursor"),
    ("edit.delete_forward", "delete_char_forward", "Delete character under cursor"),
    ("command.submit_line", "submit_command_line", "Evaluate the command line"),
    ("command.abort_line", "abort_command_line", "Abandon the command line"),
)


def default_actions() -> tuple[ActionRef, ...]:
    """Build the action references backing ``DEFAULT_BINDINGS``."""

    # Deferred: vie.actions depends on vie.modes, which depends on this package.
    from vie import actions

    return tuple(
        ActionRef(id=action_id, handler=getattr(actions, attr), description=description)
        for action_id, attr, description in _ACTION_TABLE
    )


def _bind(mode: ModeKind, token: str, action_id: str, description: str = "") -> Binding:
    return Binding(
        id=f"{mode.value}.{token.lower()}",
        mode=mode,
        key=token,
        action_id=action_id,
        description=description,
    )


_NORMAL = ModeKind.NORMAL
_INSERT = ModeKind.INSERT
_EXECUTE = ModeKind.EXECUTE

# h/j/k/l and counts are left to the normal-mode sequence grammar.
DEFAULT_BINDINGS: tuple[Binding, ...] = (
    Binding(
        id="normal.enter_execute",
        mode=_NORMAL,
        key=":",
        action_id="core.enter_execute",
        description="Open the command line",
    ),
    Binding(
        id="normal.enter_insert",
        mode=_NORMAL,
        key="i",
        action_id="core.enter_insert",
        description="Enter insert mode",
    ),
    _bind(_NORMAL, "INSERT", "core.enter_insert", "Enter insert mode"),
    _bind(_NORMAL, "HOME", "motion.line_start"),
    _bind(_NORMAL, "END", "motion.line_end"),
    _bind(_NORMAL, "PAGE_UP", "motion.page_up"),
    _bind(_NORMAL, "PAGE_DOWN", "motion.page_down"),
    _bind(_INSERT, "ESC", "core.exit_to_normal", "Leave insert mode"),
    _bind(_INSERT, "ENTER", "edit.line_break"),
    _bind(_INSERT, "BACKSPACE", "edit.delete_backward"),
    _bind(_INSERT, "DELETE", "edit.delete_forward"),
    _bind(_INSERT, "LEFT", "motion.left"),
    _bind(_INSERT, "RIGHT", "motion.right"),
    _bind(_INSERT, "UP", "motion.up"),
    _bind(_INSERT, "DOWN", "motion.down"),
    _bind(_INSERT, "HOME", "motion.line_start"),
    _bind(_INSERT, "END", "motion.line_end"),
    _bind(_INSERT, "PAGE_UP", "motion.page_up"),
    _bind(_INSERT, "PAGE_DOWN", "motion.page_down"),
    _bind(_EXECUTE, "ESC", "command.abort_line", "Leave execute mode"),
    _bind(_EXECUTE, "ENTER", "command.submit_line", "Run the typed command"),
    # Execute-mode editing keys are applied to the mode's own command line.
    _bind(_EXECUTE, "BACKSPACE", "edit.delete_backward"),
    _bind(_EXECUTE, "DELETE", "edit.delete_forward"),
    _bind(_EXECUTE, "LEFT", "motion.left"),
    _bind(_EXECUTE, "RIGHT", "motion.right"),
    _bind(_EXECUTE, "HOME", "motion.line_start"),
    _bind(_EXECUTE, "END", "motion.line_end"),
)


def load_default_keymaps(registry: KeymapRegistry) -> None:
    """Register built-in actions and bindings for every mode."""

    for action in default_actions():
        registry.register_action(action)
    for binding in DEFAULT_BINDINGS:
        registry.register_binding(binding)


__all__ = ["load_default_keymaps", "default_actions", "DEFAULT_BINDINGS"]
