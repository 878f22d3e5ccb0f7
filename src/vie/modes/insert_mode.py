"""Insert mode: editing keys come from the keymap, text is inserted."""

from __future__ import annotations

from vie import commands
from vie.backend.keys import Key
from vie.commands import ModeKind
from vie.runtime import telemetry

from .base_mode import Mode, ModeContext, ModeResult
from .keymap_helpers import execute_match, require_keymap_registry


class InsertMode(Mode):
    kind = ModeKind.INSERT

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("vie.modes.insert")
        self._keymaps = require_keymap_registry(context)

    def handle_key(self, key: Key) -> ModeResult:
        match = self._keymaps.resolve(self.name, key)
        if match is not None:
            return execute_match(self.context, match)

        if key.printable:
            return ModeResult(consumed=True, command=commands.insert_char(str(key.char)))

        return ModeResult(consumed=False, status="miss", message="unhandled")


__all__ = ["InsertMode"]
