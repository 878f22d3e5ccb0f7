"""Normal mode: single-key commands plus buffered counted motions."""

from __future__ import annotations

from vie.backend.keys import Key, KeyCode
from vie.commands import ModeKind
from vie.runtime import telemetry

from .base_mode import Mode, ModeContext, ModeResult
from .keymap_helpers import execute_match, require_keymap_registry
from .sequence import MOTION_KEYS, parse_input_sequence


class NormalMode(Mode):
    """Resolves keys against the direct keymap first, then the count grammar.

    Typed characters accumulate in ``pending`` until they spell a motion such
    as ``12j``. Text that can no longer become a motion is dropped. A count
    above ``max_count`` puts the mode into a discarding state that swallows
    every key up to and including the next motion key or Esc.
    """

    kind = ModeKind.NORMAL

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("vie.modes.normal")
        self._keymaps = require_keymap_registry(context)
        self._pending = ""
        self._discarding = False

    @property
    def pending(self) -> str:
        return self._pending

    @property
    def discarding(self) -> bool:
        return self._discarding

    def on_exit(self, next_mode: ModeKind | None) -> None:
        del next_mode
        self._pending = ""
        self._discarding = False

    def handle_key(self, key: Key) -> ModeResult:
        if key.code is KeyCode.ESC:
            self._pending = ""
            self._discarding = False
            return ModeResult(consumed=True, status="cleared")

        if self._discarding:
            if key.is_char and key.char in MOTION_KEYS:
                self._discarding = False
            return ModeResult(consumed=True, status="invalid_count")

        match = self._keymaps.resolve(self.name, key)
        if match is not None:
            self._pending = ""
            return execute_match(self.context, match)

        if not key.is_char:
            return ModeResult(consumed=False, status="miss", message="unhandled")

        self._pending += str(key.char)
        sequence = parse_input_sequence(
            self._pending, max_count=self.context.config.max_count
        )
        if sequence.status == "match":
            self._pending = ""
            return ModeResult(consumed=True, command=sequence.command)
        if sequence.status == "pending":
            return ModeResult(consumed=True, status="pending", message=self._pending)

        dropped = self._pending
        self._pending = ""
        if sequence.status == "overflow":
            # A bare count keeps swallowing keys until its motion arrives.
            self._discarding = key.char not in MOTION_KEYS
            telemetry.record_event(
                "normal.count_overflow",
                level="debug",
                data={"text": dropped, "max_count": self.context.config.max_count},
                logger_name="vie.modes.normal",
            )
            return ModeResult(consumed=True, status="invalid_count", message=dropped)

        telemetry.record_event(
            "normal.sequence_dropped",
            level="debug",
            data={"text": dropped},
            logger_name="vie.modes.normal",
        )
        return ModeResult(consumed=False, status="miss", message=dropped)


__all__ = ["NormalMode"]
