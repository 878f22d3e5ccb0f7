"""Mode manager owning the single active mode and its transitions."""

from __future__ import annotations

from typing import Dict, Optional, Type

from vie.backend.keys import Key
from vie.commands import ModeKind
from vie.config import EditorConfig
from vie.keymaps import KeymapRegistry, load_default_keymaps
from vie.runtime import telemetry

from .base_mode import Mode, ModeBus, ModeContext, ModeResult
from .execute_mode import ExecuteMode
from .insert_mode import InsertMode
from .normal_mode import NormalMode


class ModeManager:
    """Owns the active mode, handles transitions and dispatches key events.

    Mode classes are registered by kind. Every transition builds a new
    instance, so per-mode state never survives leaving the mode.
    """

    def __init__(
        self,
        context: ModeContext,
        *,
        keymap_registry: KeymapRegistry | None = None,
    ) -> None:
        self.context = context
        self._mode_classes: Dict[ModeKind, Type[Mode]] = {}
        self._active: Optional[Mode] = None
        self.logger = telemetry.get_logger("vie.modes")
        if keymap_registry is None:
            keymap_registry = KeymapRegistry(logger_name="vie.keymaps")
            load_default_keymaps(keymap_registry)
        self.keymap_registry = keymap_registry
        self.context.extras.setdefault("keymap_registry", self.keymap_registry)
        self.context.extras.setdefault("mode_manager", self)

    @property
    def active_mode(self) -> Optional[Mode]:
        return self._active

    @property
    def active_kind(self) -> Optional[ModeKind]:
        return self._active.kind if self._active else None

    def register_mode(self, mode_cls: Type[Mode]) -> None:
        kind = mode_cls.kind
        if kind in self._mode_classes:
            raise ValueError(f"Mode '{kind.value}' already registered")
        self._mode_classes[kind] = mode_cls
        if self._active is None:
            self._active = mode_cls(self.context)
            self._active.on_enter(None)

    def switch_mode(self, kind: ModeKind) -> Mode:
        mode_cls = self._mode_classes.get(kind)
        if mode_cls is None:
            raise KeyError(f"Unknown mode '{kind}'")
        previous = self._active
        if previous is not None:
            previous.on_exit(kind)
        self._active = mode_cls(self.context)
        self._active.on_enter(previous.kind if previous else None)
        self.context.bus.emit("mode.switch", kind)
        telemetry.record_event(
            "mode.switch",
            data={
                "from": previous.kind.value if previous else None,
                "to": kind.value,
            },
            logger_name="vie.modes",
        )
        return self._active

    def handle_key(self, key: Key) -> ModeResult:
        mode = self._active
        if mode is None:
            raise RuntimeError("No active mode registered")
        with telemetry.span(
            name=f"mode::{mode.name}",
            component=True,
            metadata={"key": key.token, "mode": mode.name},
        ) as handle:
            result = mode.handle_key(key)
            handle.add_metadata("status", result.status)
        return self._after_mode_result(result)

    def _after_mode_result(self, result: ModeResult) -> ModeResult:
        target = result.switch_to
        if target is None and result.command is not None:
            target = result.command.mode
        if target is not None:
            self.switch_mode(target)
        return result


def create_default_manager(
    config: EditorConfig | None = None, *, bus: ModeBus | None = None
) -> ModeManager:
    """Build a manager with the three editor modes, starting in normal."""

    context = ModeContext(bus=bus or ModeBus(), config=config or EditorConfig())
    manager = ModeManager(context)
    manager.register_mode(NormalMode)
    manager.register_mode(InsertMode)
    manager.register_mode(ExecuteMode)
    return manager


__all__ = ["ModeManager", "create_default_manager"]
