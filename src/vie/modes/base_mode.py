"""Base classes and shared utilities for editor modes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, ClassVar, Dict, Optional

from vie.backend.keys import Key
from vie.commands import Command, ModeKind
from vie.config import EditorConfig


@dataclass(slots=True)
class ModeResult:
    """Result returned from ``Mode.handle_key``.

    ``command`` is the editing intent produced by the key, if any.
    ``switch_to`` asks the manager for a transition that is not itself
    expressed as an ``EnterMode`` command.
    """

    consumed: bool
    command: Optional[Command] = None
    switch_to: Optional[ModeKind] = None
    status: str = "ok"
    message: Optional[str] = None


@dataclass(slots=True)
class ModeContext:
    """Shared services every mode can access."""

    bus: "ModeBus"
    config: EditorConfig = field(default_factory=EditorConfig)
    extras: Dict[str, object] = field(default_factory=dict)


class ModeBus:
    """Minimal event bus letting modes publish structured signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


class Mode:
    """Base class all concrete editor modes inherit from."""

    kind: ClassVar[ModeKind]

    def __init__(self, context: ModeContext) -> None:
        self.context = context

    @property
    def name(self) -> str:
        return self.kind.value

    def on_enter(self, previous: Optional[ModeKind]) -> None:
        del previous

    def on_exit(self, next_mode: Optional[ModeKind]) -> None:
        del next_mode

    def handle_key(self, key: Key) -> ModeResult:  # pragma: no cover - abstract
        raise NotImplementedError


__all__ = ["Mode", "ModeBus", "ModeContext", "ModeResult"]
