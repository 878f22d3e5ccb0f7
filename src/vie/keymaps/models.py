"""Dataclasses describing key bindings and the actions they trigger."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Named handler a binding points at."""

    id: str
    handler: Callable[..., object]
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Binding:
    """Binds one key token in one mode to an action.

    ``key`` is a :attr:`vie.backend.keys.Key.token`: the character itself,
    ``ctrl+x``, or a key name such as ``ESC`` or ``PAGE_UP``.
    """

    id: str
    mode: str
    key: str
    action_id: str
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if isinstance(self.mode, Enum):
            object.__setattr__(self, "mode", str(self.mode.value))
        if not self.mode:
            raise ValueError("binding mode cannot be empty")
        if not self.key:
            raise ValueError("binding key cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    """Binding found for a key, paired with its action."""

    binding: Binding
    action: ActionRef


__all__ = ["ActionRef", "Binding", "ResolutionMatch"]
