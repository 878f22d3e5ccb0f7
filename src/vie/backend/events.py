"""Events delivered from the input thread to the main loop."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .keys import Key


class EventKind(str, Enum):
    INPUT = "input"
    TICK = "tick"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class Event:
    """One of ``Input(key)``, ``Tick`` or ``Error(exc)``."""

    kind: EventKind
    key: Optional[Key] = None
    error: Optional[BaseException] = None

    @classmethod
    def input(cls, key: Key) -> "Event":
        return cls(EventKind.INPUT, key=key)

    @classmethod
    def tick(cls) -> "Event":
        return cls(EventKind.TICK)

    @classmethod
    def failure(cls, error: BaseException) -> "Event":
        return cls(EventKind.ERROR, error=error)


__all__ = ["Event", "EventKind"]
