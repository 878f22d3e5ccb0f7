"""Terminal backend contracts and the blessed implementation."""

from .base import Canvas, EventLoop
from .events import Event, EventKind
from .keys import Key, KeyCode, keys_from_text

__all__ = [
    "Canvas",
    "Event",
    "EventKind",
    "EventLoop",
    "Key",
    "KeyCode",
    "keys_from_text",
]
