"""Key bindings per mode and the default tables."""

from .models import ActionRef, Binding, ResolutionMatch
from .registry import KeymapConflictError, KeymapRegistry
from .defaults import DEFAULT_BINDINGS, default_actions, load_default_keymaps

__all__ = [
    "ActionRef",
    "Binding",
    "ResolutionMatch",
    "KeymapRegistry",
    "KeymapConflictError",
    "DEFAULT_BINDINGS",
    "default_actions",
    "load_default_keymaps",
]
