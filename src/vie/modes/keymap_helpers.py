"""Helper utilities for keymap-driven modes."""

from __future__ import annotations

from vie.keymaps import KeymapRegistry, ResolutionMatch
from vie.runtime import telemetry

from .base_mode import ModeContext, ModeResult


def require_keymap_registry(context: ModeContext) -> KeymapRegistry:
    registry = context.extras.get("keymap_registry")
    if not isinstance(registry, KeymapRegistry):
        raise RuntimeError("ModeContext.extras missing 'keymap_registry'")
    return registry


def execute_match(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    """Run the action bound to ``match`` and normalise its outcome."""

    with telemetry.span(
        "keymaps::execute",
        component="keymaps",
        metadata={"binding_id": match.binding.id, "action": match.action.id},
    ):
        outcome = match.action(context, match)

    if isinstance(outcome, ModeResult):
        return outcome
    return ModeResult(consumed=True)


__all__ = ["require_keymap_registry", "execute_match"]
