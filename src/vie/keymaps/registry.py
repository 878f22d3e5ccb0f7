"""Per-mode table of key bindings and the actions behind them."""

from __future__ import annotations

from typing import Dict, Iterator, Optional

from vie.backend.keys import Key
from vie.runtime.telemetry import span

from .models import ActionRef, Binding, ResolutionMatch


class KeymapConflictError(RuntimeError):
    """Raised when a binding claims a key already bound in its mode."""

    def __init__(self, binding: Binding, existing: Binding) -> None:
        super().__init__(
            f"Binding '{binding.id}' conflicts with '{existing.id}' "
            f"on key '{binding.key}' in mode '{binding.mode}'"
        )
        self.binding = binding
        self.existing = existing


class KeymapRegistry:
    """Owns action references and resolves keys to them, one mode at a time."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._actions: Dict[str, ActionRef] = {}
        self._bindings: Dict[str, Binding] = {}
        # mode -> key token -> binding id
        self._by_key: Dict[str, Dict[str, str]] = {}
        self._logger_name = logger_name

    def get_action(self, action_id: str) -> ActionRef:
        try:
            return self._actions[action_id]
        except KeyError as exc:
            raise KeyError(f"Action '{action_id}' is not registered") from exc

    def get_binding(self, binding_id: str) -> Binding:
        try:
            return self._bindings[binding_id]
        except KeyError as exc:
            raise KeyError(f"Binding '{binding_id}' is not registered") from exc

    def register_action(self, action: ActionRef) -> ActionRef:
        if action.id in self._actions:
            raise ValueError(f"Action '{action.id}' already registered")
        self._actions[action.id] = action
        return action

    def register_binding(self, binding: Binding) -> Binding:
        with span(
            "keymaps::register_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "mode": binding.mode},
        ) as handle:
            if binding.action_id not in self._actions:
                handle.add_metadata("missing_action", binding.action_id)
                raise KeyError(
                    f"Binding '{binding.id}' references unknown action '{binding.action_id}'"
                )
            if binding.id in self._bindings:
                raise ValueError(f"Binding id '{binding.id}' already registered")

            keys = self._by_key.setdefault(binding.mode, {})
            existing = keys.get(binding.key)
            if existing is not None:
                handle.add_metadata("conflict", existing)
                raise KeymapConflictError(binding, self._bindings[existing])

            keys[binding.key] = binding.id
            self._bindings[binding.id] = binding
            return binding

    def bindings(self, mode: str) -> Iterator[Binding]:
        keys = self._by_key.get(mode, {})
        for token in sorted(keys):
            yield self._bindings[keys[token]]

    def modes(self) -> tuple[str, ...]:
        return tuple(sorted(self._by_key))

    def resolve(self, mode: str, key: Key) -> Optional[ResolutionMatch]:
        """Return the binding for ``key`` in ``mode``, or ``None``."""

        with span(
            "keymaps::resolve",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"mode": mode, "key": key.token},
        ) as handle:
            binding_id = self._by_key.get(mode, {}).get(key.token)
            if binding_id is None:
                handle.add_metadata("status", "miss")
                return None
            binding = self._bindings[binding_id]
            handle.add_metadata("status", "match")
            return ResolutionMatch(binding=binding, action=self._actions[binding.action_id])


__all__ = ["KeymapRegistry", "KeymapConflictError"]
