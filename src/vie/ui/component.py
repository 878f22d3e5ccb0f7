"""Contract implemented by anything that can be drawn into a frame."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .frame import Buffer


@runtime_checkable
class Component(Protocol):
    """A piece of UI responsible for drawing itself into the live buffer."""

    def render(self, buffer: Buffer) -> None:
        ...


__all__ = ["Component"]
