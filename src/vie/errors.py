"""Error taxonomy shared across the editor core."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:  # pragma: no cover - typing only
    from vie.ui.geometry import Position


class VieError(Exception):
    """Base class for every error raised by the editor core."""


class OutOfBoundsError(VieError, IndexError):
    """Raised when a frame buffer is addressed outside of its area."""

    def __init__(self, message: str, *, position: Optional["Position"] = None) -> None:
        super().__init__(message)
        self.position = position


class BackendError(VieError):
    """Raised when the canvas or event loop fails to talk to the terminal."""

    def __init__(self, message: str, *, cause: Optional[BaseException] = None) -> None:
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.cause = cause


__all__ = ["VieError", "OutOfBoundsError", "BackendError"]
