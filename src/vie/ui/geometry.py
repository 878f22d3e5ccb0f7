"""Screen coordinates and rectangular regions."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Position:
    """A column/row pair in screen space."""

    col: int = 0
    row: int = 0

    def __post_init__(self) -> None:
        if self.col < 0 or self.row < 0:
            raise ValueError("Position coordinates must be non-negative")


@dataclass(frozen=True, slots=True)
class Rect:
    """An area of the screen anchored at ``position``."""

    width: int = 0
    height: int = 0
    position: Position = field(default_factory=Position)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("Rect dimensions must be non-negative")

    @classmethod
    def positioned(cls, width: int, height: int, col: int, row: int) -> "Rect":
        return cls(width, height, Position(col, row))

    @property
    def area(self) -> int:
        """Number of cells covered by the rect."""

        return self.width * self.height

    @property
    def left(self) -> int:
        return self.position.col

    @property
    def right(self) -> int:
        return self.position.col + self.width

    @property
    def top(self) -> int:
        return self.position.row

    @property
    def bottom(self) -> int:
        return self.position.row + self.height

    def contains(self, position: Position) -> bool:
        return (
            self.left <= position.col < self.right
            and self.top <= position.row < self.bottom
        )


__all__ = ["Position", "Rect"]
