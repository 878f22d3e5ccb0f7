"""Frame buffer model and diffing.

All drawing lands in a :class:`Buffer`. Diffing the buffer against the one
that is currently on screen yields the cells that changed since the last
draw, so only those have to be sent to the terminal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List

import grapheme

from vie.errors import OutOfBoundsError

from .geometry import Position, Rect
from .style import DEFAULT_STYLE, Style

BLANK = " "


@dataclass(slots=True)
class Cell:
    """A single slot of the grid: position, displayed symbol and style."""

    position: Position
    symbol: str = BLANK
    style: Style = field(default=DEFAULT_STYLE)

    @classmethod
    def at(cls, col: int, row: int, symbol: str = BLANK, style: Style = DEFAULT_STYLE) -> "Cell":
        return cls(Position(col, row), symbol, style)

    def reset(self) -> None:
        """Erase the symbol; the style is kept."""

        self.symbol = BLANK


class Buffer:
    """A flat, row-major sequence of cells covering ``area``."""

    __slots__ = ("_area", "_cells")

    def __init__(self, area: Rect, cells: List[Cell]) -> None:
        if len(cells) != area.area:
            raise ValueError(
                f"Buffer for {area.width}x{area.height} needs {area.area} cells, got {len(cells)}"
            )
        self._area = area
        self._cells = cells

    @classmethod
    def empty(cls, area: Rect) -> "Buffer":
        return cls.filled(area, BLANK)

    @classmethod
    def filled(cls, area: Rect, symbol: str) -> "Buffer":
        cells = [
            Cell.at(area.left + col, area.top + row, symbol)
            for row in range(area.height)
            for col in range(area.width)
        ]
        return cls(area, cells)

    @property
    def area(self) -> Rect:
        return self._area

    @property
    def cells(self) -> tuple[Cell, ...]:
        return tuple(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def index_of(self, position: Position) -> int:
        if not self._area.contains(position):
            raise OutOfBoundsError(
                f"position ({position.col}, {position.row}) is outside the buffer area",
                position=position,
            )
        return (position.row - self._area.top) * self._area.width + (
            position.col - self._area.left
        )

    def cell_at(self, position: Position) -> Cell:
        return self._cells[self.index_of(position)]

    def reset(self) -> None:
        for cell in self._cells:
            cell.reset()

    def write_line(self, line_number: int, text: str, style: Style = DEFAULT_STYLE) -> None:
        """Overwrite row ``line_number`` with ``text``, one grapheme per cell.

        Text longer than the row is truncated. Cells past the end of the text
        are blanked and their style dropped back to the default.
        """

        if not 0 <= line_number < self._area.height:
            raise OutOfBoundsError(
                f"line {line_number} is outside a buffer of height {self._area.height}",
                position=Position(self._area.left, self._area.top + max(line_number, 0)),
            )
        width = self._area.width
        start = line_number * width
        written = 0
        for cluster in grapheme.graphemes(text):
            if written == width:
                break
            cell = self._cells[start + written]
            self._cells[start + written] = Cell(cell.position, cluster, style)
            written += 1

        for index in range(start + written, start + width):
            self._cells[index] = Cell(self._cells[index].position)

    def diff(self, other: "Buffer") -> List[Cell]:
        """Return the cells of ``other`` that differ from this buffer.

        ``self`` is the frame currently on screen, ``other`` the next one.
        Cells come back in ascending index order, i.e. row-major.
        """

        return [
            after
            for before, after in zip(self._cells, other._cells)
            if before != after
        ]

    def row_text(self, line_number: int) -> str:
        """Concatenated symbols of one row (mostly useful for inspection)."""

        width = self._area.width
        start = line_number * width
        return "".join(cell.symbol for cell in self._cells[start : start + width])


__all__ = ["Buffer", "Cell", "BLANK"]
