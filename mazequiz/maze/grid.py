"""Cell grid shared by the maze generator and the hint pathfinder."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

import numpy as np

Position = Tuple[int, int]

# Expansion order for every 4-neighbour walk: up, right, down, left.
DIRECTIONS: Tuple[Position, ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))


class CellType(str, Enum):
    EMPTY = "empty"
    WALL = "wall"
    START = "start"
    END = "end"
    QUESTION = "question"
    OBSTACLE = "obstacle"

    @property
    def glyph(self) -> str:
        return _GLYPHS[self]

    @property
    def code(self) -> int:
        return _CODES[self]

    @classmethod
    def from_glyph(cls, glyph: str) -> "CellType":
        try:
            return _FROM_GLYPH[glyph]
        except KeyError as exc:
            raise ValueError(f"Unknown cell glyph {glyph!r}") from exc


_GLYPHS: Dict[CellType, str] = {
    CellType.EMPTY: ".",
    CellType.WALL: "#",
    CellType.START: "S",
    CellType.END: "E",
    CellType.QUESTION: "?",
    CellType.OBSTACLE: "!",
}
_FROM_GLYPH: Dict[str, CellType] = {glyph: cell for cell, glyph in _GLYPHS.items()}
_CODES: Dict[CellType, int] = {cell: index for index, cell in enumerate(CellType)}

SPECIAL_CELLS = frozenset({CellType.QUESTION, CellType.OBSTACLE})
_UNIQUE_CELLS = frozenset({CellType.START, CellType.END})


@dataclass
class Grid:
    """Rectangular matrix of cells addressed as ``cells[y][x]``.

    A grid is owned by a single game session. ``set_cell`` and ``consume`` are
    plain in-place setters; ``start`` and ``end`` are fixed once placed.
    """

    cells: List[List[CellType]]

    def __post_init__(self) -> None:
        if not self.cells or not self.cells[0]:
            raise ValueError("Grid must have at least one row and one column")
        width = len(self.cells[0])
        if any(len(row) != width for row in self.cells):
            raise ValueError("Grid rows must all have the same length")

    # ------------------------------------------------------------------

    @classmethod
    def filled(cls, width: int, height: int, cell: CellType = CellType.WALL) -> "Grid":
        return cls([[cell for _ in range(width)] for _ in range(height)])

    @classmethod
    def parse(cls, text: str) -> "Grid":
        """Build a grid from rows of glyphs (``#`` wall, ``.`` empty, ``S``/``E``/``?``/``!``)."""

        rows = [line.strip() for line in text.strip().splitlines() if line.strip()]
        return cls([[CellType.from_glyph(ch) for ch in row] for row in rows])

    def render_text(self, *, trail: Iterable[Position] = ()) -> str:
        """Render glyph rows; cells in ``trail`` that are plain passage show as ``*``."""

        marked = set(trail)
        lines = []
        for y, row in enumerate(self.cells):
            chars = []
            for x, cell in enumerate(row):
                if (x, y) in marked and cell is CellType.EMPTY:
                    chars.append("*")
                else:
                    chars.append(cell.glyph)
            lines.append("".join(chars))
        return "\n".join(lines)

    def copy(self) -> "Grid":
        return Grid([list(row) for row in self.cells])

    def to_array(self) -> np.ndarray:
        """Cell codes as a ``(height, width)`` uint8 matrix."""

        return np.array([[cell.code for cell in row] for row in self.cells], dtype=np.uint8)

    # ------------------------------------------------------------------

    @property
    def width(self) -> int:
        return len(self.cells[0])

    @property
    def height(self) -> int:
        return len(self.cells)

    def in_bounds(self, pos: Position) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, pos: Position) -> CellType:
        if not self.in_bounds(pos):
            raise IndexError(f"Position {pos} is outside the {self.width}x{self.height} grid")
        x, y = pos
        return self.cells[y][x]

    def is_passable(self, pos: Position) -> bool:
        return self.in_bounds(pos) and self.cell(pos) is not CellType.WALL

    def is_border(self, pos: Position) -> bool:
        x, y = pos
        return x in (0, self.width - 1) or y in (0, self.height - 1)

    def neighbors(self, pos: Position) -> Iterator[Position]:
        """Passable 4-neighbours of ``pos`` in up, right, down, left order."""

        x, y = pos
        for dx, dy in DIRECTIONS:
            candidate = (x + dx, y + dy)
            if self.is_passable(candidate):
                yield candidate

    def positions(self) -> Iterator[Position]:
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def positions_of(self, *cell_types: CellType) -> List[Position]:
        wanted = set(cell_types)
        return [pos for pos in self.positions() if self.cell(pos) in wanted]

    def count(self, cell_type: CellType) -> int:
        return sum(row.count(cell_type) for row in self.cells)

    def counts(self) -> Dict[str, int]:
        return {cell.value: self.count(cell) for cell in CellType}

    def _unique(self, cell_type: CellType) -> Optional[Position]:
        found = self.positions_of(cell_type)
        return found[0] if found else None

    @property
    def start(self) -> Optional[Position]:
        return self._unique(CellType.START)

    @property
    def end(self) -> Optional[Position]:
        return self._unique(CellType.END)

    # ------------------------------------------------------------------

    def set_cell(self, pos: Position, cell_type: CellType) -> None:
        current = self.cell(pos)
        if current is cell_type:
            return
        if current in _UNIQUE_CELLS:
            raise ValueError(f"Cannot overwrite the {current.value} cell at {pos}")
        if cell_type in _UNIQUE_CELLS and self._unique(cell_type) is not None:
            raise ValueError(f"Grid already has a {cell_type.value} cell")
        x, y = pos
        self.cells[y][x] = cell_type

    def consume(self, pos: Position) -> CellType:
        """Demote a question cell to empty and return what the cell held before."""

        previous = self.cell(pos)
        if previous is CellType.QUESTION:
            self.set_cell(pos, CellType.EMPTY)
        return previous


__all__ = [
    "CellType",
    "DIRECTIONS",
    "Grid",
    "Position",
    "SPECIAL_CELLS",
]
