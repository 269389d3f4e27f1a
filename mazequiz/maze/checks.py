"""Structural checks for generated maze grids."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .grid import CellType, Grid, Position
from .pathfinder import bfs_distances


@dataclass
class GridReport:
    width: int
    height: int
    start: Optional[Position]
    end: Optional[Position]
    open_cells: int
    open_edges: int
    border_intact: bool
    connected: bool
    unreachable: List[Position] = field(default_factory=list)
    counts: Dict[str, int] = field(default_factory=dict)

    @property
    def perfect(self) -> bool:
        """True when the open cells form a spanning tree."""

        return self.connected and self.open_edges == self.open_cells - 1

    @property
    def is_valid(self) -> bool:
        return (
            self.border_intact
            and self.perfect
            and self.start is not None
            and self.end is not None
            and self.start != self.end
            and self.counts.get(CellType.START.value) == 1
            and self.counts.get(CellType.END.value) == 1
        )

    def to_dict(self) -> dict:
        return {
            "width": self.width,
            "height": self.height,
            "start": list(self.start) if self.start else None,
            "end": list(self.end) if self.end else None,
            "open_cells": self.open_cells,
            "open_edges": self.open_edges,
            "border_intact": self.border_intact,
            "connected": self.connected,
            "perfect": self.perfect,
            "unreachable": [list(pos) for pos in self.unreachable],
            "counts": dict(self.counts),
            "is_valid": self.is_valid,
        }


def count_open_edges(grid: Grid) -> int:
    """Number of adjacent passable pairs, counting each pair once."""

    edges = 0
    for x, y in grid.positions():
        if not grid.is_passable((x, y)):
            continue
        if grid.is_passable((x + 1, y)):
            edges += 1
        if grid.is_passable((x, y + 1)):
            edges += 1
    return edges


def check_grid(grid: Grid) -> GridReport:
    open_positions = [pos for pos in grid.positions() if grid.is_passable(pos)]
    border_intact = all(
        grid.cell(pos) is CellType.WALL for pos in grid.positions() if grid.is_border(pos)
    )
    start = grid.start
    if start is not None:
        reached = bfs_distances(grid, start)
        unreachable = [pos for pos in open_positions if pos not in reached]
    else:
        unreachable = list(open_positions)

    return GridReport(
        width=grid.width,
        height=grid.height,
        start=start,
        end=grid.end,
        open_cells=len(open_positions),
        open_edges=count_open_edges(grid),
        border_intact=border_intact,
        connected=start is not None and not unreachable,
        unreachable=unreachable,
        counts=grid.counts(),
    )


__all__ = ["GridReport", "check_grid", "count_open_edges"]
