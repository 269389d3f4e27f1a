"""Breadth-first hint routes over a maze grid."""

from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Dict, List, Optional, Set

from .grid import Grid, Position, SPECIAL_CELLS

logger = logging.getLogger(__name__)


def bfs_distances(grid: Grid, source: Position) -> Dict[Position, int]:
    """Edge distance from ``source`` to every passable cell it can reach.

    The mapping preserves BFS discovery order.
    """

    distances = {source: 0}
    queue: deque[Position] = deque([source])
    while queue:
        current = queue.popleft()
        for neighbor in grid.neighbors(current):
            if neighbor not in distances:
                distances[neighbor] = distances[current] + 1
                queue.append(neighbor)
    return distances


def _search(
    grid: Grid,
    source: Position,
    is_target: Callable[[Position], bool],
) -> List[Position]:
    queue: deque[Position] = deque([source])
    parents: Dict[Position, Optional[Position]] = {source: None}
    while queue:
        current = queue.popleft()
        if is_target(current):
            route: List[Position] = []
            node: Optional[Position] = current
            while node is not None and node != source:
                route.append(node)
                node = parents[node]
            route.reverse()
            return route
        for neighbor in grid.neighbors(current):
            if neighbor not in parents:
                parents[neighbor] = current
                queue.append(neighbor)
    return []


def find_route(grid: Grid, source: Position, target: Position) -> List[Position]:
    """Shortest route from ``source`` to ``target``, excluding ``source`` itself.

    Returns an empty list when ``target`` is unreachable or equal to ``source``.
    """

    return _search(grid, source, lambda pos: pos == target)


class HintPathfinder:
    """Compute hint trails for a player moving through a live grid."""

    def __init__(self, grid: Grid) -> None:
        self.grid = grid

    def _check_position(self, pos: Position) -> None:
        if not self.grid.in_bounds(pos):
            raise ValueError(f"Player position {pos} is outside the grid")
        if not self.grid.is_passable(pos):
            raise ValueError(f"Player position {pos} is a wall")

    def nearest_special_route(self, player: Position) -> List[Position]:
        """Route to the closest question or obstacle cell other than the player's own."""

        self._check_position(player)
        return _search(
            self.grid,
            player,
            lambda pos: pos != player and self.grid.cell(pos) in SPECIAL_CELLS,
        )

    def hint_route(self, player: Position, end: Optional[Position] = None) -> List[Position]:
        """Ordered hint route: nearest special cell first, otherwise the end cell."""

        route = self.nearest_special_route(player)
        if route:
            logger.debug("hint targets %s cell at %s", self.grid.cell(route[-1]).value, route[-1])
            return route
        if end is None:
            end = self.grid.end
        if end is None:
            return []
        logger.debug("no special cell reachable from %s, hinting towards end %s", player, end)
        return find_route(self.grid, player, end)

    def compute_hint(self, player: Position, end: Optional[Position] = None) -> Set[Position]:
        return set(self.hint_route(player, end))


def compute_hint(grid: Grid, player: Position, end: Optional[Position] = None) -> Set[Position]:
    """Hint trail for ``player`` on ``grid``; an empty set means no hint is available."""

    return HintPathfinder(grid).compute_hint(player, end)


__all__ = [
    "HintPathfinder",
    "bfs_distances",
    "compute_hint",
    "find_route",
]
