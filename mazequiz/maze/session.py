"""Player movement over a live maze grid."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Set

from .grid import CellType, Grid, Position
from .pathfinder import compute_hint

logger = logging.getLogger(__name__)


class MoveResult(str, Enum):
    BLOCKED = "blocked"
    MOVED = "moved"
    QUESTION = "question"
    OBSTACLE = "obstacle"
    WON = "won"


@dataclass
class MoveOutcome:
    result: MoveResult
    position: Position
    # Cell the player stepped onto; for obstacles this differs from ``position``.
    stepped_on: Optional[Position] = None


class MazeSession:
    """A single player walking one grid from start to end.

    Question cells are consumed on entry. Obstacle cells stay in place and
    send the player to a random empty cell elsewhere.
    """

    def __init__(
        self,
        grid: Grid,
        *,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        start = grid.start
        end = grid.end
        if start is None or end is None:
            raise ValueError("Grid must contain both a start and an end cell")
        self.grid = grid
        self.end = end
        self.position: Position = start
        self.moves = 0
        # Question cells stepped on; answering them is up to the caller.
        self.questions_reached = 0
        self.teleports = 0
        self._rng = rng if rng is not None else random.Random(seed)
        self._won = False

    @property
    def won(self) -> bool:
        return self._won

    def move(self, dx: int, dy: int) -> MoveOutcome:
        if self._won:
            raise RuntimeError("Session is finished; start a new grid to keep playing")
        if abs(dx) + abs(dy) != 1:
            raise ValueError(f"Moves must be one orthogonal step, got ({dx}, {dy})")

        x, y = self.position
        target = (x + dx, y + dy)
        if not self.grid.is_passable(target):
            return MoveOutcome(MoveResult.BLOCKED, self.position)

        self.moves += 1
        self.position = target
        cell = self.grid.consume(target)

        if cell is CellType.QUESTION:
            self.questions_reached += 1
            return MoveOutcome(MoveResult.QUESTION, target, stepped_on=target)
        if cell is CellType.OBSTACLE:
            destination = self.teleport_destination(target)
            if destination is not None:
                self.position = destination
                self.teleports += 1
            logger.debug("obstacle at %s sent player to %s", target, self.position)
            return MoveOutcome(MoveResult.OBSTACLE, self.position, stepped_on=target)
        if cell is CellType.END:
            self._won = True
            return MoveOutcome(MoveResult.WON, target, stepped_on=target)
        return MoveOutcome(MoveResult.MOVED, target, stepped_on=target)

    def teleport_destination(self, origin: Position) -> Optional[Position]:
        """Uniformly chosen empty cell other than ``origin``, or None if there is none."""

        candidates = [pos for pos in self.grid.positions_of(CellType.EMPTY) if pos != origin]
        if not candidates:
            return None
        return self._rng.choice(candidates)

    def hint(self) -> Set[Position]:
        return compute_hint(self.grid, self.position, self.end)


__all__ = ["MazeSession", "MoveOutcome", "MoveResult"]
