"""Maze generator producing quiz grids with start, end and special cells."""

from __future__ import annotations

import argparse
import json
import logging
import random
from pathlib import Path
from typing import List, Optional

from ..base import AbstractMazeGenerator
from .checks import check_grid
from .grid import CellType, Grid, Position
from .levels import LEVELS, get_level
from .pathfinder import bfs_distances, compute_hint
from .render import render_grid

logger = logging.getLogger(__name__)

END_POLICIES = ("farthest", "random")

# Carving steps on the odd sublattice: up, right, down, left.
CARVE_STEPS = ((0, -2), (2, 0), (0, 2), (-2, 0))


def carve_passages(grid: Grid, rng: random.Random, origin: Position = (1, 1)) -> None:
    """Carve a perfect maze into an all-wall grid with an iterative backtracker."""

    cells = grid.cells
    ox, oy = origin
    cells[oy][ox] = CellType.EMPTY
    visited = {origin}
    stack: List[Position] = [origin]
    while stack:
        x, y = stack[-1]
        candidates = []
        for dx, dy in CARVE_STEPS:
            nx, ny = x + dx, y + dy
            if 0 < nx < grid.width - 1 and 0 < ny < grid.height - 1 and (nx, ny) not in visited:
                candidates.append((nx, ny))
        if not candidates:
            stack.pop()
            continue
        nx, ny = rng.choice(candidates)
        cells[(y + ny) // 2][(x + nx) // 2] = CellType.EMPTY
        cells[ny][nx] = CellType.EMPTY
        visited.add((nx, ny))
        stack.append((nx, ny))


def choose_end(grid: Grid, start: Position, rng: random.Random, policy: str = "farthest") -> Position:
    """Pick the end cell from the empty cells of a carved grid."""

    if policy == "farthest":
        distances = bfs_distances(grid, start)
        best: Optional[Position] = None
        for pos, distance in distances.items():
            if grid.cell(pos) is CellType.EMPTY and (best is None or distance > distances[best]):
                best = pos
        if best is None:
            raise ValueError("Grid has no empty cell left for the end position")
        return best
    if policy == "random":
        empty = grid.positions_of(CellType.EMPTY)
        if not empty:
            raise ValueError("Grid has no empty cell left for the end position")
        return rng.choice(empty)
    raise ValueError(f"Unknown end policy '{policy}' (expected one of: {', '.join(END_POLICIES)})")


def scatter_special_cells(
    grid: Grid,
    rng: random.Random,
    question_count: int,
    obstacle_count: int,
) -> None:
    """Turn shuffled empty cells into questions, then obstacles, until the pool runs out."""

    pool = grid.positions_of(CellType.EMPTY)
    rng.shuffle(pool)
    questions = pool[:question_count]
    obstacles = pool[question_count:question_count + obstacle_count]
    for pos in questions:
        grid.set_cell(pos, CellType.QUESTION)
    for pos in obstacles:
        grid.set_cell(pos, CellType.OBSTACLE)


def generate_maze(
    width: int = 15,
    height: int = 15,
    question_count: int = 5,
    obstacle_count: int = 3,
    *,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
    end_policy: str = "farthest",
) -> Grid:
    """Generate a perfect maze grid of (odd-normalized) ``width`` x ``height``.

    ``rng`` takes precedence over ``seed``; with neither, a fresh unseeded
    source is used.
    """

    width, height = AbstractMazeGenerator.normalize_size(width, height)
    if question_count < 0 or obstacle_count < 0:
        raise ValueError("question_count and obstacle_count must be non-negative")
    if end_policy not in END_POLICIES:
        raise ValueError(f"Unknown end policy '{end_policy}' (expected one of: {', '.join(END_POLICIES)})")
    if rng is None:
        rng = random.Random(seed)

    grid = Grid.filled(width, height, CellType.WALL)
    start = (1, 1)
    carve_passages(grid, rng, start)
    grid.set_cell(start, CellType.START)
    end = choose_end(grid, start, rng, end_policy)
    grid.set_cell(end, CellType.END)
    scatter_special_cells(grid, rng, question_count, obstacle_count)

    logger.debug(
        "generated %dx%d maze: end=%s questions=%d obstacles=%d",
        width,
        height,
        end,
        grid.count(CellType.QUESTION),
        grid.count(CellType.OBSTACLE),
    )
    return grid


class MazeGenerator(AbstractMazeGenerator[Grid]):
    """Generate quiz mazes with a fixed configuration and a private random source."""

    def __init__(
        self,
        *,
        width: int = 15,
        height: int = 15,
        question_count: int = 5,
        obstacle_count: int = 3,
        end_policy: str = "farthest",
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__(width, height, seed=seed, rng=rng)
        if question_count < 0 or obstacle_count < 0:
            raise ValueError("question_count and obstacle_count must be non-negative")
        if end_policy not in END_POLICIES:
            raise ValueError(f"Unknown end policy '{end_policy}' (expected one of: {', '.join(END_POLICIES)})")
        self.question_count = question_count
        self.obstacle_count = obstacle_count
        self.end_policy = end_policy

    @classmethod
    def from_level(
        cls,
        level: str,
        *,
        end_policy: str = "farthest",
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> "MazeGenerator":
        settings = get_level(level)
        return cls(
            width=settings.width,
            height=settings.height,
            question_count=settings.question_count,
            obstacle_count=settings.obstacle_count,
            end_policy=end_policy,
            seed=seed,
            rng=rng,
        )

    def create_grid(self, **overrides) -> Grid:
        settings = {
            "width": self.width,
            "height": self.height,
            "question_count": self.question_count,
            "obstacle_count": self.obstacle_count,
            "end_policy": self.end_policy,
        }
        unknown = set(overrides) - set(settings)
        if unknown:
            raise TypeError(f"Unexpected grid settings: {', '.join(sorted(unknown))}")
        settings.update(overrides)
        return generate_maze(rng=self._rng, **settings)


__all__ = [
    "END_POLICIES",
    "MazeGenerator",
    "carve_passages",
    "choose_end",
    "generate_maze",
    "scatter_special_cells",
]


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a quiz maze and print it as text")
    parser.add_argument("--level", choices=sorted(LEVELS), default=None,
                        help="Use a difficulty preset (overrides size and counts)")
    parser.add_argument("--width", type=int, default=15)
    parser.add_argument("--height", type=int, default=15)
    parser.add_argument("--questions", type=int, default=5)
    parser.add_argument("--obstacles", type=int, default=3)
    parser.add_argument("--end-policy", choices=END_POLICIES, default="farthest")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--hint", action="store_true", help="Mark the hint trail from the start cell")
    parser.add_argument("--check", action="store_true", help="Print a JSON structural report")
    parser.add_argument("--png", type=Path, default=None, help="Save a preview image to this path")
    parser.add_argument("--cell-size", type=int, default=32)
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.level is not None:
        generator = MazeGenerator.from_level(args.level, end_policy=args.end_policy, seed=args.seed)
    else:
        generator = MazeGenerator(
            width=args.width,
            height=args.height,
            question_count=args.questions,
            obstacle_count=args.obstacles,
            end_policy=args.end_policy,
            seed=args.seed,
        )
    grid = generator.create_random_grid()

    trail = compute_hint(grid, grid.start, grid.end) if args.hint else set()
    print(grid.render_text(trail=trail))
    if args.check:
        print(json.dumps(check_grid(grid).to_dict(), indent=2))
    if args.png is not None:
        args.png.parent.mkdir(parents=True, exist_ok=True)
        render_grid(grid, cell_size=args.cell_size, hint=trail, player=grid.start).save(args.png)


if __name__ == "__main__":
    main()
