"""Maze-quiz grid algorithms: generation, hints and play sessions."""

__all__ = [
    "AbstractMazeGenerator",
    "CellType",
    "Grid",
    "MazeGenerator",
    "generate_maze",
    "HintPathfinder",
    "compute_hint",
    "GridReport",
    "check_grid",
    "LEVELS",
    "LevelSettings",
    "MazeSession",
    "MoveOutcome",
    "MoveResult",
    "render_grid",
]

from .base import AbstractMazeGenerator
from .maze import (
    CellType,
    Grid,
    MazeGenerator,
    generate_maze,
    HintPathfinder,
    compute_hint,
    GridReport,
    check_grid,
    LEVELS,
    LevelSettings,
    MazeSession,
    MoveOutcome,
    MoveResult,
    render_grid,
)
