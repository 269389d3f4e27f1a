"""Maze grid generation and hint pathfinding package."""

__all__ = [
    "CellType",
    "Grid",
    "Position",
    "MazeGenerator",
    "generate_maze",
    "HintPathfinder",
    "bfs_distances",
    "compute_hint",
    "find_route",
    "GridReport",
    "check_grid",
    "LEVELS",
    "LevelSettings",
    "get_level",
    "MazeSession",
    "MoveOutcome",
    "MoveResult",
    "render_grid",
]

from .grid import CellType, Grid, Position
from .generator import MazeGenerator, generate_maze
from .pathfinder import HintPathfinder, bfs_distances, compute_hint, find_route
from .checks import GridReport, check_grid
from .levels import LEVELS, LevelSettings, get_level
from .session import MazeSession, MoveOutcome, MoveResult
from .render import render_grid
