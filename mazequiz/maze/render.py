"""Preview images of maze grids with an optional hint trail."""

from __future__ import annotations

from typing import Iterable, Optional

import numpy as np
from PIL import Image

from .grid import CellType, Grid, Position

try:
    RESAMPLE_NEAREST = Image.Resampling.NEAREST
except AttributeError:  # pragma: no cover
    RESAMPLE_NEAREST = Image.NEAREST

WALL_COLOR = (0, 0, 0)
PATH_COLOR = (255, 255, 255)
START_COLOR = (220, 30, 30)
END_COLOR = (40, 180, 80)
QUESTION_COLOR = (250, 200, 40)
OBSTACLE_COLOR = (140, 60, 200)
HINT_COLOR = (120, 190, 255)
PLAYER_COLOR = (30, 90, 220)

# Indexed by CellType.code.
PALETTE = np.zeros((len(CellType), 3), dtype=np.uint8)
for _cell, _color in (
    (CellType.EMPTY, PATH_COLOR),
    (CellType.WALL, WALL_COLOR),
    (CellType.START, START_COLOR),
    (CellType.END, END_COLOR),
    (CellType.QUESTION, QUESTION_COLOR),
    (CellType.OBSTACLE, OBSTACLE_COLOR),
):
    PALETTE[_cell.code] = _color


def render_grid(
    grid: Grid,
    *,
    cell_size: int = 32,
    hint: Optional[Iterable[Position]] = None,
    player: Optional[Position] = None,
) -> Image.Image:
    """Draw ``grid`` at ``cell_size`` pixels per cell.

    Hint cells holding plain passage are tinted; special, start and end cells
    keep their own colour so the target of the trail stays recognisable.
    """

    if cell_size < 1:
        raise ValueError("cell_size must be positive")

    codes = grid.to_array()
    pixels = PALETTE[codes]
    for x, y in hint or ():
        if grid.in_bounds((x, y)) and codes[y, x] == CellType.EMPTY.code:
            pixels[y, x] = HINT_COLOR
    if player is not None and grid.in_bounds(player):
        px, py = player
        pixels[py, px] = PLAYER_COLOR

    image = Image.fromarray(pixels)
    return image.resize((grid.width * cell_size, grid.height * cell_size), RESAMPLE_NEAREST)


__all__ = ["render_grid"]
