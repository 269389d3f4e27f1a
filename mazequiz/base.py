"""Abstract interface for seeded grid generators."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Generic, List, Optional, Tuple, TypeVar

GridT = TypeVar("GridT")

MIN_SIZE = 5


def normalize_odd(value: int) -> int:
    """Round an even dimension up to the next odd value."""

    return value if value % 2 == 1 else value + 1


class AbstractMazeGenerator(ABC, Generic[GridT]):
    """Base class for generators that build grids from a private random source."""

    def __init__(
        self,
        width: int,
        height: int,
        *,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.width, self.height = self.normalize_size(width, height)
        self._rng = rng if rng is not None else random.Random(seed)

    @staticmethod
    def normalize_size(width: int, height: int) -> Tuple[int, int]:
        """Coerce both dimensions to odd values and enforce the minimum size."""

        width = normalize_odd(int(width))
        height = normalize_odd(int(height))
        if width < MIN_SIZE or height < MIN_SIZE:
            raise ValueError(
                f"width and height must be at least {MIN_SIZE} after odd normalization, "
                f"got {width}x{height}"
            )
        return width, height

    @abstractmethod
    def create_grid(self, **overrides) -> GridT:
        """Create a grid, optionally overriding the configured settings."""

    def create_random_grid(self) -> GridT:
        """Create a single grid with the configured settings."""

        return self.create_grid()

    def generate_batch(self, count: int) -> List[GridT]:
        """Generate ``count`` independent grids from the shared random source."""

        if count < 0:
            raise ValueError("count must be non-negative")
        return [self.create_random_grid() for _ in range(count)]


__all__ = [
    "AbstractMazeGenerator",
    "MIN_SIZE",
    "normalize_odd",
]
