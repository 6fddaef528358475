# core/board.py  (obstacle grid, no pygame)
from __future__ import annotations
from typing import List, Tuple
import numpy as np
from .errors import ContractViolation
from .interfaces import Obstacle

class Board:
    """Fixed width x height grid of obstacle cells, indexed [x, y].

    Every mutation is a checked per-cell transition, so the obstacle counter
    always matches the number of non-empty cells.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ContractViolation(f"board dimensions must be positive, got {width}x{height}")
        self._width = int(width)
        self._height = int(height)
        self._grid = np.zeros((self._width, self._height), dtype=np.uint8)
        self._count = 0

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def capacity(self) -> int:
        return self._width * self._height

    def contains(self, c: Tuple[int, int]) -> bool:
        x, y = c
        return 0 <= x < self._width and 0 <= y < self._height

    def get(self, x: int, y: int) -> Obstacle:
        self._check_bounds(x, y)
        return Obstacle(int(self._grid[x, y]))

    def set_obstacle(self, x: int, y: int, tier: Obstacle = Obstacle.APPLE) -> None:
        self._check_bounds(x, y)
        if tier == Obstacle.NONE:
            raise ContractViolation("set_obstacle needs a non-empty tier")
        if self._grid[x, y] != Obstacle.NONE:
            raise ContractViolation(f"cell ({x}, {y}) already holds an obstacle")
        self._grid[x, y] = int(tier)
        self._count += 1

    def clear_obstacle(self, x: int, y: int) -> None:
        self._check_bounds(x, y)
        if self._grid[x, y] == Obstacle.NONE:
            raise ContractViolation(f"cell ({x}, {y}) is already empty")
        self._grid[x, y] = Obstacle.NONE
        self._count -= 1

    def obstacle_count(self) -> int:
        return self._count

    def obstacles(self) -> List[Tuple[int, int, Obstacle]]:
        # np.nonzero walks the array in C order: x outer, y inner
        xs, ys = np.nonzero(self._grid)
        return [(int(x), int(y), Obstacle(int(self._grid[x, y]))) for x, y in zip(xs, ys)]

    def _check_bounds(self, x: int, y: int) -> None:
        # numpy would silently wrap negative indices
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise ContractViolation(
                f"cell ({x}, {y}) outside {self._width}x{self._height} board")
