# core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import NamedTuple, Optional, Tuple

class Coordinate(NamedTuple):
    """One grid cell. Negative values only show up transiently, off-board."""
    x: int
    y: int

class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))

    def step(self, c: Tuple[int, int]) -> Coordinate:
        dx, dy = self.value
        return Coordinate(c[0] + dx, c[1] + dy)

class Obstacle(IntEnum):
    """Cell content; any tier other than NONE is an edible obstacle."""
    NONE = 0
    APPLE = 1
    BANANA = 2
    CHERRY = 3

class Collision(Enum):
    NONE = "none"
    WALL = "wall"
    OBSTACLE = "obstacle"
    SELF = "self"

class Outcome(Enum):
    CONTINUE = "continue"
    GAME_OVER = "game_over"

@dataclass(frozen=True)
class Snapshot:
    snake: Tuple[Coordinate, ...]                 # head first
    obstacles: Tuple[Tuple[int, int, Obstacle], ...]
    direction: Optional[Direction]
    points: int
    tick_count: int
    terminated: bool
    reason: Collision | None
    grid_w: int
    grid_h: int

@dataclass(frozen=True)
class TickResult:
    outcome: Outcome
    reason: Collision | None       # WALL or SELF on GAME_OVER
    ate: Obstacle                  # tier eaten this tick, NONE otherwise
    placed: int                    # obstacles generated this tick
    tick: int                      # tick counter after this tick
    points: int

    @property
    def game_over(self) -> bool:
        return self.outcome is Outcome.GAME_OVER
