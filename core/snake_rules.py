# core/snake_rules.py  (pure rules, no pygame)
from __future__ import annotations
from typing import Iterable, List, Optional, Set, Tuple
import random
from config import AppConfig
from .board import Board
from .errors import ContractViolation
from .interfaces import (Collision, Coordinate, Direction, Obstacle, Outcome,
                         Snapshot, TickResult)
from .snake_body import Snake

class Rules:
    """One game session: owns the board and the snake and advances them a tick at a time."""

    def __init__(self, cfg: AppConfig, initial_segments: Optional[Iterable[Tuple[int, int]]] = None):
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg
        self.rng = random.Random(cfg.seed)
        self.board = Board(cfg.grid_w, cfg.grid_h)
        segments = list(initial_segments) if initial_segments is not None else [cfg.start]
        for s in segments:
            if not self.board.contains(s):
                raise ContractViolation(f"initial segment {tuple(s)} is off the board")
        self.snake = Snake(segments)
        self.tick_count = 0
        self.last_direction: Optional[Direction] = None
        self.terminated = False
        self.reason: Optional[Collision] = None
        self._final: Optional[TickResult] = None

    def seed(self, seed: Optional[int]):
        self.rng = random.Random(seed)

    # ---- read-only accessors for the input/render shell ----
    def get_board_size(self) -> Tuple[int, int]:
        return (self.board.width, self.board.height)

    def get_snake_segments(self) -> Tuple[Coordinate, ...]:
        return self.snake.segments

    def get_obstacles(self) -> List[Tuple[int, int, Obstacle]]:
        return self.board.obstacles()

    def get_points(self) -> int:
        return self.snake.effective_length()

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=self.snake.segments,
            obstacles=tuple(self.board.obstacles()),
            direction=self.last_direction,
            points=self.get_points(),
            tick_count=self.tick_count,
            terminated=self.terminated,
            reason=self.reason,
            grid_w=self.board.width,
            grid_h=self.board.height,
        )

    # ---- tick ----
    def resolve_direction(self, proposed: Optional[Direction]) -> Optional[Direction]:
        direction = proposed if proposed is not None else self.last_direction
        if direction is None:
            return None
        # never steer straight back into the neck; before the first move the
        # heading comes from the starting body
        heading = self.last_direction if self.last_direction is not None else self.snake.heading
        if heading is not None and direction is heading.opposite:
            return heading
        return direction

    def tick(self, direction: Optional[Direction] = None) -> TickResult:
        if self.terminated:
            return self._final

        ate = Obstacle.NONE
        resolved = self.resolve_direction(direction)
        if resolved is not None:
            self.snake.move(resolved)
            collision, obstacle = self.check_collisions()
            if collision in (Collision.WALL, Collision.SELF):
                return self._game_over(collision)
            if collision is Collision.OBSTACLE:
                self.snake_eat()
                ate = obstacle
            self.last_direction = resolved

        self.tick_count += 1
        placed = 0
        if self.tick_count % self.cfg.obstacle_every == 1 % self.cfg.obstacle_every:
            placed = self.generate_obstacles(self.cfg.obstacle_batch)

        return TickResult(
            outcome=Outcome.CONTINUE, reason=None, ate=ate, placed=placed,
            tick=self.tick_count, points=self.get_points(),
        )

    def _game_over(self, reason: Collision) -> TickResult:
        self.tick_count += 1
        self.terminated, self.reason = True, reason
        self._final = TickResult(
            outcome=Outcome.GAME_OVER, reason=reason, ate=Obstacle.NONE, placed=0,
            tick=self.tick_count, points=self.get_points(),
        )
        return self._final

    # ---- collisions / eating ----
    def check_collisions(self) -> Tuple[Collision, Obstacle]:
        """Wall beats obstacle beats self. Checked over the whole body even
        though only the head enters new cells."""
        for seg in self.snake:
            if not self.board.contains(seg):
                return Collision.WALL, Obstacle.NONE
            obstacle = self.board.get(seg.x, seg.y)
            if obstacle != Obstacle.NONE:
                return Collision.OBSTACLE, obstacle
        if not self.snake.has_unique_segments():
            return Collision.SELF, Obstacle.NONE
        return Collision.NONE, Obstacle.NONE

    def snake_eat(self) -> None:
        head = self.snake.head
        self.board.clear_obstacle(head.x, head.y)
        self.snake.grow(1)

    # ---- obstacle placement (rejection sampling) ----
    def convert_index_to_coords(self, index: int) -> Tuple[int, int]:
        h = self.board.height
        return ((index // h) % self.board.width, index % h)

    def generate_obstacles_positions(self, max_obstacles: int) -> Set[Tuple[int, int]]:
        if max_obstacles <= 0:
            raise ContractViolation(f"must request at least one obstacle, got {max_obstacles}")
        capacity = self.board.capacity
        existing = self.board.obstacle_count()
        # cells taken by the snake or an existing obstacle
        blocked = set(self.snake.body)
        blocked.update((x, y) for x, y, _ in self.board.obstacles())
        chosen: Set[Tuple[int, int]] = set()
        for i in range(max_obstacles):
            # free cells are exhausted; retrying would never terminate
            if i + 1 + existing + len(self.snake.body) > capacity:
                break
            while True:
                guess = self.convert_index_to_coords(self.rng.randrange(capacity))
                if guess not in chosen and guess not in blocked:
                    chosen.add(guess)
                    break
        return chosen

    def set_obstacles(self, positions: Iterable[Tuple[int, int]], tier: Optional[Obstacle] = None) -> None:
        # sorted so a seeded rng assigns the same tiers on every run
        for x, y in sorted(positions):
            t = tier if tier is not None else self.rng.choice(self.cfg.obstacle_tiers)
            self.board.set_obstacle(x, y, t)

    def generate_obstacles(self, max_obstacles: int) -> int:
        positions = self.generate_obstacles_positions(max_obstacles)
        self.set_obstacles(positions)
        return len(positions)
