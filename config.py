# config.py
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from core.interfaces import Obstacle

@dataclass(frozen=True, slots=True)
class AppConfig:
    # board / simulation
    grid_w: int = 25
    grid_h: int = 25
    start: Tuple[int, int] = (5, 6)
    seed: Optional[int] = None

    # obstacle schedule: first batch on tick 1, then every `obstacle_every` ticks
    obstacle_every: int = 100
    obstacle_batch: int = 10
    obstacle_tiers: Tuple[Obstacle, ...] = (Obstacle.APPLE, Obstacle.BANANA, Obstacle.CHERRY)

    # gameplay / manual controls
    fps: int = 15
    autoplay_ticks: int = 2000

    # render
    render_cell: int = 20
    render_title: str = "snake"
    render_grid_lines: bool = False
    render_show_hud: bool = True
    render_record_dir: Optional[str] = None

    # logging
    log_path: Optional[str] = None
    log_every: int = 25

    def __post_init__(self):
        if self.obstacle_every < 1:
            raise ValueError(f"obstacle_every must be >= 1, got {self.obstacle_every}")
        if self.obstacle_batch < 1:
            raise ValueError(f"obstacle_batch must be >= 1, got {self.obstacle_batch}")
        if not self.obstacle_tiers or Obstacle.NONE in self.obstacle_tiers:
            raise ValueError("obstacle_tiers needs at least one non-empty tier")
        if self.autoplay_ticks < 1:
            raise ValueError(f"autoplay_ticks must be >= 1, got {self.autoplay_ticks}")
        if self.log_every < 1:
            raise ValueError(f"log_every must be >= 1, got {self.log_every}")

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)
