# runners/run_random.py
import random
from typing import Optional
from config import AppConfig
from core.interfaces import Direction, TickResult
from core.snake_rules import Rules
from telemetry.logging import make_logger, make_tick_logger
from viz.render_iface import Renderer
from viz.renderer_headless import HeadlessRenderer

DIRECTIONS = list(Direction)

def main(cfg: AppConfig, renderer: Optional[Renderer] = None) -> TickResult:
    """Autoplay: a random direction every tick (reversals are absorbed by the
    rules) until game over or `cfg.autoplay_ticks` ticks."""
    rules = Rules(cfg)
    picker = random.Random(cfg.seed)
    logger = make_logger(cfg.log_path)
    on_tick = make_tick_logger(logger, cfg.log_every)

    rend = renderer if renderer is not None else HeadlessRenderer()
    rend.open(cfg)

    result = None
    try:
        for _ in range(cfg.autoplay_ticks):
            result = rules.tick(picker.choice(DIRECTIONS))
            snap = rules.snapshot()
            on_tick(result, snap)
            rend.draw(snap)
            rend.tick(cfg.fps)
            if result.game_over:
                break
    finally:
        rend.close()
        logger.close()

    reason = result.reason.value if result.reason is not None else "-"
    print(f"[random] ticks={result.tick} points={result.points} "
          f"obstacles={rules.board.obstacle_count()} reason={reason}")
    return result
