# runners/run_snake.py
from config import AppConfig
from core.snake_rules import Rules
from telemetry.logging import make_logger, make_tick_logger
from viz.keyboard import Keyboard
from viz.renderer_pygame import PygameRenderer

def main(cfg: AppConfig):
    rules = Rules(cfg)
    logger = make_logger(cfg.log_path)
    on_tick = make_tick_logger(logger, cfg.log_every)

    rend = PygameRenderer()
    rend.open(cfg)
    kbd = Keyboard()

    # like a held joystick: the last arrow pressed keeps being fed every tick
    direction = None
    result = None
    try:
        while True:
            key = kbd.poll()
            if key == "quit":
                break
            if key is not None:
                direction = key

            if not rules.terminated:
                result = rules.tick(direction)
                on_tick(result, rules.snapshot())
                if result.game_over:
                    rend.set_overlay("Esc to quit")
                    print(f"[game over] reason={result.reason.value} points={result.points} ticks={result.tick}")

            rend.draw(rules.snapshot())
            rend.tick(cfg.fps)
    finally:
        rend.close()
        logger.close()
    return result
