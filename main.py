# main.py
import argparse

from config import AppConfig
from runners.run_snake import main as snake
from runners.run_random import main as random_play

DEFAULTS = AppConfig()

def parse_args(argv=None):
    p = argparse.ArgumentParser()
    p.add_argument("mode", choices=["snake", "random"])
    p.add_argument("--width", type=int, default=DEFAULTS.grid_w)
    p.add_argument("--height", type=int, default=DEFAULTS.grid_h)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--fps", type=int, default=DEFAULTS.fps)
    p.add_argument("--ticks", type=int, default=DEFAULTS.autoplay_ticks,
                   help="tick limit for random mode")
    p.add_argument("--log", default=None, help="CSV file for tick logs")
    return p.parse_args(argv)

def build_config(args) -> AppConfig:
    return AppConfig().with_(
        grid_w=args.width,
        grid_h=args.height,
        seed=args.seed,
        fps=args.fps,
        autoplay_ticks=args.ticks,
        log_path=args.log,
    )

def main(argv=None):
    args = parse_args(argv)
    cfg = build_config(args)
    if args.mode == "snake":
        snake(cfg)
    elif args.mode == "random":
        random_play(cfg)

if __name__ == "__main__":
    main()
