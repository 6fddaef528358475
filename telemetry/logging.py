from __future__ import annotations
import csv, os
from typing import Dict, Any, Protocol, Callable

from core.interfaces import Obstacle, TickResult

ALL_KEYS = [
    "tick",
    "points", "obstacles", "snake_len",
    "ate", "placed",
    "outcome", "reason",
]

class Logger(Protocol):
    def log(self, tick: int, scalars: Dict[str, Any]) -> None: ...
    def flush(self) -> None: ...
    def close(self) -> None: ...


class NullLogger:
    """Drops everything. Used when no log path is configured."""
    def log(self, tick: int, scalars: Dict[str, Any]) -> None:
        pass
    def flush(self) -> None:
        pass
    def close(self) -> None:
        pass


class CSVLogger:
    """Append-only CSV logger with header auto-discovery or predefined schema."""
    def __init__(self, path: str, fieldnames: list[str] | None = None):
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        self.path = path
        self._fieldnames = fieldnames
        self._file = open(path, "a", newline="")
        self._writer = None

    def log(self, tick: int, scalars: Dict[str, Any]) -> None:
        scalars = {"tick": tick, **scalars}
        if self._writer is None:
            if self._fieldnames is None:
                self._fieldnames = list(scalars.keys())
            self._writer = csv.DictWriter(
                self._file,
                fieldnames=self._fieldnames,
                extrasaction="ignore",   # unseen keys are dropped, not fatal
            )
            if self._file.tell() == 0:
                self._writer.writeheader()
        self._writer.writerow(scalars)

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()


def make_logger(path: str | None) -> Logger:
    return CSVLogger(path, fieldnames=ALL_KEYS) if path else NullLogger()


def make_tick_logger(logger: Logger, log_every: int = 25) -> Callable[[TickResult, Any], None]:
    """
    Returns a function(result, snapshot) -> None that logs tick scalars
    at a controlled cadence: every `log_every` ticks, plus every tick
    on which something happened (eating, obstacle generation, game over).
    """
    def _on_tick(result: TickResult, snap) -> None:
        eventful = result.ate != Obstacle.NONE or result.placed > 0 or result.game_over
        if result.tick % log_every != 0 and not eventful:
            return
        scalars = {
            "points": result.points,
            "obstacles": len(snap.obstacles),
            "snake_len": len(snap.snake),
            "ate": result.ate.name.lower() if result.ate != Obstacle.NONE else "",
            "placed": result.placed,
            "outcome": result.outcome.value,
            "reason": result.reason.value if result.reason is not None else "",
        }
        logger.log(result.tick, scalars)
        if result.game_over:
            logger.flush()
    return _on_tick
