# tests/conftest.py
import os
import sys

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable (so core.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pygame as pg
import pytest

from config import AppConfig

@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    yield
    pg.quit()

@pytest.fixture
def screen():
    # Plain Surface is fine for draw tests (no need for display mode)
    return pg.Surface((400, 400), pg.SRCALPHA)

@pytest.fixture
def rules_factory(monkeypatch):
    """Build Rules; with regen=False the periodic obstacle batch is a no-op
    so hand-placed obstacles are the only ones on the board."""
    from core.snake_rules import Rules
    def make(width=8, height=13, start=(5, 6), segments=None, regen=False, **kwargs):
        rules = Rules(AppConfig(grid_w=width, grid_h=height, start=start, seed=1234, **kwargs),
                      initial_segments=segments)
        if not regen:
            monkeypatch.setattr(rules, "generate_obstacles", lambda n: 0)
        return rules
    return make
