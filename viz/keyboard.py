# viz/keyboard.py
import pygame as pg
from core.interfaces import Direction

KEYMAP = {
    pg.K_UP: Direction.UP,
    pg.K_DOWN: Direction.DOWN,
    pg.K_LEFT: Direction.LEFT,
    pg.K_RIGHT: Direction.RIGHT,
}

class Keyboard:
    """Polls pygame events. Returns "quit", the Direction of the last arrow
    pressed since the previous poll, or None."""

    def poll(self):
        pressed = None
        for e in pg.event.get():
            if e.type == pg.QUIT:
                return "quit"
            if e.type == pg.KEYDOWN:
                if e.key == pg.K_ESCAPE: return "quit"
                if e.key in KEYMAP:
                    pressed = KEYMAP[e.key]
        return pressed
