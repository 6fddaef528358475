# viz/renderer_pygame.py
from __future__ import annotations
import os
import pygame as pg
from typing import Optional, Union
from config import AppConfig
from core.interfaces import Snapshot
import viz.renderer_colors as theme

PathLike = Union[str, bytes, os.PathLike]

class PygameRenderer:
    def __init__(self):
        self.cell = 20
        self.cfg: Optional[AppConfig] = None
        self.surf: Optional[pg.Surface] = None
        self.clock: Optional[pg.time.Clock] = None
        self._auto_flip = True
        self._grid_w = 0
        self._grid_h = 0
        self._frame_idx = 0
        self._overlay_text: Optional[str] = None

    def set_overlay(self, text: Optional[str]) -> None:
        self._overlay_text = text or ""

    def open(self, cfg: AppConfig) -> None:
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg

        self._grid_w, self._grid_h = cfg.grid_w, cfg.grid_h
        self.cell = cfg.render_cell

        pg.init()
        pg.display.set_caption(cfg.render_title)
        self.surf = pg.display.set_mode((self._grid_w * self.cell, self._grid_h * self.cell))
        self.clock = pg.time.Clock()
        self._auto_flip = True
        self._frame_idx = 0

        if cfg.render_record_dir:
            os.makedirs(cfg.render_record_dir, exist_ok=True)

    def attach_surface(self, surface: pg.Surface, cfg: AppConfig) -> None:
        """Draw onto a caller-owned surface (tests, embedding). No flip, no clock."""
        if not pg.get_init():
            pg.init()
        self.cfg = cfg
        self._grid_w, self._grid_h = cfg.grid_w, cfg.grid_h
        self.cell = cfg.render_cell
        self.surf = surface
        self.clock = None
        self._auto_flip = False
        self._frame_idx = 0

        if cfg.render_record_dir:
            os.makedirs(cfg.render_record_dir, exist_ok=True)

    def draw(self, s: Snapshot) -> None:
        assert self.surf is not None, "Renderer not opened"
        assert self.cfg is not None, "Renderer config not set (call open first)"
        surf = self.surf
        c = self.cell

        surf.fill(theme.BG)

        if self.cfg.render_grid_lines:
            for x in range(s.grid_w + 1):
                pg.draw.line(surf, theme.GRID, (x * c, 0), (x * c, s.grid_h * c))
            for y in range(s.grid_h + 1):
                pg.draw.line(surf, theme.GRID, (0, y * c), (s.grid_w * c, y * c))

        for ox, oy, tier in s.obstacles:
            pg.draw.rect(surf, theme.OBSTACLE[tier], pg.Rect(ox * c, oy * c, c, c))

        # draw tail first so the head stays on top; off-board cells are clipped by pygame
        for i in range(len(s.snake) - 1, -1, -1):
            x, y = s.snake[i]
            col = theme.HEAD if i == 0 else theme.BODY
            pg.draw.rect(surf, col, pg.Rect(x * c, y * c, c, c))

        if self.cfg.render_show_hud:
            font = pg.font.SysFont(None, 22)
            txt = font.render(f"Points: {s.points}   Tick: {s.tick_count}", True, theme.TEXT)
            surf.blit(txt, (6, 4))

        if s.terminated:
            font = pg.font.SysFont(None, 36)
            reason = s.reason.value if s.reason is not None else ""
            over = font.render(f"Game over ({reason})", True, theme.GAME_OVER)
            surf.blit(over, over.get_rect(center=surf.get_rect().center))

        if self._overlay_text:
            font = pg.font.SysFont(None, 22)
            ovr = font.render(self._overlay_text, True, theme.TEXT)
            surf.blit(ovr, (6, 26))

        if self._auto_flip:
            pg.display.set_caption(f"{self.cfg.render_title}! Points: {s.points}")
            pg.display.flip()

        if self.cfg.render_record_dir:
            self._save_surface_frame()

    def tick(self, fps: int) -> None:
        if self.clock:
            self.clock.tick(fps)

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None
            self.clock = None

    # internals
    def _save_surface_frame(self) -> None:
        assert self.surf is not None
        assert self.cfg is not None
        rec_dir: PathLike = self.cfg.render_record_dir
        if not isinstance(rec_dir, (str, bytes, os.PathLike)):
            raise TypeError(f"render_record_dir must be path-like, got {type(rec_dir)}")
        fname = os.path.join(rec_dir, f"frame_{self._frame_idx:06d}.png")
        pg.image.save(self.surf, fname)
        self._frame_idx += 1
