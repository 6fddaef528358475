# viz/renderer_headless.py
from __future__ import annotations
from config import AppConfig
from core.interfaces import Snapshot
from viz.render_iface import Renderer

class HeadlessRenderer(Renderer):
    def __init__(self):
        self.frames = 0
        self.last: Snapshot | None = None
        self.overlay: str | None = None
    def open(self, cfg: AppConfig) -> None:
        self.cfg = cfg
        self.w = cfg.grid_w
        self.h = cfg.grid_h
    def draw(self, snap: Snapshot) -> None:
        self.frames += 1
        self.last = snap
    def tick(self, fps: int) -> None:
        pass
    def close(self) -> None:
        pass
    def set_overlay(self, text: str | None) -> None:
        self.overlay = text or ""
