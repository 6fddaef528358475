# viz/render_iface.py
from __future__ import annotations
from typing import Protocol
from config import AppConfig
from core.interfaces import Snapshot

class Renderer(Protocol):
    def open(self, cfg: AppConfig) -> None: ...
    def draw(self, snap: Snapshot) -> None: ...
    def tick(self, fps: int) -> None: ...
    def close(self) -> None: ...
    def set_overlay(self, text: str | None) -> None: ...
