# viz/renderer_colors.py
from core.interfaces import Obstacle

BG = (255, 255, 255)
BORDER = (255, 255, 255)
GRID = (225, 225, 225)
BODY = (255, 0, 0)
HEAD = (204, 255, 0)
TEXT = (20, 20, 20)
GAME_OVER = (120, 0, 0)

OBSTACLE = {
    Obstacle.APPLE: (60, 170, 60),
    Obstacle.BANANA: (240, 210, 40),
    Obstacle.CHERRY: (150, 20, 60),
}
