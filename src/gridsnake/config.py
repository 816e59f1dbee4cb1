# config.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple
import os

# ----- Grid (1-indexed cells, x and y in [1, GRID_SIZE]) -----
GRID_SIZE = 30
CELL_SIZE = 20
HUD_HEIGHT = 32

# ----- Colors -----
BG      = (20, 20, 24)
GRID    = (30, 30, 36)
GREEN   = (80, 200, 80)
HEAD    = (130, 240, 130)
RED     = (200, 70, 70)
YELLOW  = (235, 200, 60)
TEXT    = (220, 220, 230)
OVERLAY = (0, 0, 0, 140)

# ----- Directions (dx, dy) -----
STOP = (0, 0)
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)

# ----- Speed table: (max score inclusive, tick interval in ms) -----
SPEED_STEPS = (
    (5, 150),
    (10, 120),
    (20, 100),
    (30, 80),
)
MAX_SPEED_MS = 60

# ----- High score file -----
HIGH_SCORE_ENV = "GRIDSNAKE_HIGH_SCORE_FILE"
DEFAULT_HIGH_SCORE_PATH = os.path.join(os.path.expanduser("~"), ".gridsnake", "high_score.json")


# ----- Tunables -----
@dataclass
class Config:
    seed: int | None = None
    start_cell: Tuple[int, int] = (5, 5)
    special_food_chance: float = 0.2
    special_points: Tuple[int, ...] = (3, 5)
    high_score_path: str = field(
        default_factory=lambda: os.environ.get(HIGH_SCORE_ENV, DEFAULT_HIGH_SCORE_PATH)
    )
    cell_size: int = CELL_SIZE

CFG = Config()
