"""Snake on a fixed 30x30 grid: a UI-independent engine plus a pygame front-end."""

from .engine import GameEngine, GameOverEvent, Snapshot
from .game import Food, GameState, Signal, StepOutcome, speed_for_score, speed_label
from .highscore import HighScoreStore, MemoryHighScoreStore

__all__ = [
    "GameEngine", "GameOverEvent", "Snapshot",
    "Food", "GameState", "Signal", "StepOutcome", "speed_for_score", "speed_label",
    "HighScoreStore", "MemoryHighScoreStore",
]
