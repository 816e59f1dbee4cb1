# highscore.py
"""
Persistence for the single best-score value.

The file holds a small JSON object, e.g. ``{"high_score": 42}``. Reading is
forgiving (anything unusable counts as 0) and writing is best-effort: a failed
write is logged and the game carries on.
"""
from __future__ import annotations
import json
import logging
import os

from .config import CFG

logger = logging.getLogger(__name__)

KEY = "high_score"


def _parse(raw) -> int:
    if isinstance(raw, dict):
        raw = raw.get(KEY, 0)
    if isinstance(raw, bool):
        return 0
    try:
        value = int(raw)
    except (TypeError, ValueError, OverflowError):
        return 0
    return value if value >= 0 else 0


class HighScoreStore:
    """High score kept in a JSON file."""

    def __init__(self, path: str | None = None):
        self.path = path or CFG.high_score_path

    def load(self) -> int:
        if not os.path.exists(self.path):
            logger.debug(f"No high score file at {self.path}, starting from 0")
            return 0
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read high score from {self.path}: {e}")
            return 0
        value = _parse(data)
        logger.debug(f"Loaded high score {value} from {self.path}")
        return value

    def save(self, value: int) -> None:
        try:
            folder = os.path.dirname(self.path)
            if folder:
                os.makedirs(folder, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump({KEY: int(value)}, f)
        except OSError as e:
            logger.warning(f"Could not save high score to {self.path}: {e}")
            return
        logger.debug(f"Saved high score {value} to {self.path}")


class MemoryHighScoreStore:
    """In-process store, used with --no-save and in tests."""

    def __init__(self, value: int = 0):
        self.value = value
        self.saves = 0

    def load(self) -> int:
        return self.value

    def save(self, value: int) -> None:
        self.value = value
        self.saves += 1
