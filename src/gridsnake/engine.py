# engine.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple
import logging
import random
import threading

import numpy as np  # type: ignore

from .config import GRID_SIZE, CFG, Config
from .game import (
    Cell, Food, GameState, Signal, StepOutcome,
    new_game_state, set_direction, step_game, speed_label,
)

logger = logging.getLogger(__name__)

# Cell codes used by Snapshot.as_grid()
EMPTY, BODY, FOOD, SPECIAL_FOOD, HEAD = 0, 1, 2, 3, 7


@dataclass(frozen=True)
class GameOverEvent:
    score: int
    high_score: int


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of one game for renderers."""
    snake: Tuple[Cell, ...]
    food: Food
    score: int
    high_score: int
    paused: bool
    game_over: bool
    speed_ms: int

    @property
    def speed_label(self) -> str:
        return speed_label(self.speed_ms)

    def as_grid(self) -> np.ndarray:
        """
        Board as a GRID_SIZE x GRID_SIZE int8 matrix indexed [y - 1, x - 1].
        Food is drawn first so a snake segment on top of it wins.
        """
        grid = np.zeros((GRID_SIZE, GRID_SIZE), dtype=np.int8)
        fx, fy = self.food.cell
        grid[fy - 1, fx - 1] = SPECIAL_FOOD if self.food.is_special else FOOD
        for x, y in self.snake[1:]:
            grid[y - 1, x - 1] = BODY
        hx, hy = self.snake[0]
        grid[hy - 1, hx - 1] = HEAD
        return grid


GameOverListener = Callable[[GameOverEvent], None]


class GameEngine:
    """
    Owns one game session: state, random source and high score store.

    Drivers call step() once per tick (every `speed` ms) and set_direction()
    on input. All public methods take the same lock, so a threaded driver is
    serialized.
    """

    def __init__(self, store=None, rng: Optional[random.Random] = None, cfg: Config = CFG):
        self.cfg = cfg
        self.rng = rng if rng is not None else random.Random(cfg.seed)
        self.store = store
        self._lock = threading.RLock()
        self._listeners: List[GameOverListener] = []
        self.game_over_event: Optional[GameOverEvent] = None

        high_score = store.load() if store is not None else 0
        self.state: GameState = new_game_state(self.rng, high_score, cfg)
        logger.info(f"Engine ready (high score {high_score})")

    # ----- read-only views -----
    @property
    def score(self) -> int:
        with self._lock:
            return self.state.score

    @property
    def high_score(self) -> int:
        with self._lock:
            return self.state.high_score

    @property
    def paused(self) -> bool:
        with self._lock:
            return self.state.paused

    @property
    def game_over(self) -> bool:
        with self._lock:
            return self.state.game_over

    @property
    def velocity(self) -> Tuple[int, int]:
        with self._lock:
            return self.state.velocity

    @property
    def speed(self) -> int:
        with self._lock:
            return self.state.speed_ms

    def snapshot(self) -> Snapshot:
        with self._lock:
            s = self.state
            return Snapshot(
                snake=tuple(s.snake),
                food=s.food,
                score=s.score,
                high_score=s.high_score,
                paused=s.paused,
                game_over=s.game_over,
                speed_ms=s.speed_ms,
            )

    # ----- lifecycle -----
    def add_game_over_listener(self, listener: GameOverListener) -> None:
        with self._lock:
            self._listeners.append(listener)

    def reset(self) -> None:
        """Start a new game; the high score carries over."""
        with self._lock:
            self.state = new_game_state(self.rng, self.state.high_score, self.cfg)
            self.game_over_event = None
            logger.debug("New game")

    def acknowledge_game_over(self) -> GameOverEvent:
        """Consume the pending game-over notification and start a new game."""
        with self._lock:
            event = self.game_over_event
            if event is None:
                raise RuntimeError("No finished game to acknowledge")
            self.reset()
            return event

    # ----- transitions -----
    def set_direction(self, signal: Signal) -> bool:
        with self._lock:
            return set_direction(self.state, signal)

    def step(self) -> StepOutcome:
        with self._lock:
            previous_high = self.state.high_score
            outcome = step_game(self.state, self.rng, self.cfg)

            if outcome is StepOutcome.ATE:
                logger.debug(f"Ate food, score {self.state.score}, speed {self.speed}ms")
                if self.state.high_score > previous_high:
                    self._persist_high_score()
            elif outcome is StepOutcome.DIED:
                self._finish()
            return outcome

    def _persist_high_score(self) -> None:
        if self.store is None:
            return
        try:
            self.store.save(self.state.high_score)
        except Exception as e:  # best-effort
            logger.warning(f"High score not saved: {e}")

    def _finish(self) -> None:
        event = GameOverEvent(score=self.state.score, high_score=self.state.high_score)
        self.game_over_event = event
        logger.info(f"Game over: score {event.score}, high score {event.high_score}")
        for listener in list(self._listeners):
            listener(event)
