# game.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple
import random

from .config import (
    GRID_SIZE,
    STOP, UP, DOWN, LEFT, RIGHT,
    SPEED_STEPS, MAX_SPEED_MS,
    CFG, Config,
)

Cell = Tuple[int, int]

NORMAL, SPECIAL = "normal", "special"


class Signal(Enum):
    """Input symbols accepted by the engine."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAUSE = "pause"


DIRECTIONS = {
    Signal.UP: UP,
    Signal.DOWN: DOWN,
    Signal.LEFT: LEFT,
    Signal.RIGHT: RIGHT,
}


class StepOutcome(Enum):
    IDLE = "idle"      # paused, finished or not started yet
    MOVED = "moved"
    ATE = "ate"
    DIED = "died"


@dataclass(frozen=True)
class Food:
    cell: Cell
    kind: str = NORMAL

    @property
    def is_special(self) -> bool:
        return self.kind == SPECIAL


# ---------- Helpers ----------
def in_bounds(x: int, y: int) -> bool:
    return 1 <= x <= GRID_SIZE and 1 <= y <= GRID_SIZE

def is_opposite(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]

def speed_for_score(score: int) -> int:
    """Tick interval (ms) for a given score."""
    for max_score, interval in SPEED_STEPS:
        if score <= max_score:
            return interval
    return MAX_SPEED_MS

def speed_label(speed_ms: int) -> str:
    if speed_ms >= 140:
        return "Slow"
    if speed_ms >= 110:
        return "Medium"
    if speed_ms >= 90:
        return "Fast"
    if speed_ms >= 70:
        return "Very Fast"
    return "Extreme"

def spawn_food(
    rng: random.Random,
    score: int,
    special_active: bool,
    cfg: Config = CFG,
) -> Tuple[Food, bool]:
    """
    Place a new food item anywhere on the board (the snake's cells included).
    Returns (food, special_active) where the flag is set if this food is special.
    """
    fx = rng.randint(1, GRID_SIZE)
    fy = rng.randint(1, GRID_SIZE)
    if score > 0 and rng.random() < cfg.special_food_chance and not special_active:
        return Food((fx, fy), SPECIAL), True
    return Food((fx, fy), NORMAL), special_active


# ---------- State ----------
@dataclass
class GameState:
    snake: List[Cell]              # head at index 0
    velocity: Tuple[int, int]
    food: Food
    score: int
    high_score: int
    special_food_active: bool = False
    paused: bool = False
    game_over: bool = False

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def speed_ms(self) -> int:
        return speed_for_score(self.score)

def new_game_state(rng: random.Random, high_score: int = 0, cfg: Config = CFG) -> GameState:
    food, special = spawn_food(rng, 0, False, cfg)
    return GameState(
        snake=[cfg.start_cell],
        velocity=STOP,
        food=food,
        score=0,
        high_score=high_score,
        special_food_active=special,
    )


# ---------- Transitions ----------
def set_direction(state: GameState, signal: Signal) -> bool:
    """
    Apply one input signal. PAUSE always toggles; a direction is ignored while
    paused or finished and may not reverse the current velocity.
    Returns True if the state changed.
    """
    if signal is Signal.PAUSE:
        state.paused = not state.paused
        return True
    if signal not in DIRECTIONS:
        raise ValueError(f"Unknown signal: {signal!r}")
    if state.game_over or state.paused:
        return False

    cand = DIRECTIONS[signal]
    if cand == state.velocity or is_opposite(cand, state.velocity):
        return False
    state.velocity = cand
    return True

def step_game(state: GameState, rng: random.Random, cfg: Config = CFG) -> StepOutcome:
    """
    Advance the game by one tick.
    Sets state.game_over on a wall or body hit and leaves the snake untouched.
    """
    if state.game_over or state.paused or state.velocity == STOP:
        return StepOutcome.IDLE

    hx, hy = state.head
    dx, dy = state.velocity
    nx, ny = hx + dx, hy + dy

    # Wall collision
    if not in_bounds(nx, ny):
        state.game_over = True
        return StepOutcome.DIED

    new_head = (nx, ny)

    # Self collision (old head excluded)
    if new_head in state.snake[1:]:
        state.game_over = True
        return StepOutcome.DIED

    if new_head != state.food.cell:
        state.snake.insert(0, new_head)
        state.snake.pop()
        return StepOutcome.MOVED

    eaten = state.food
    if eaten.is_special:
        points = rng.choice(cfg.special_points)
        state.special_food_active = False
    else:
        points = 1

    state.score += points
    if state.score > state.high_score:
        state.high_score = state.score

    state.food, state.special_food_active = spawn_food(
        rng, state.score, state.special_food_active, cfg
    )

    # Grow: keep the tail; special food also repeats the tail segment
    tail = state.snake[-1]
    state.snake.insert(0, new_head)
    if eaten.is_special:
        state.snake.append(tail)
    return StepOutcome.ATE
