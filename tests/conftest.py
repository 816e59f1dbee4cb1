import random

import pytest

from gridsnake.config import Config
from gridsnake.engine import GameEngine
from gridsnake.game import Food, NORMAL
from gridsnake.highscore import MemoryHighScoreStore


class ScriptedRandom(random.Random):
    """Random source that replays queued values so tests can pin every draw."""

    def __init__(self, ints=(), floats=(), choices=()):
        super().__init__(0)
        self.ints = list(ints)
        self.floats = list(floats)
        self.choices = list(choices)

    def randint(self, a, b):
        value = self.ints.pop(0)
        assert a <= value <= b
        return value

    def random(self):
        return self.floats.pop(0)

    def choice(self, seq):
        value = self.choices.pop(0)
        assert value in seq
        return value


@pytest.fixture
def cfg():
    return Config(seed=1234, high_score_path="unused.json")

@pytest.fixture
def rng():
    return random.Random(1234)

@pytest.fixture
def store():
    return MemoryHighScoreStore()

@pytest.fixture
def engine(store, rng, cfg):
    return GameEngine(store=store, rng=rng, cfg=cfg)

def place(state, snake, velocity, food=(30, 30), kind=NORMAL, score=None):
    """Put a state into a known position."""
    state.snake = list(snake)
    state.velocity = velocity
    state.food = Food(food, kind)
    if score is not None:
        state.score = score
    return state
