# main.py
from __future__ import annotations
import argparse
import logging
from typing import Optional

import pygame  # type: ignore

from .config import CFG, Config
from .engine import GameEngine
from .game import Signal, StepOutcome
from .highscore import HighScoreStore, MemoryHighScoreStore
from .render import window_size, draw_game, draw_game_over

TICK_EVENT = pygame.USEREVENT + 1

# Arrow keys / WASD steer, space / escape toggle pause
KEYMAP = {
    pygame.K_UP: Signal.UP,
    pygame.K_w: Signal.UP,
    pygame.K_DOWN: Signal.DOWN,
    pygame.K_s: Signal.DOWN,
    pygame.K_LEFT: Signal.LEFT,
    pygame.K_a: Signal.LEFT,
    pygame.K_RIGHT: Signal.RIGHT,
    pygame.K_d: Signal.RIGHT,
    pygame.K_SPACE: Signal.PAUSE,
    pygame.K_ESCAPE: Signal.PAUSE,
}


def signal_for_key(key: int) -> Optional[Signal]:
    return KEYMAP.get(key)


class TickTimer:
    """pygame timer firing TICK_EVENT every `interval` ms; re-armed only on change."""

    def __init__(self):
        self.interval = 0

    def arm(self, interval: int) -> None:
        if interval != self.interval:
            pygame.time.set_timer(TICK_EVENT, interval)
            self.interval = interval

    def stop(self) -> None:
        self.arm(0)


def build_engine(args: argparse.Namespace) -> GameEngine:
    cfg = Config(seed=args.seed, cell_size=args.cell_size)
    if args.high_score_file:
        cfg.high_score_path = args.high_score_file
    store = MemoryHighScoreStore() if args.no_save else HighScoreStore(cfg.high_score_path)
    return GameEngine(store=store, cfg=cfg)

def handle_event(engine: GameEngine, timer: TickTimer, event) -> bool:
    """Apply one pygame event to the engine and timer. Returns False to quit."""
    if event.type == pygame.QUIT:
        return False

    if event.type == pygame.KEYDOWN:
        if engine.game_over:
            # any key dismisses the game-over screen
            engine.acknowledge_game_over()
            timer.arm(engine.speed)
        elif event.key == pygame.K_r:
            engine.reset()
            timer.arm(engine.speed)
        else:
            signal = signal_for_key(event.key)
            if signal is not None:
                engine.set_direction(signal)

    elif event.type == TICK_EVENT:
        outcome = engine.step()
        if outcome is StepOutcome.DIED:
            timer.stop()
        elif outcome is StepOutcome.ATE:
            timer.arm(engine.speed)
    return True

def run(engine: GameEngine) -> None:
    cell_size = engine.cfg.cell_size

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode(window_size(cell_size))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()
    timer = TickTimer()
    timer.arm(engine.speed)

    running = True
    while running:
        for event in pygame.event.get():
            running = handle_event(engine, timer, event) and running

        draw_game(screen, font, cell_size, engine.snapshot())
        if engine.game_over_event is not None:
            draw_game_over(screen, font, engine.game_over_event)
        pygame.display.flip()
        clock.tick(60)  # render rate; movement is driven by TICK_EVENT

    timer.stop()
    pygame.quit()

def main(argv=None):
    parser = argparse.ArgumentParser(prog="gridsnake", description="Classic Snake on a 30x30 grid.")
    parser.add_argument("--seed", type=int, default=CFG.seed, help="seed for food placement")
    parser.add_argument(
        "--high-score-file",
        type=str,
        default=None,
        help=f"where the best score is kept (default: {CFG.high_score_path})",
    )
    parser.add_argument("--no-save", action="store_true", help="do not read or write the high score file")
    parser.add_argument("--cell-size", type=int, default=CFG.cell_size, help="pixels per grid cell")
    parser.add_argument("--verbose", "-v", action="store_true", help="debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    engine = build_engine(args)
    print(f"High score: {engine.high_score}. Arrows/WASD to move, Space/Esc to pause, R to restart.")
    run(engine)
    print(f"Bye! Best score: {engine.high_score}")

if __name__ == "__main__":
    main()
