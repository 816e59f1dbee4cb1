# render.py
from typing import Tuple
import pygame  # type: ignore

from .config import (
    GRID_SIZE, HUD_HEIGHT,
    BG, GRID, GREEN, HEAD, RED, YELLOW, TEXT, OVERLAY,
)
from .engine import GameOverEvent, Snapshot


def window_size(cell_size: int) -> Tuple[int, int]:
    side = GRID_SIZE * cell_size
    return side, side + HUD_HEIGHT

def draw_cell(screen: pygame.Surface, cell_size: int, gx: int, gy: int, color: Tuple[int, int, int]) -> None:
    # grid cells are 1-indexed; the board sits below the HUD strip
    rect = pygame.Rect((gx - 1) * cell_size, HUD_HEIGHT + (gy - 1) * cell_size, cell_size, cell_size)
    pygame.draw.rect(screen, color, rect)

def draw_board(screen: pygame.Surface, cell_size: int) -> None:
    side = GRID_SIZE * cell_size
    for i in range(GRID_SIZE + 1):
        pygame.draw.line(screen, GRID, (i * cell_size, HUD_HEIGHT), (i * cell_size, HUD_HEIGHT + side))
        pygame.draw.line(screen, GRID, (0, HUD_HEIGHT + i * cell_size), (side, HUD_HEIGHT + i * cell_size))

def draw_game(screen: pygame.Surface, font: pygame.font.Font, cell_size: int, snap: Snapshot) -> None:
    screen.fill(BG)
    draw_board(screen, cell_size)
    # food
    fx, fy = snap.food.cell
    draw_cell(screen, cell_size, fx, fy, YELLOW if snap.food.is_special else RED)
    # snake
    for i, (x, y) in enumerate(snap.snake):
        draw_cell(screen, cell_size, x, y, HEAD if i == 0 else GREEN)
    # hud
    hud = f"Score: {snap.score}   High Score: {snap.high_score}   Speed: {snap.speed_label}"
    screen.blit(font.render(hud, True, TEXT), (8, 8))
    if snap.paused:
        draw_overlay(screen, font, ["PAUSED", "Space/Esc to resume"])

def draw_overlay(screen: pygame.Surface, font: pygame.font.Font, lines) -> None:
    width, height = screen.get_size()
    # Dim with translucent overlay
    overlay = pygame.Surface((width, height), pygame.SRCALPHA)
    overlay.fill(OVERLAY)
    screen.blit(overlay, (0, 0))

    top = height // 2 - 16 * len(lines)
    for i, line in enumerate(lines):
        surf = font.render(line, True, (240, 240, 250) if i == 0 else TEXT)
        screen.blit(surf, surf.get_rect(center=(width // 2, top + 32 * i)))

def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, event: GameOverEvent) -> None:
    draw_overlay(screen, font, [
        "GAME OVER",
        f"Score: {event.score}",
        f"High Score: {event.high_score}",
        "Press any key to play again",
    ])
