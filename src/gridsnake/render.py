from __future__ import annotations

import pygame

from . import config
from .state import Direction, Phase, Snapshot


def format_timer(seconds: int) -> str:
    minutes, seconds = divmod(seconds, 60)
    return f"{minutes:02d}:{seconds:02d}"


def arrow_points(rect: pygame.Rect, direction: Direction) -> list[tuple[int, int]]:
    drow, dcol = direction.value
    r = rect.width // 3
    cx, cy = rect.center
    tip = (cx + dcol * r, cy + drow * r)
    # Base corners sit behind the centre, spread along the perpendicular.
    bx, by = cx - dcol * r, cy - drow * r
    return [tip, (bx - drow * r, by + dcol * r), (bx + drow * r, by - dcol * r)]


def _cell_rect(row: int, col: int, block: int) -> pygame.Rect:
    return pygame.Rect(col * block, config.HUD_HEIGHT + row * block, block, block)


def draw_state(
    screen: pygame.Surface,
    font: pygame.font.Font,
    snap: Snapshot,
    best: int,
    elapsed_seconds: int,
    block: int = config.BLOCK,
    buttons: dict[Direction, pygame.Rect] | None = None,
) -> None:
    screen.fill(config.BLACK)

    hud = f"Score: {snap.score}   Best: {best}   {format_timer(elapsed_seconds)}"
    screen.blit(font.render(hud, True, config.WHITE), (10, 10))
    pygame.draw.line(screen, config.GREY, (0, config.HUD_HEIGHT - 1), (screen.get_width(), config.HUD_HEIGHT - 1))

    for i, (row, col) in enumerate(snap.cells):
        color = config.GREEN if i == 0 else config.DARK_GREEN
        pygame.draw.rect(screen, color, _cell_rect(row, col, block))

    if snap.food is not None:
        pygame.draw.rect(screen, config.RED, _cell_rect(*snap.food, block))

    for direction, rect in (buttons or {}).items():
        pygame.draw.rect(screen, config.GREY, rect, border_radius=4)
        pygame.draw.polygon(screen, config.WHITE, arrow_points(rect, direction))

    if snap.phase is Phase.IDLE:
        _draw_banner(screen, font, "Press SPACE to start")
    elif snap.phase is Phase.GAME_OVER:
        title = "Board cleared!" if snap.won else "Game over"
        _draw_banner(screen, font, f"{title}  Score {snap.score}  (SPACE to restart)")

    pygame.display.flip()


def _draw_banner(screen: pygame.Surface, font: pygame.font.Font, text: str) -> None:
    label = font.render(text, True, config.WHITE)
    rect = label.get_rect(center=(screen.get_width() // 2, screen.get_height() // 2))
    screen.blit(label, rect)
