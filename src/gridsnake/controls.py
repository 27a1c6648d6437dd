from __future__ import annotations

import pygame

from . import config
from .state import Direction

KEY_MAP = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_w: Direction.UP,
    pygame.K_s: Direction.DOWN,
    pygame.K_a: Direction.LEFT,
    pygame.K_d: Direction.RIGHT,
}

START_KEYS = (pygame.K_SPACE, pygame.K_RETURN)
QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)


def direction_for_key(key: int) -> Direction | None:
    return KEY_MAP.get(key)


def button_rects(width: int, top: int, size: int = config.BUTTON) -> dict[Direction, pygame.Rect]:
    """Lay out the four arrow buttons as a cross centred in the pad below the board."""
    cx = width // 2
    cy = top + config.PAD_HEIGHT // 2
    half = size // 2
    return {
        Direction.UP: pygame.Rect(cx - half, cy - half - size, size, size),
        Direction.DOWN: pygame.Rect(cx - half, cy + half, size, size),
        Direction.LEFT: pygame.Rect(cx - half - size, cy - half, size, size),
        Direction.RIGHT: pygame.Rect(cx + half, cy - half, size, size),
    }


def direction_for_click(pos: tuple[int, int], buttons: dict[Direction, pygame.Rect]) -> Direction | None:
    for direction, rect in buttons.items():
        if rect.collidepoint(pos):
            return direction
    return None


def directions_from_events(events, buttons: dict[Direction, pygame.Rect] | None = None) -> list[Direction]:
    directions = []
    for event in events:
        direction = None
        if event.type == pygame.KEYDOWN:
            direction = direction_for_key(event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and buttons:
            direction = direction_for_click(event.pos, buttons)
        if direction:
            directions.append(direction)
    return directions
