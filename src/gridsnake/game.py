from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

import pygame

from . import config
from .controls import QUIT_KEYS, START_KEYS, button_rects, directions_from_events
from .engine import Engine
from .highscore import HighScoreStore
from .render import draw_state
from .scheduler import Schedule
from .state import ConfigurationError, Phase


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="gridsnake", description="Grid snake game (pygame).")
    parser.add_argument("--rows", type=int, default=config.ROWS, help="Grid rows.")
    parser.add_argument("--cols", type=int, default=config.COLS, help="Grid columns.")
    parser.add_argument("--cell-size", type=int, default=config.BLOCK, help="Cell size in pixels.")
    parser.add_argument("--tick-ms", type=int, default=config.TICK_MS, help="Movement period in milliseconds.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement.")
    parser.add_argument("--score-file", type=Path, default=config.SCORE_FILE, help="Where the best score is kept.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging verbosity.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        engine = Engine(args.rows, args.cols, rng=random.Random(args.seed))
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    scores = HighScoreStore(args.score_file)
    scores.load()

    pygame.init()
    board_bottom = config.HUD_HEIGHT + args.rows * args.cell_size
    width = args.cols * args.cell_size
    screen = pygame.display.set_mode((width, board_bottom + config.PAD_HEIGHT))
    buttons = button_rects(width, board_bottom)
    pygame.display.set_caption("gridsnake")
    font = pygame.font.Font(None, 28)
    clock = pygame.time.Clock()
    schedule = Schedule(args.tick_ms)
    schedule.cancel()

    snap = engine.snapshot()
    running = True
    while running:
        elapsed = clock.tick(config.FPS)

        events = pygame.event.get()
        for event in events:
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key in QUIT_KEYS:
                running = False
            elif event.type == pygame.KEYDOWN and event.key in START_KEYS and snap.phase is not Phase.RUNNING:
                scores.load()
                snap = engine.restart()
                schedule = Schedule(args.tick_ms)

        for direction in directions_from_events(events, buttons):
            engine.request_direction(direction)

        for _ in range(schedule.advance(elapsed)):
            snap = engine.tick()
            if snap.phase is Phase.GAME_OVER:
                schedule.cancel()
                scores.submit(snap.score)
                print("Game Over! Score:", snap.score)
                break

        draw_state(screen, font, snap, scores.best, schedule.elapsed_seconds, args.cell_size, buttons)

    pygame.quit()
    return 0
