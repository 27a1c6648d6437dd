from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class HighScoreStore:
    """Best score kept as a single integer in a text file."""

    def __init__(self, path: Path):
        self.path = Path(path)
        self.best = 0

    def load(self) -> int:
        try:
            self.best = max(int(self.path.read_text().strip()), 0)
        except FileNotFoundError:
            self.best = 0
        except (OSError, ValueError) as e:
            logger.warning("could not read high score from %s: %s", self.path, e)
            self.best = 0
        return self.best

    def submit(self, score: int) -> bool:
        """Persist `score` if it beats the best. Returns True on a new record."""
        if score <= self.best:
            return False
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(str(score))
        except OSError as e:
            logger.warning("could not save high score to %s: %s", self.path, e)
            return False
        self.best = score
        return True
