"""
High score persistence.

A store only has to provide ``load_high_score()`` and ``save_high_score()``.
Failures never reach the game: an unreadable score loads as 0 and a failed
write is logged and dropped.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Protocol

from .constants import SAVE_KEY_SCORE, SAVE_PATH


logger = logging.getLogger(__name__)


class HighScoreStore(Protocol):
    def load_high_score(self) -> int: ...

    def save_high_score(self, score: int) -> None: ...


class MemoryHighScoreStore:
    """Keeps the high score for the lifetime of the process only."""

    def __init__(self, value: int = 0):
        self.value = value

    def load_high_score(self) -> int:
        return self.value

    def save_high_score(self, score: int) -> None:
        self.value = int(score)


class JsonHighScoreStore:
    """Keeps ``{"highscore": N}`` in a JSON file."""

    def __init__(self, path=SAVE_PATH, key: str = SAVE_KEY_SCORE):
        self.path = path
        self.key = key

    def load_high_score(self) -> int:
        if not os.path.exists(self.path):
            return 0
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            logger.warning("Could not read high score from %s: %s", self.path, exc)
            return 0
        try:
            return max(0, int(data[self.key]))
        except (KeyError, TypeError, ValueError, OverflowError):
            logger.warning("Ignoring malformed high score file %s", self.path)
            return 0

    def save_high_score(self, score: int) -> None:
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump({self.key: int(score)}, f, indent=2)
        except OSError as exc:
            logger.warning("Could not save high score to %s: %s", self.path, exc)
