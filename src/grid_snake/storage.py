"""High-score persistence backed by a small JSON file."""

from __future__ import annotations

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

HIGH_SCORE_KEY = "highScore"


class HighScoreStore:
    """Reads and writes the best score under a fixed key.

    Read failures never propagate: a missing, unreadable, or malformed file
    counts as a high score of zero.
    """

    def __init__(self, path: str | Path, key: str = HIGH_SCORE_KEY) -> None:
        self.path = Path(path)
        self.key = key

    def load(self) -> int:
        """Return the stored high score, or 0 if none is available."""
        try:
            raw = json.loads(self.path.read_text())
        except FileNotFoundError:
            return 0
        except (OSError, ValueError):
            logger.warning("Could not read high score from %s.", self.path)
            return 0

        value = raw.get(self.key, 0) if isinstance(raw, dict) else 0
        try:
            score = int(value)
        except (TypeError, ValueError):
            logger.warning("Ignoring malformed high score %r.", value)
            return 0
        return max(score, 0)

    def save(self, score: int) -> int:
        """Persist *score* unless a higher one is already stored.

        Other keys in the file are kept. Returns the value now on disk, so
        several writers sharing the file never lower the record.
        """
        if score < 0:
            raise ValueError("High score must be non-negative.")
        data: dict = {}
        if self.path.exists():
            try:
                existing = json.loads(self.path.read_text())
            except (OSError, ValueError):
                existing = None
            if isinstance(existing, dict):
                data = existing
        stored = self.load()
        if stored >= score:
            return stored
        data[self.key] = int(score)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data))
        logger.info("High score %d saved to %s", score, self.path)
        return int(score)

    def clear(self) -> None:
        """Forget the stored high score."""
        if self.path.exists():
            self.path.unlink()
            logger.info("High score cleared at %s", self.path)
