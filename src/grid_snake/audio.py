"""Sound effect collaborators."""

from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class AudioPlayer(Protocol):
    """Anything that can play the two game sound effects."""

    def play_eat_sound(self) -> None: ...

    def play_game_over_sound(self) -> None: ...


class NullAudio:
    """Silent player used when no audio backend is attached."""

    def play_eat_sound(self) -> None:
        pass

    def play_game_over_sound(self) -> None:
        pass


class LoggingAudio:
    """Records sound cues to the log, for headless runs."""

    def __init__(self) -> None:
        self.played: list[str] = []

    def play_eat_sound(self) -> None:
        self.played.append("eat")
        logger.debug("Sound: eat")

    def play_game_over_sound(self) -> None:
        self.played.append("game_over")
        logger.debug("Sound: game over")
