"""Score keeping and collectable minerals."""

from __future__ import annotations

from dataclasses import dataclass

from pygame.math import Vector2


class ScoreSystem:
    """Tracks the score and highscore, reporting score changes to a callback."""

    def __init__(self, on_change=None):
        self._on_change = on_change
        self._score = 0
        self.highscore = 0

    @property
    def score(self) -> int:
        return self._score

    @score.setter
    def score(self, value: int) -> None:
        self._score = value
        if self._on_change is not None:
            self._on_change(self._score)

    def add_score(self, increment: int) -> None:
        self.score = self._score + increment


@dataclass
class Mineral:
    """A quantity of minerals lying at a position."""

    position: Vector2
    minerals: int