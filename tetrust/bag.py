"""Seven-bag randomiser for tetromino kinds."""

from __future__ import annotations

import random

from .pieces import TetrominoKind


class Bag:
    """Yields every kind once per shuffled bag of seven, endlessly."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._kinds = list(TetrominoKind)
        self._rng.shuffle(self._kinds)
        self._index = 0

    def __iter__(self) -> "Bag":
        return self

    def __next__(self) -> TetrominoKind:
        kind = self._kinds[self._index]
        self._index += 1
        if self._index >= len(self._kinds):
            self._rng.shuffle(self._kinds)
            self._index = 0
        return kind