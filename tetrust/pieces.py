"""Tetromino kinds, shapes, positions and rotation."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Tuple

Color = Tuple[float, float, float]


@dataclass(frozen=True)
class Point:
    """A position or offset on the board plane."""

    x: float
    y: float

    def __add__(self, other: object) -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)


class TetrominoKind(Enum):
    """The seven tetromino shapes."""

    I = 0  # noqa: E741
    O = 1
    S = 2
    Z = 3
    J = 4
    L = 5
    T = 6


_SHAPES: dict[TetrominoKind, tuple[tuple[tuple[float, float], ...], tuple[float, float], Color]] = {
    TetrominoKind.I: (
        ((-1.5, -0.5), (-0.5, -0.5), (0.5, -0.5), (1.5, -0.5)),
        (4.5, 0.5),
        (0.19, 0.65, 0.80),
    ),
    TetrominoKind.O: (
        ((-0.5, -0.5), (-0.5, 0.5), (0.5, -0.5), (0.5, 0.5)),
        (4.5, 0.5),
        (0.80, 0.70, 0.03),
    ),
    TetrominoKind.S: (
        ((1.0, -1.0), (0.0, -1.0), (0.0, 0.0), (-1.0, 0.0)),
        (4.0, 0.0),
        (0.26, 0.71, 0.26),
    ),
    TetrominoKind.Z: (
        ((-1.0, -1.0), (0.0, -1.0), (0.0, 0.0), (1.0, 0.0)),
        (4.0, 0.0),
        (0.80, 0.13, 0.16),
    ),
    TetrominoKind.J: (
        ((-1.0, -1.0), (-1.0, 0.0), (0.0, 0.0), (1.0, 0.0)),
        (4.0, 0.0),
        (0.35, 0.4, 0.68),
    ),
    TetrominoKind.L: (
        ((1.0, -1.0), (-1.0, 0.0), (0.0, 0.0), (1.0, 0.0)),
        (4.0, 0.0),
        (0.80, 0.40, 0.10),
    ),
    TetrominoKind.T: (
        ((0.0, 1.0), (-1.0, 0.0), (0.0, 0.0), (1.0, 0.0)),
        (4.0, 0.0),
        (0.68, 0.3, 0.61),
    ),
}


def _round_tenths(value: float) -> float:
    """Round to one decimal place, halves away from zero."""
    scaled = value * 10.0
    return math.copysign(math.floor(abs(scaled) + 0.5), scaled) / 10.0


@dataclass
class Tetromino:
    """A piece: its kind, block offsets around an anchor, and colour."""

    kind: TetrominoKind
    points: tuple[Point, ...]
    anchor: Point
    color: Color

    @classmethod
    def from_kind(cls, kind: TetrominoKind | int) -> "Tetromino":
        """Build a piece of the given kind at its spawn position."""
        kind = TetrominoKind(kind)
        offsets, anchor, color = _SHAPES[kind]
        return cls(
            kind=kind,
            points=tuple(Point(x, y) for x, y in offsets),
            anchor=Point(*anchor),
            color=color,
        )

    def rotate(self, radians: float) -> None:
        """Rotate the block offsets about the anchor."""
        sin = math.sin(radians)
        cos = math.cos(radians)
        self.points = tuple(
            Point(
                _round_tenths(p.x * cos - p.y * sin),
                _round_tenths(p.x * sin + p.y * cos),
            )
            for p in self.points
        )

    def cells(self) -> list[tuple[int, int]]:
        """Board cells covered by the piece as (column, row) pairs.

        Columns truncate toward zero; rows also clamp at zero.
        """
        return [
            (int(p.x + self.anchor.x), max(0, int(p.y + self.anchor.y)))
            for p in self.points
        ]

    def copy(self) -> "Tetromino":
        """Return an independent copy of this piece."""
        return replace(self)