"""Player actions that drive a game."""

from __future__ import annotations

from dataclasses import dataclass


class Action:
    """Base of every action a game can process."""

    __slots__ = ()


@dataclass(frozen=True)
class Move(Action):
    """Shift the falling piece sideways by dx columns."""

    dx: float


@dataclass(frozen=True)
class Rotate(Action):
    """Rotate the falling piece by the given angle."""

    radians: float


@dataclass(frozen=True)
class HardDrop(Action):
    """Drop the falling piece to the floor and lock it."""


@dataclass(frozen=True)
class Reset(Action):
    """Start a fresh game."""


@dataclass(frozen=True)
class Hold(Action):
    """Swap the falling piece with the held one."""