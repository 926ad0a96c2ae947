"""Falling-block game rules: board, gravity, moves, holds and autoplay."""

from __future__ import annotations

import copy
import math
import random
import time
from typing import Callable, List, Optional

from .actions import Action, HardDrop, Hold, Move, Reset, Rotate
from .bag import Bag
from .pieces import Color, Point, Tetromino, TetrominoKind

WIDTH = 10
HEIGHT = 20
FALL_TIME_MS = 1000
SOFT_DROP_BONUS_MS = 920
AUTOPLAY_SPEED_MS = 10
GHOST_BRIGHTNESS = 0.2
QUARTER_TURN = math.pi / 2

Board = List[List[Optional[Color]]]


class Tetris:
    """A single game: a 10x20 board plus the falling piece."""

    def __init__(
        self,
        rng: random.Random | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._clock = clock if clock is not None else time.monotonic
        self._start()

    def _start(self) -> None:
        self.board: Board = [[None] * WIDTH for _ in range(HEIGHT)]
        self.bag = Bag(self._rng)
        self.tetro = Tetromino.from_kind(next(self.bag))
        self._moved = False
        self._held: TetrominoKind | None = None
        self._fall_timer = self._clock()
        self._autoplay: tuple[list[Action], float] | None = None

    def _elapsed_ms(self, since: float) -> float:
        return (self._clock() - since) * 1000.0

    def rotate(self, radians: float) -> None:
        """Rotate the falling piece, trying small kicks when blocked."""
        candidate = self.tetro.copy()
        candidate.rotate(radians)
        for dy in (0.0, 1.0, -1.0):
            for dx in (0.0, 1.0, -1.0):
                candidate.anchor = candidate.anchor + Point(dx, dy)
                if self._is_valid(candidate):
                    self.tetro = candidate.copy()
                    break
                candidate.anchor = candidate.anchor + Point(-dx, -dy)

    def hard_drop(self) -> None:
        """Drop the piece as far as it goes and lock it."""
        self.tetro.anchor = self.tetro.anchor + Point(0.0, self._drop_distance())
        self._finish()

    def fall(self) -> None:
        """Move the piece down one row, locking it if it cannot fall."""
        if self._can_fall():
            self.tetro.anchor = self.tetro.anchor + Point(0.0, 1.0)
        else:
            self._finish()

    def move_x(self, dx: float) -> bool:
        """Shift the piece sideways; return whether the move was allowed."""
        could_fall = self._can_fall()
        self.tetro.anchor = self.tetro.anchor + Point(dx, 0.0)
        valid = self._is_valid()
        if not valid:
            self.tetro.anchor = self.tetro.anchor + Point(-dx, 0.0)
        if could_fall and not self._can_fall():
            self._fall_timer = self._clock()
        return valid

    def toggle_autoplay(self) -> None:
        """Switch automatic play on or off."""
        if self._autoplay is not None:
            self._autoplay = None
        else:
            self._autoplay = (self.auto_play_actions(), self._clock())

    def auto_play_actions(self) -> list[Action]:
        """Pick a random placement and return its actions, last one first."""
        rng = self._rng
        rotation_wanted = rng.randrange(4)
        dx_wanted = -1.0 if rng.random() < 0.5 else 1.0
        index_wanted = rng.randint(0, 2)

        chosen: list[Action] = []
        for rotation in range(4):
            actions: list[Action] = [Rotate(QUARTER_TURN)] * rotation
            trial = self._trial_copy()
            trial.rotate(rotation * QUARTER_TURN)
            start_x = trial.tetro.anchor.x
            for dx in (-1.0, 1.0):
                moves: list[Action] = []
                while trial.move_x(dx):
                    trial.tetro.anchor = trial.tetro.anchor + Point(0.0, trial._drop_distance())
                    moves.append(Move(dx))
                    if (
                        rotation == rotation_wanted
                        and dx == dx_wanted
                        and len(moves) == index_wanted + 1
                    ):
                        actions.extend(moves)
                        actions.append(HardDrop())
                        chosen = list(actions)
                trial.tetro.anchor = Point(start_x, trial.tetro.anchor.y)

        chosen.reverse()
        return chosen

    def _trial_copy(self) -> "Tetris":
        trial = copy.copy(self)
        trial.tetro = self.tetro.copy()
        return trial

    def _drop_distance(self, tetro: Tetromino | None = None) -> float:
        """Rows the piece can fall before it collides."""
        probe = (tetro if tetro is not None else self.tetro).copy()
        distance = 0.0
        while self._can_fall(probe):
            probe.anchor = probe.anchor + Point(0.0, 1.0)
            distance += 1.0
        return distance

    def _can_fall(self, tetro: Tetromino | None = None) -> bool:
        probe = (tetro if tetro is not None else self.tetro).copy()
        probe.anchor = probe.anchor + Point(0.0, 1.0)
        return self._is_valid(probe)

    def _finish(self) -> None:
        self._engrave()
        self.tetro = Tetromino.from_kind(next(self.bag))
        if not self._is_valid():
            self.reset()
        self._clear_lines()
        self._moved = False

    def _clear_lines(self) -> None:
        for row_index, row in enumerate(self.board):
            if all(cell is not None for cell in row):
                del self.board[row_index]
                self.board.insert(0, [None] * WIDTH)

    def _engrave(self) -> None:
        for x, y in self.tetro.cells():
            self.board[y][x] = self.tetro.color

    def _is_valid(self, tetro: Tetromino | None = None) -> bool:
        piece = tetro if tetro is not None else self.tetro
        for x, y in piece.cells():
            if not (0 <= x < WIDTH and 0 <= y < HEIGHT):
                return False
            if self.board[y][x] is not None:
                return False
        return True

    def update(self, soft: bool) -> bool:
        """Advance timers; return True when the picture needs redrawing."""
        changed = False
        if self._autoplay is not None:
            actions, timer = self._autoplay
            if self._elapsed_ms(timer) >= AUTOPLAY_SPEED_MS:
                if actions:
                    self.process_action(actions.pop())
                else:
                    actions = self.auto_play_actions()
                timer = self._clock()
            self._autoplay = (actions, timer)
            changed = True

        fall_time = FALL_TIME_MS - (SOFT_DROP_BONUS_MS if soft and self._can_fall() else 0)
        if self._elapsed_ms(self._fall_timer) > fall_time:
            self.fall()
            self._fall_timer = self._clock()
            return True
        return changed

    def hold(self) -> None:
        """Swap the falling piece with the held one, once per piece."""
        if self._moved:
            return
        kind = self.tetro.kind
        if self._held is not None:
            self.tetro = Tetromino.from_kind(self._held)
        else:
            self.tetro = Tetromino.from_kind(next(self.bag))
        self._held = kind
        self._moved = True

    def process_action(self, action: Action) -> None:
        """Apply one player action."""
        match action:
            case Move(dx=dx):
                self.move_x(dx)
            case Rotate(radians=radians):
                self.rotate(radians)
            case HardDrop():
                self.hard_drop()
            case Reset():
                self.reset()
            case Hold():
                self.hold()
            case _:
                raise TypeError(f"unknown action: {action!r}")

    def full_board(self) -> Board:
        """The board with the falling piece and its landing ghost drawn in."""
        board = [list(row) for row in self.board]

        ghost = self.tetro.copy()
        ghost.anchor = ghost.anchor + Point(0.0, self._drop_distance(ghost))
        ghost_color = tuple(c + GHOST_BRIGHTNESS for c in self.tetro.color)
        for x, y in ghost.cells():
            board[y][x] = ghost_color
        for x, y in self.tetro.cells():
            board[y][x] = self.tetro.color
        return board

    def reset(self) -> None:
        """Start over with an empty board."""
        self._start()

    def __str__(self) -> str:
        return "".join(
            "".join("  " if cell is None else "██" for cell in row) + "\n"
            for row in self.board
        )