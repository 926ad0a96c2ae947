"""Window, input handling and the main loop."""

from __future__ import annotations

import argparse
import math
import random
from typing import Optional, Sequence

import pygame

from .actions import HardDrop, Hold, Move, Rotate
from .game import Tetris
from .pieces import Color
from .render import quad_rects

BACKGROUND = (0, 0, 0)


def _to_rgb(color: Color) -> tuple[int, int, int]:
    """Convert a linear colour in 0..1 to 8-bit sRGB, clamping overflow."""

    def channel(c: float) -> int:
        c = min(1.0, max(0.0, c))
        if c <= 0.0031308:
            s = 12.92 * c
        else:
            s = 1.055 * math.pow(c, 1.0 / 2.4) - 0.055
        return round(s * 255)

    r, g, b = color
    return channel(r), channel(g), channel(b)


class App:
    """Holds the game plus the input and display state around it."""

    def __init__(self, game: Optional[Tetris] = None) -> None:
        self.game = game if game is not None else Tetris()
        self.soft = False
        self.paused = False
        self.running = True
        self.size = (0, 0)
        self.configured = False

    def resize(self, width: int, height: int) -> None:
        """Record a new surface size; zero sizes are ignored."""
        if width > 0 and height > 0:
            self.size = (width, height)
            self.configured = True

    def update(self) -> bool:
        """Advance the game unless paused; return whether it changed."""
        if self.paused:
            return False
        return self.game.update(self.soft)

    def handle_key(self, key: int, pressed: bool) -> bool:
        """Apply a key press or release; return whether the key was used."""
        game = self.game
        if pressed:
            if key == pygame.K_SPACE:
                game.process_action(HardDrop())
            elif key == pygame.K_LEFT:
                game.process_action(Move(-1.0))
            elif key == pygame.K_RIGHT:
                game.process_action(Move(1.0))
            elif key == pygame.K_UP:
                game.process_action(Rotate(math.radians(90.0)))
            elif key == pygame.K_DOWN:
                game.process_action(Rotate(math.radians(-90.0)))
            elif key == pygame.K_p:
                self.paused = not self.paused
            elif key == pygame.K_h:
                game.process_action(Hold())
            elif key == pygame.K_a:
                game.toggle_autoplay()
            elif key == pygame.K_ESCAPE:
                self.running = False
            elif key == pygame.K_LSHIFT:
                self.soft = True
            else:
                return False
            return True
        if key == pygame.K_LSHIFT:
            self.soft = False
            return True
        return False

    def draw(self, surface: pygame.Surface) -> None:
        """Clear the surface and draw the board with the falling piece."""
        surface.fill(BACKGROUND)
        if not self.configured:
            return
        width, height = self.size
        for (left, top, w, h), color in quad_rects(self.game.full_board(), width, height):
            x0, y0 = round(left), round(top)
            x1, y1 = round(left + w), round(top + h)
            pygame.draw.rect(surface, _to_rgb(color), pygame.Rect(x0, y0, x1 - x0, y1 - y0))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open a window and play until it is closed or Escape is pressed."""
    parser = argparse.ArgumentParser(prog="tetrust", description="Falling-block puzzle game.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the piece order")
    parser.add_argument("--width", type=int, default=500)
    parser.add_argument("--height", type=int, default=800)
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)
        pygame.display.set_caption("tetrust")
        app = App(Tetris(rng=random.Random(args.seed)))
        app.resize(*screen.get_size())
        clock = pygame.time.Clock()
        while app.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    app.running = False
                elif event.type == pygame.VIDEORESIZE:
                    app.resize(event.w, event.h)
                elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                    app.handle_key(event.key, event.type == pygame.KEYDOWN)
            app.update()
            screen = pygame.display.get_surface()
            app.draw(screen)
            pygame.display.flip()
            clock.tick(120)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())