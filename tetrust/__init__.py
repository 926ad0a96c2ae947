"""Falling-block puzzle game with a seven-piece bag, hold, ghost piece and autoplay."""

__version__ = "0.1.0"
__all__ = ["actions", "app", "bag", "game", "pieces", "render"]