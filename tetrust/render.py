"""Geometry for drawing the board: vertices, triangle indices and pixel rectangles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

from .pieces import Color

EMPTY_COLOR: Color = (0.01, 0.01, 0.01)

Rect = Tuple[float, float, float, float]


@dataclass(frozen=True)
class Vertex:
    """One corner of a cell quad in normalised device coordinates."""

    position: Tuple[float, float, float]
    color: Color


def quad_indices(cells: int) -> list[int]:
    """Triangle-list indices for the given number of four-vertex quads."""
    if cells < 0:
        raise ValueError("cell count must not be negative")
    indices: list[int] = []
    for v in range(0, cells * 4, 4):
        indices.extend((v, v + 1, v + 2, v + 3, v + 2, v + 1))
    return indices


def _layout(width: int, height: int) -> tuple[float, float, float, float]:
    """Cell width, cell height and origin so the 1:2 board fits the surface."""
    if width <= 0 or height <= 0:
        raise ValueError("surface dimensions must be positive")
    ratio = width / height
    if ratio == 0.5:
        return 1.0 / 5.0, 1.0 / 10.0, -1.0, -1.0
    if ratio < 0.5:
        cell_w = 1.0 / 5.0
        cell_h = cell_w * ratio
        return cell_w, cell_h, -1.0, -(10.0 * cell_h)
    cell_h = 1.0 / 10.0
    cell_w = cell_h / ratio
    return cell_w, cell_h, -(5.0 * cell_w), -1.0


def _cells(board: Sequence[Sequence[Optional[Color]]], width: int, height: int):
    """Yield (left, bottom, cell width, cell height, colour), bottom row first."""
    cell_w, cell_h, start_x, start_y = _layout(width, height)
    for y, row in enumerate(reversed(board)):
        for x, cell in enumerate(row):
            color = EMPTY_COLOR if cell is None else tuple(cell)
            yield start_x + cell_w * x, start_y + cell_h * y, cell_w, cell_h, color


def board_vertices(
    board: Sequence[Sequence[Optional[Color]]], width: int, height: int
) -> list[Vertex]:
    """Four vertices per cell: bottom-left, bottom-right, top-left, top-right."""
    vertices: list[Vertex] = []
    for fx, fy, w, h, color in _cells(board, width, height):
        vertices.extend(
            (
                Vertex((fx, fy, 0.0), color),
                Vertex((fx + w, fy, 0.0), color),
                Vertex((fx, fy + h, 0.0), color),
                Vertex((fx + w, fy + h, 0.0), color),
            )
        )
    return vertices


def quad_rects(
    board: Sequence[Sequence[Optional[Color]]], width: int, height: int
) -> list[tuple[Rect, Color]]:
    """Pixel rectangles (left, top, width, height) with colours, bottom row first."""
    rects: list[tuple[Rect, Color]] = []
    for fx, fy, w, h, color in _cells(board, width, height):
        left = (fx + 1.0) / 2.0 * width
        right = (fx + w + 1.0) / 2.0 * width
        top = (1.0 - (fy + h)) / 2.0 * height
        bottom = (1.0 - fy) / 2.0 * height
        rects.append(((left, top, right - left, bottom - top), color))
    return rects


def iter_colors(rects: Iterable[tuple[Rect, Color]]) -> list[Color]:
    """The colours of a sequence of rectangles, in order."""
    return [color for _, color in rects]