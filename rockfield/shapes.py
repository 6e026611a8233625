"""Outline geometry of the game objects in game coordinates."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Sequence

Point = tuple[float, float]
Shape = tuple[Point, ...]


class ShapeKind(enum.IntEnum):
    """The 2D shapes, numbered in the order their vertex buffers are created."""

    SPACESHIP = 0
    FLAME = 1
    TORPEDO = 2
    SAUCER = 3
    ASTEROID_1 = 4
    ASTEROID_2 = 5
    ASTEROID_3 = 6
    ASTEROID_4 = 7
    SPACESHIP_DEBRIS = 8
    SPACESHIP_DEBRIS_DIRECTION = 9
    DEBRIS = 10
    DIGIT_0 = 11
    DIGIT_1 = 12
    DIGIT_2 = 13
    DIGIT_3 = 14
    DIGIT_4 = 15
    DIGIT_5 = 16
    DIGIT_6 = 17
    DIGIT_7 = 18
    DIGIT_8 = 19
    DIGIT_9 = 20


def _shape(*points: tuple[float, float]) -> Shape:
    return tuple((float(x), float(y)) for x, y in points)


_SHAPES: dict[ShapeKind, Shape] = {
    ShapeKind.SPACESHIP: _shape((-6, 3), (-6, -3), (-10, -6), (14, 0), (-10, 6), (-6, 3)),
    ShapeKind.FLAME: _shape((-6, 3), (-12, 0), (-6, -3)),
    ShapeKind.TORPEDO: _shape((0, 0), (0, 1)),
    ShapeKind.SAUCER: _shape(
        (-16, -6), (16, -6), (40, 6), (-40, 6), (-16, 18), (16, 18),
        (40, 6), (16, -6), (8, -18), (-8, -18), (-16, -6), (-40, 6),
    ),
    ShapeKind.ASTEROID_1: _shape(
        (0, -12), (16, -24), (32, -12), (24, 0), (32, 12), (8, 24),
        (-16, 24), (-32, 12), (-32, -12), (-16, -24), (0, -12),
    ),
    ShapeKind.ASTEROID_2: _shape(
        (6, -6), (32, -12), (16, -24), (0, -16), (-16, -24), (-24, -12), (-16, 0),
        (-32, 12), (-16, 24), (-8, 16), (16, 24), (32, 6), (16, -6),
    ),
    ShapeKind.ASTEROID_3: _shape(
        (-16, 0), (-32, 6), (-16, 24), (0, 6), (0, 24), (16, 24),
        (32, 6), (32, 6), (16, -24), (-8, -24), (-32, -6),
    ),
    ShapeKind.ASTEROID_4: _shape(
        (8, 0), (32, -6), (32, -12), (8, -24), (-16, -24), (-8, -12), (-32, -12),
        (-32, 12), (-16, 24), (8, 16), (16, 24), (32, 12), (8, 0),
    ),
    ShapeKind.SPACESHIP_DEBRIS: _shape(
        (-2, -1), (-10, 7), (3, 1), (7, 8), (0, 3), (6, 1),
        (3, -1), (-5, -7), (0, -4), (-6, -6), (-2, 2), (2, 5),
    ),
    ShapeKind.SPACESHIP_DEBRIS_DIRECTION: _shape(
        (-40, -23), (50, 15), (0, 45), (60, -15), (10, -52), (-40, 30),
    ),
    ShapeKind.DEBRIS: _shape(
        (-32, 32), (-32, -16), (-16, 0), (-16, -32), (-8, 24),
        (8, -24), (24, 32), (24, -24), (24, -32), (32, -8),
    ),
    ShapeKind.DIGIT_0: _shape((0, -8), (4, -8), (4, 0), (0, 0), (0, -8)),
    ShapeKind.DIGIT_1: _shape((4, 0), (4, -8)),
    ShapeKind.DIGIT_2: _shape((0, -8), (4, -8), (4, -4), (0, -4), (0, 0), (4, 0)),
    ShapeKind.DIGIT_3: _shape((0, 0), (4, 0), (4, -4), (0, -4), (4, -4), (4, -8), (0, -8)),
    ShapeKind.DIGIT_4: _shape((4, 0), (4, -8), (4, -4), (0, -4), (0, -8)),
    ShapeKind.DIGIT_5: _shape((0, 0), (4, 0), (4, -4), (0, -4), (0, -8), (4, -8)),
    ShapeKind.DIGIT_6: _shape((0, -8), (0, 0), (4, 0), (4, -4), (0, -4)),
    ShapeKind.DIGIT_7: _shape((0, -8), (4, -8), (4, 0)),
    ShapeKind.DIGIT_8: _shape((0, -8), (4, -8), (4, 0), (0, 0), (0, -8), (0, -4), (4, -4)),
    ShapeKind.DIGIT_9: _shape((4, 0), (4, -8), (0, -8), (0, -4), (4, -4)),
}

# Offsets of the nine world tiles, used to draw objects seamlessly across
# the screen boundary:
#   5 7 2
#   4 0 1
#   6 8 3
_TILE_OFFSETS: Shape = _shape(
    (0.0, 0.0),
    (1024.0, 0.0),
    (1024.0, 768.0),
    (1024.0, -768.0),
    (-1024.0, 0.0),
    (-1024.0, 768.0),
    (-1024.0, -768.0),
    (0.0, 768.0),
    (0.0, -768.0),
)


def shape_points(kind: ShapeKind | int) -> Shape:
    """Return the points of a shape; raises ValueError for an unknown kind."""
    return _SHAPES[ShapeKind(kind)]


def digit_points(digit: int) -> Shape:
    """Return the line strip that draws a decimal digit 0..9."""
    if isinstance(digit, bool) or not isinstance(digit, int) or not 0 <= digit <= 9:
        raise ValueError(f"digit must be an integer from 0 to 9, got {digit!r}")
    return _SHAPES[ShapeKind(ShapeKind.DIGIT_0 + digit)]


def flatten_points(points: Iterable[Sequence[float]]) -> list[float]:
    """Lay points out as ``x0 y0 x1 y1 ...`` for a vertex buffer."""
    flat: list[float] = []
    for point in points:
        if len(point) != 2:
            raise ValueError(f"two coordinates expected, got {len(point)}")
        flat.extend(float(value) for value in point)
    return flat


def tile_offsets() -> Shape:
    """Return the world offsets of the centre tile and its eight neighbours."""
    return _TILE_OFFSETS