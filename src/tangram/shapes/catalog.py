"""Canonical tangram polygons in unit design space.

The large triangle has unit legs, so its hypotenuse is sqrt(2) and the
seven pieces tile a sqrt(2) x sqrt(2) square (area 2):

    large = 2 x medium = 4 x small = 2 x square = 2 x parallelogram

All polygons are counter-clockwise with the first vertex at the origin,
which is also the rotation pivot used by the placement math.
"""

from __future__ import annotations

import math
from typing import Sequence

from tangram.geometry.polygon import polygon_area

from .models import PieceKind, Point, Polygon

_HALF_SQRT2 = math.sqrt(2) / 2

_LARGE_TRIANGLE: Polygon = ((0.0, 0.0), (1.0, 0.0), (0.0, 1.0))
_MEDIUM_TRIANGLE: Polygon = ((0.0, 0.0), (_HALF_SQRT2, 0.0), (0.0, _HALF_SQRT2))
_SMALL_TRIANGLE: Polygon = ((0.0, 0.0), (0.5, 0.0), (0.0, 0.5))
_SQUARE: Polygon = ((0.0, 0.0), (0.5, 0.0), (0.5, 0.5), (0.0, 0.5))
# Sides 0.5 and sqrt(2)/2, acute angle 45°.
_PARALLELOGRAM: Polygon = ((0.0, 0.0), (0.5, 0.0), (1.0, 0.5), (0.5, 0.5))

CANONICAL_POLYGONS: dict[PieceKind, Polygon] = {
    PieceKind.LARGE_TRIANGLE_1: _LARGE_TRIANGLE,
    PieceKind.LARGE_TRIANGLE_2: _LARGE_TRIANGLE,
    PieceKind.MEDIUM_TRIANGLE: _MEDIUM_TRIANGLE,
    PieceKind.SMALL_TRIANGLE_1: _SMALL_TRIANGLE,
    PieceKind.SMALL_TRIANGLE_2: _SMALL_TRIANGLE,
    PieceKind.SQUARE: _SQUARE,
    PieceKind.PARALLELOGRAM: _PARALLELOGRAM,
}


def polygon(kind: PieceKind) -> Polygon:
    """Return the canonical vertex list for *kind*."""
    return CANONICAL_POLYGONS[kind]


def scale(poly: Sequence[Point], factor: float) -> Polygon:
    """Multiply every coordinate by *factor*."""
    return tuple((x * factor, y * factor) for x, y in poly)


def centroid(poly: Sequence[Point]) -> Point:
    """Arithmetic mean of the vertices (nominal rotation pivot)."""
    n = len(poly)
    return (sum(p[0] for p in poly) / n, sum(p[1] for p in poly) / n)


def kind_area(kind: PieceKind) -> float:
    """Area of the canonical polygon in square design units."""
    return abs(polygon_area(polygon(kind)))
