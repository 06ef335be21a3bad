"""
Pure-Python polygon helpers.

Coordinates are plain (x, y) tuples.  Canonical shapes live in unit design
space; placed pieces live in canvas units.
"""

from __future__ import annotations

from typing import Sequence

from shapely.geometry import box as shapely_box

Vertex = tuple[float, float]
Bounds = tuple[float, float, float, float]


def polygon_area(outline: Sequence[Vertex]) -> float:
    """Signed area via shoelace formula (positive = CCW)."""
    n = len(outline)
    if n < 3:
        return 0.0
    area = 0.0
    for i in range(n):
        x0, y0 = outline[i]
        x1, y1 = outline[(i + 1) % n]
        area += x0 * y1 - x1 * y0
    return area / 2.0


def polygon_bounds(outline: Sequence[Vertex]) -> Bounds:
    """Return (min_x, min_y, max_x, max_y)."""
    xs = [v[0] for v in outline]
    ys = [v[1] for v in outline]
    return min(xs), min(ys), max(xs), max(ys)


def bounds_overlap(a: Bounds, b: Bounds, tolerance: float = 1e-6) -> bool:
    """True when two axis-aligned boxes share a region of positive area.

    Boxes that only touch along an edge or at a corner do not overlap,
    and intersections thinner than *tolerance* are ignored so that
    pieces snapped flush against each other are not reported.
    """
    inter = shapely_box(*a).intersection(shapely_box(*b))
    if inter.is_empty:
        return False
    minx, miny, maxx, maxy = inter.bounds
    return (maxx - minx) > tolerance and (maxy - miny) > tolerance


def bounds_gap(a: Bounds, b: Bounds) -> float:
    """Chebyshev gap between two AABBs.

    Returns the larger of the horizontal and vertical separations.
    Negative values mean the boxes overlap on both axes.  Any two points
    taken from the boxes are at least this far apart.
    """
    gap_x = max(a[0] - b[2], b[0] - a[2])
    gap_y = max(a[1] - b[3], b[1] - a[3])
    return max(gap_x, gap_y)
