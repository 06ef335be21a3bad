"""Placement math — canonical polygons to canvas-space vertices and edges.

Order of operations for each canonical vertex:
  1. scale by the shared unit size
  2. negate x when the piece is mirrored (parallelogram only)
  3. rotate about the canonical origin
  4. translate by the piece position
"""

from __future__ import annotations

from tangram.config import SNAP_RULES
from tangram.geometry import polygon_bounds, rotate_point
from tangram.geometry.polygon import Bounds
from tangram.shapes import PieceKind, Point, polygon, scale

from .models import Edge, Piece, Transform


def transform_vertices(
    kind: PieceKind,
    transform: Transform,
    unit_size: float = SNAP_RULES.unit_size,
) -> list[Point]:
    """World vertices of *kind* posed at *transform*."""
    mirror = transform.mirrored and kind.is_chiral
    out: list[Point] = []
    for vx, vy in scale(polygon(kind), unit_size):
        if mirror:
            vx = -vx
        rx, ry = rotate_point(vx, vy, transform.rotation_deg)
        out.append((rx + transform.x, ry + transform.y))
    return out


def world_vertices(piece: Piece, unit_size: float = SNAP_RULES.unit_size) -> list[Point]:
    return transform_vertices(piece.kind, piece.transform, unit_size)


def edges_of(vertices: list[Point]) -> list[Edge]:
    """Consecutive vertex pairs, wrapping back to the first."""
    n = len(vertices)
    return [Edge(vertices[i], vertices[(i + 1) % n]) for i in range(n)]


def piece_edges(piece: Piece, unit_size: float = SNAP_RULES.unit_size) -> list[Edge]:
    return edges_of(world_vertices(piece, unit_size))


def piece_bounds(piece: Piece, unit_size: float = SNAP_RULES.unit_size) -> Bounds:
    return polygon_bounds(world_vertices(piece, unit_size))
