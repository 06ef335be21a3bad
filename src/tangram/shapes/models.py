"""Piece kinds and the plain geometry aliases shared by the engine."""

from __future__ import annotations

from enum import Enum

Point = tuple[float, float]
Polygon = tuple[Point, ...]


class PieceKind(str, Enum):
    """The seven tangram pieces.

    The two large and the two small triangles share geometry but are
    distinct kinds so a level can require both at once.
    """

    LARGE_TRIANGLE_1 = "large_triangle_1"
    LARGE_TRIANGLE_2 = "large_triangle_2"
    MEDIUM_TRIANGLE = "medium_triangle"
    SMALL_TRIANGLE_1 = "small_triangle_1"
    SMALL_TRIANGLE_2 = "small_triangle_2"
    SQUARE = "square"
    PARALLELOGRAM = "parallelogram"

    @property
    def family(self) -> str:
        """Geometry family — kinds with the same family have identical polygons."""
        return _FAMILIES[self]

    @property
    def display_name(self) -> str:
        return self.family.replace("_", " ").title()

    @property
    def is_chiral(self) -> bool:
        """True when the mirror image is not a rotation of the shape."""
        return self is PieceKind.PARALLELOGRAM


_FAMILIES: dict[PieceKind, str] = {
    PieceKind.LARGE_TRIANGLE_1: "large_triangle",
    PieceKind.LARGE_TRIANGLE_2: "large_triangle",
    PieceKind.MEDIUM_TRIANGLE: "medium_triangle",
    PieceKind.SMALL_TRIANGLE_1: "small_triangle",
    PieceKind.SMALL_TRIANGLE_2: "small_triangle",
    PieceKind.SQUARE: "square",
    PieceKind.PARALLELOGRAM: "parallelogram",
}
