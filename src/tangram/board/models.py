"""Runtime board entities — plain data mutated by the engine."""

from __future__ import annotations

import math
from dataclasses import dataclass

from tangram.shapes import PieceKind, Point


@dataclass
class Transform:
    """Canvas pose of a piece or target.

    ``rotation_deg`` may hold any real value; comparisons normalise it.
    ``mirrored`` is only honoured for the parallelogram.
    """
    x: float
    y: float
    rotation_deg: float = 0.0
    mirrored: bool = False

    @property
    def position(self) -> Point:
        return (self.x, self.y)


@dataclass
class Piece:
    id: str
    kind: PieceKind
    transform: Transform
    color: str = "red"
    target_id: str | None = None        # bound target, if snapped

    @property
    def is_snapped(self) -> bool:
        return self.target_id is not None


@dataclass
class Target:
    id: str
    kind: PieceKind
    pose: Transform                     # the solution pose
    piece_id: str | None = None         # bound piece, if occupied

    @property
    def occupied(self) -> bool:
        return self.piece_id is not None


@dataclass(frozen=True)
class Edge:
    """A polygon side in canvas space."""
    start: Point
    end: Point

    @property
    def midpoint(self) -> Point:
        return ((self.start[0] + self.end[0]) / 2, (self.start[1] + self.end[1]) / 2)

    @property
    def angle_deg(self) -> float:
        """Direction angle from start to end, in (-180, 180]."""
        return math.degrees(math.atan2(self.end[1] - self.start[1],
                                       self.end[0] - self.start[0]))

    @property
    def length(self) -> float:
        return math.hypot(self.end[0] - self.start[0], self.end[1] - self.start[1])


class BoardError(Exception):
    """Programmer error: the host referenced something the board does not hold."""

    def __init__(self, subject_id: str, reason: str) -> None:
        self.subject_id = subject_id
        self.reason = reason
        super().__init__(f"'{subject_id}': {reason}")


class UnknownPieceError(BoardError):
    def __init__(self, piece_id: str) -> None:
        super().__init__(piece_id, "no such piece on the board")
