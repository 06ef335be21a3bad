"""Authoring capture — turn an arranged designer board into a new Level.

The captured piece poses become the solution targets (in percentages, so
the level lays out on any canvas) and the pieces start from the standard
scattered layout around the canvas edges.
"""

from __future__ import annotations

import logging
import random
import string
import uuid
from dataclasses import dataclass
from typing import Iterable

from tangram.geometry import CoordinateMapper, normalize_rotation
from tangram.shapes import PieceKind

from .models import Difficulty, Level, PieceSpec, TargetSpec


log = logging.getLogger(__name__)

LEVEL_NAME_LENGTH = 5

# (kind, x_pct, y_pct, color): pieces scattered around the edges.
DEFAULT_START_LAYOUT: tuple[tuple[PieceKind, float, float, str], ...] = (
    (PieceKind.LARGE_TRIANGLE_1, 15.0, 20.0, "red"),
    (PieceKind.LARGE_TRIANGLE_2, 85.0, 20.0, "blue"),
    (PieceKind.MEDIUM_TRIANGLE, 20.0, 85.0, "green"),
    (PieceKind.SMALL_TRIANGLE_1, 15.0, 50.0, "yellow"),
    (PieceKind.SMALL_TRIANGLE_2, 80.0, 85.0, "orange"),
    (PieceKind.SQUARE, 85.0, 50.0, "purple"),
    (PieceKind.PARALLELOGRAM, 50.0, 90.0, "pink"),
)


@dataclass(frozen=True)
class CapturedPose:
    """A piece pose read off the board, in canvas units."""
    kind: PieceKind
    x: float
    y: float
    rotation_deg: float
    mirrored: bool = False


def random_level_name(rng: random.Random | None = None) -> str:
    """Five random uppercase letters."""
    rng = rng or random.Random()
    return "".join(rng.choice(string.ascii_uppercase) for _ in range(LEVEL_NAME_LENGTH))


def default_start_pieces() -> tuple[PieceSpec, ...]:
    return tuple(
        PieceSpec(
            id=f"p-{kind.value}",
            kind=kind,
            x_pct=x_pct,
            y_pct=y_pct,
            rotation_deg=0.0,
            color=color,
        )
        for kind, x_pct, y_pct, color in DEFAULT_START_LAYOUT
    )


def level_from_poses(
    poses: Iterable[CapturedPose],
    mapper: CoordinateMapper,
    *,
    name: str | None = None,
    difficulty: Difficulty = Difficulty.EASY,
    rng: random.Random | None = None,
) -> Level:
    """Build a new Level whose targets are *poses*."""
    targets = []
    for pose in poses:
        x_pct, y_pct = mapper.to_percent((pose.x, pose.y))
        targets.append(TargetSpec(
            id=f"t-{pose.kind.value}",
            kind=pose.kind,
            x_pct=x_pct,
            y_pct=y_pct,
            rotation_deg=normalize_rotation(pose.rotation_deg),
            mirrored=pose.mirrored and pose.kind.is_chiral,
        ))

    level = Level(
        id=str(uuid.uuid4()),
        name=name or random_level_name(rng),
        difficulty=difficulty,
        targets=tuple(targets),
        pieces=default_start_pieces(),
    )
    log.info("Captured level %s with %d targets", level.name, len(targets))
    for t in targets:
        log.debug("  %s: (%.1f%%, %.1f%%) rot=%.0f°",
                  t.kind.value, t.x_pct, t.y_pct, t.rotation_deg)
    return level
