"""Rotation and angle helpers.

All angles are in degrees.  Rotations are counter-clockwise in the
canvas' own axes (x cos - y sin, x sin + y cos).
"""

from __future__ import annotations

import math


def normalize_rotation(deg: float) -> float:
    """Map any real angle to [0, 360)."""
    r = math.fmod(deg, 360.0)
    if r < 0:
        r += 360.0
    # fmod of a tiny negative can round back up to exactly 360
    if r >= 360.0:
        r = 0.0
    return r


def angular_distance(a: float, b: float) -> float:
    """Shortest unsigned distance between two rotations, in [0, 180]."""
    d = normalize_rotation(abs(a - b))
    return min(d, 360.0 - d)


def signed_angle_difference(to_deg: float, from_deg: float) -> float:
    """Signed rotation that takes *from_deg* onto *to_deg*, in (-180, 180]."""
    d = normalize_rotation(to_deg - from_deg)
    return d - 360.0 if d > 180.0 else d


def rotate_point(
    px: float, py: float,
    rotation_deg: float,
) -> tuple[float, float]:
    """Rotate a point about the origin."""
    rad = math.radians(rotation_deg)
    cos_r = math.cos(rad)
    sin_r = math.sin(rad)
    return (px * cos_r - py * sin_r, px * sin_r + py * cos_r)


def distance(a: tuple[float, float], b: tuple[float, float]) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])
