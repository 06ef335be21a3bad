"""Shared tuning constants for the tangram engine.

Three groups of values live here:

  SnapRules        gameplay snapping tolerances and the canonical-to-canvas
                   unit size shared by every piece and target.
  MagnetismConfig  authoring-mode alignment assistant (corner / edge / angle
                   magnetism, overlap prevention, indicator display).
  BoardSettings    per-board host configuration: canvas size and whether
                   programmer errors raise or are only logged.

The snapper, the magnetism engine and the placement math all read their
parameters from here, so changing a default keeps them in step.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SnapRules:
    """Gameplay snapping tolerances.

    Distances are in canvas units, angles in degrees.
    """

    unit_size: float = 100.0
    """Canvas units per canonical unit; canonical polygons are scaled by this."""

    position_threshold: float = 50.0
    """Maximum piece-to-target distance for a snap."""

    rotation_threshold_deg: float = 30.0
    """Maximum angular distance between piece and target rotation."""

    rotate_step_deg: float = 45.0
    """Increment applied by the rotate button / double-tap gesture."""

    def __post_init__(self) -> None:
        if self.unit_size <= 0:
            raise ValueError("unit_size must be a positive number")
        if self.position_threshold < 0:
            raise ValueError("position_threshold must not be negative")
        if not 0 <= self.rotation_threshold_deg <= 180:
            raise ValueError("rotation_threshold_deg must be within [0, 180]")


@dataclass(frozen=True)
class MagnetismConfig:
    """Authoring-mode magnetism behaviour.

    Use ``dataclasses.replace`` to derive a variant, e.g. with
    overlap prevention switched off.
    """

    enabled: bool = True
    snap_distance: float = 25.0
    angle_snap_threshold_deg: float = 15.0
    edge_alignment: bool = True
    corner_alignment: bool = True
    angle_alignment: bool = True
    prevent_overlap: bool = True
    show_indicators: bool = True

    commit_strength: float = 0.7
    """A candidate must be strictly stronger than this to move the piece."""

    max_hints: int = 3
    """Potential indicators surfaced when nothing is strong enough."""

    def __post_init__(self) -> None:
        if self.snap_distance <= 0:
            raise ValueError("snap_distance must be a positive number")
        if not 0 <= self.angle_snap_threshold_deg <= 90:
            raise ValueError("angle_snap_threshold_deg must be within [0, 90]")
        if not 0 <= self.commit_strength < 1:
            raise ValueError("commit_strength must be within [0, 1)")
        if self.max_hints < 0:
            raise ValueError("max_hints must not be negative")


@dataclass(frozen=True)
class BoardSettings:
    """Host-supplied board configuration."""

    canvas_width: float = 768.0
    canvas_height: float = 1024.0

    strict: bool = True
    """Raise on programmer errors (unknown ids, bad levels).  When False the
    offending call is logged and ignored."""

    tray_layout: bool = False
    """Arrange pieces in the bottom tray on load instead of using the
    level's starting poses."""

    def __post_init__(self) -> None:
        if self.canvas_width <= 0 or self.canvas_height <= 0:
            raise ValueError("canvas size must be positive")


# Module-level singletons, importable everywhere.
SNAP_RULES = SnapRules()
MAGNETISM = MagnetismConfig()
BOARD_SETTINGS = BoardSettings()
