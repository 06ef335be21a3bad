"""Gameplay snap matching — bind a dropped piece to a compatible free target.

Targets are scanned in level order and the first one within both the
position and the rotation tolerance wins, even if a later target of the
same kind is closer.  A snap is discrete: the piece takes the target pose
exactly and both sides are bound before the function returns.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from tangram.config import SNAP_RULES, SnapRules
from tangram.geometry import angular_distance, distance, normalize_rotation

from .models import Piece, Target


log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SnapResult:
    piece_id: str
    target_id: str | None = None

    @property
    def snapped(self) -> bool:
        return self.target_id is not None


def snap_rejection(
    piece: Piece, target: Target, rules: SnapRules = SNAP_RULES,
) -> str | None:
    """Reason *piece* cannot snap to *target*, or None when it can."""
    if target.occupied:
        return "occupied"
    if piece.kind is not target.kind:
        return "kind mismatch"
    dist = distance(piece.transform.position, target.pose.position)
    if dist > rules.position_threshold:
        return f"distance {dist:.1f} > {rules.position_threshold:.1f}"
    angle = angular_distance(piece.transform.rotation_deg, target.pose.rotation_deg)
    if angle > rules.rotation_threshold_deg:
        return f"rotation diff {angle:.1f}° > {rules.rotation_threshold_deg:.1f}°"
    return None


def find_snap_target(
    piece: Piece,
    targets: Sequence[Target],
    rules: SnapRules = SNAP_RULES,
) -> Target | None:
    """First target in level order that *piece* can snap to."""
    for target in targets:
        reason = snap_rejection(piece, target, rules)
        if reason is None:
            return target
        log.debug("Target %s rejects %s: %s", target.id, piece.id, reason)
    return None


def snap_piece(
    piece: Piece,
    targets: Sequence[Target],
    rules: SnapRules = SNAP_RULES,
) -> SnapResult:
    """Try to snap *piece*; on success move it onto the target and bind both.

    A miss leaves the piece exactly where it was dropped.
    """
    target = find_snap_target(piece, targets, rules)
    if target is None:
        log.debug("No snap for %s at (%.1f, %.1f) rot=%.1f°",
                  piece.id, piece.transform.x, piece.transform.y,
                  piece.transform.rotation_deg)
        return SnapResult(piece_id=piece.id)

    piece.transform.x = target.pose.x
    piece.transform.y = target.pose.y
    piece.transform.rotation_deg = normalize_rotation(target.pose.rotation_deg)
    if piece.kind.is_chiral:
        piece.transform.mirrored = target.pose.mirrored
    piece.target_id = target.id
    target.piece_id = piece.id
    log.info("Snapped %s to target %s", piece.id, target.id)
    return SnapResult(piece_id=piece.id, target_id=target.id)


def unsnap_piece(piece: Piece, targets: Sequence[Target]) -> str | None:
    """Release *piece* from its target. Returns the freed target id."""
    if piece.target_id is None:
        return None
    target_id = piece.target_id
    for target in targets:
        if target.id == target_id:
            target.piece_id = None
            break
    piece.target_id = None
    log.info("Unsnapped %s from target %s", piece.id, target_id)
    return target_id
