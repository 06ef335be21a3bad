"""Authoring-mode magnetism — pull a dragged piece onto its neighbours.

On every drag tick the moved piece is compared with every other piece:

  corner   a vertex of the piece within ``snap_distance`` of a vertex of
           the other piece proposes the translation that makes them meet.
  edge     an edge whose midpoint is within ``snap_distance`` of another
           edge's midpoint proposes the translation that makes the
           midpoints coincide.  With angle alignment on, an edge pair that
           is within ``angle_snap_threshold_deg`` of parallel or
           anti-parallel also proposes the small rotation that closes the
           gap; the translation is then computed for the rotated piece.

Candidate strength is ``1 - distance / snap_distance``.  Only the single
strongest candidate is considered, and only if it beats
``commit_strength``; it is then vetoed if the piece's bounding box would
overlap another piece's bounding box.  Boxes are a coarse stand-in for
real polygon intersection.

Work per tick is O(pieces x vertices^2).  Neighbours whose bounding box is
further than ``snap_distance`` away are skipped before the pairwise scan.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

from tangram.config import MAGNETISM, SNAP_RULES, MagnetismConfig
from tangram.geometry import (
    bounds_gap, bounds_overlap, distance, normalize_rotation,
    polygon_bounds, signed_angle_difference,
)
from tangram.shapes import Point

from .models import Edge, Piece, Transform
from .placement import edges_of, transform_vertices, world_vertices


log = logging.getLogger(__name__)


class CandidateKind(str, Enum):
    CORNER = "corner"
    EDGE = "edge"


@dataclass(frozen=True)
class SnapCandidate:
    """A proposed pose for the dragged piece."""
    kind: CandidateKind
    x: float
    y: float
    rotation_deg: float | None      # None = keep current rotation
    strength: float                 # 0..1
    partner_id: str                 # piece being aligned against
    anchor: Point                   # the partner vertex / edge midpoint

    def as_transform(self, current: Transform) -> Transform:
        return Transform(
            x=self.x,
            y=self.y,
            rotation_deg=(current.rotation_deg if self.rotation_deg is None
                          else self.rotation_deg),
            mirrored=current.mirrored,
        )


@dataclass(frozen=True)
class SnapIndicator:
    """Visual cue for the host: where a snap landed or could land."""
    x: float
    y: float
    kind: CandidateKind
    potential: bool = False


@dataclass
class MagnetismResult:
    candidates: list[SnapCandidate] = field(default_factory=list)
    applied: SnapCandidate | None = None
    vetoed: bool = False
    indicators: list[SnapIndicator] = field(default_factory=list)

    @property
    def moved(self) -> bool:
        return self.applied is not None


# ── Candidate search ───────────────────────────────────────────────


def _alignment_delta(edge_deg: float, other_deg: float, threshold: float) -> float | None:
    """Rotation that makes two edge directions parallel or anti-parallel.

    Returns None when neither alignment is within *threshold* degrees.
    """
    diff = signed_angle_difference(other_deg, edge_deg)
    if abs(diff) <= threshold:
        return diff
    if 180.0 - abs(diff) <= threshold:
        return diff - 180.0 if diff > 0 else diff + 180.0
    return None


def _corner_candidates(
    piece: Piece,
    other: Piece,
    verts: list[Point],
    other_verts: list[Point],
    config: MagnetismConfig,
) -> list[SnapCandidate]:
    out = []
    px, py = piece.transform.position
    for v in verts:
        for ov in other_verts:
            d = distance(v, ov)
            if d > config.snap_distance:
                continue
            out.append(SnapCandidate(
                kind=CandidateKind.CORNER,
                x=px + ov[0] - v[0],
                y=py + ov[1] - v[1],
                rotation_deg=None,
                strength=1.0 - d / config.snap_distance,
                partner_id=other.id,
                anchor=ov,
            ))
    return out


def _edge_candidates(
    piece: Piece,
    other: Piece,
    edges: list[Edge],
    other_edges: list[Edge],
    config: MagnetismConfig,
    unit_size: float,
) -> list[SnapCandidate]:
    out = []
    t = piece.transform
    for i, edge in enumerate(edges):
        for other_edge in other_edges:
            d = distance(edge.midpoint, other_edge.midpoint)
            if d > config.snap_distance:
                continue

            rotation = None
            mid = edge.midpoint
            if config.angle_alignment:
                delta = _alignment_delta(
                    edge.angle_deg, other_edge.angle_deg,
                    config.angle_snap_threshold_deg,
                )
                if delta is not None:
                    rotation = normalize_rotation(t.rotation_deg + delta)
                    rotated = transform_vertices(
                        piece.kind,
                        Transform(t.x, t.y, rotation, t.mirrored),
                        unit_size,
                    )
                    mid = edges_of(rotated)[i].midpoint

            target_mid = other_edge.midpoint
            out.append(SnapCandidate(
                kind=CandidateKind.EDGE,
                x=t.x + target_mid[0] - mid[0],
                y=t.y + target_mid[1] - mid[1],
                rotation_deg=rotation,
                strength=1.0 - d / config.snap_distance,
                partner_id=other.id,
                anchor=target_mid,
            ))
    return out


def find_candidates(
    piece: Piece,
    others: Sequence[Piece],
    config: MagnetismConfig = MAGNETISM,
    unit_size: float = SNAP_RULES.unit_size,
) -> list[SnapCandidate]:
    """All alignment candidates for *piece*, strongest first."""
    if not config.enabled:
        return []

    verts = world_vertices(piece, unit_size)
    edges = edges_of(verts)
    bounds = polygon_bounds(verts)

    candidates: list[SnapCandidate] = []
    for other in others:
        if other.id == piece.id:
            continue
        other_verts = world_vertices(other, unit_size)
        if bounds_gap(bounds, polygon_bounds(other_verts)) > config.snap_distance:
            continue

        if config.corner_alignment:
            candidates.extend(
                _corner_candidates(piece, other, verts, other_verts, config))
        if config.edge_alignment:
            candidates.extend(_edge_candidates(
                piece, other, edges, edges_of(other_verts), config, unit_size))

    candidates.sort(key=lambda c: c.strength, reverse=True)
    return candidates


# ── Collision veto ─────────────────────────────────────────────────


def would_collide(
    piece: Piece,
    proposed: Transform,
    others: Sequence[Piece],
    unit_size: float = SNAP_RULES.unit_size,
) -> bool:
    """True if *piece* at *proposed* overlaps another piece's bounding box."""
    proposed_bounds = polygon_bounds(transform_vertices(piece.kind, proposed, unit_size))
    for other in others:
        if other.id == piece.id:
            continue
        if bounds_overlap(proposed_bounds, polygon_bounds(world_vertices(other, unit_size))):
            log.debug("Proposed pose of %s overlaps %s", piece.id, other.id)
            return True
    return False


# ── Main entry point ───────────────────────────────────────────────


def apply_magnetism(
    piece: Piece,
    others: Sequence[Piece],
    config: MagnetismConfig = MAGNETISM,
    unit_size: float = SNAP_RULES.unit_size,
) -> MagnetismResult:
    """Move *piece* onto its strongest alignment if one qualifies.

    The piece is mutated only when a candidate is committed; otherwise it
    stays at its raw drag pose.
    """
    if not config.enabled:
        return MagnetismResult()

    candidates = find_candidates(piece, others, config, unit_size)
    result = MagnetismResult(candidates=candidates)
    if not candidates:
        return result

    best = candidates[0]
    if best.strength > config.commit_strength:
        proposed = best.as_transform(piece.transform)
        if config.prevent_overlap and would_collide(piece, proposed, others, unit_size):
            result.vetoed = True
            log.debug("Vetoed %s magnetism for %s (strength %.2f)",
                      best.kind.value, piece.id, best.strength)
            return result

        piece.transform = proposed
        result.applied = best
        if config.show_indicators:
            result.indicators.append(SnapIndicator(best.anchor[0], best.anchor[1], best.kind))
        log.info("Applied %s magnetism to %s against %s (strength %.2f)",
                 best.kind.value, piece.id, best.partner_id, best.strength)
        return result

    if config.show_indicators:
        result.indicators.extend(
            SnapIndicator(c.anchor[0], c.anchor[1], c.kind, potential=True)
            for c in candidates[:config.max_hints]
        )
    return result
