"""Board — runtime pieces and targets plus the matchers that move them.

Submodules:
  models      Transform / Piece / Target / Edge dataclasses and BoardError.
  placement   Canonical polygon -> canvas vertices and edges.
  snapping    Gameplay snap matching against targets.
  magnetism   Authoring-mode corner / edge / angle alignment with overlap veto.
  win         Completion predicate and progress.
  tray        Bottom-tray piece layout.
  events      Outbound event dataclasses and queue.
  engine      Board façade driven by host input events.
"""

from .models import Transform, Piece, Target, Edge, BoardError, UnknownPieceError
from .placement import transform_vertices, world_vertices, edges_of, piece_edges, piece_bounds
from .snapping import SnapResult, snap_rejection, find_snap_target, snap_piece, unsnap_piece
from .magnetism import (
    CandidateKind, SnapCandidate, SnapIndicator, MagnetismResult,
    find_candidates, would_collide, apply_magnetism,
)
from .win import is_complete, progress
from .tray import layout_tray
from .events import (
    Snapped, Unsnapped, Completed, PieceMoved, IndicatorShown, BoardEvent, EventQueue,
)
from .engine import Board, BoardMode

__all__ = [
    # Models
    "Transform", "Piece", "Target", "Edge", "BoardError", "UnknownPieceError",
    # Placement
    "transform_vertices", "world_vertices", "edges_of", "piece_edges", "piece_bounds",
    # Snapping
    "SnapResult", "snap_rejection", "find_snap_target", "snap_piece", "unsnap_piece",
    # Magnetism
    "CandidateKind", "SnapCandidate", "SnapIndicator", "MagnetismResult",
    "find_candidates", "would_collide", "apply_magnetism",
    # Win / tray / events
    "is_complete", "progress", "layout_tray",
    "Snapped", "Unsnapped", "Completed", "PieceMoved", "IndicatorShown",
    "BoardEvent", "EventQueue",
    # Engine
    "Board", "BoardMode",
]
