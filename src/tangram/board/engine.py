"""Board — the host-facing façade over pieces, targets and the matchers.

The host serialises input events and calls one method per event; every
call runs to completion and commits logical state (bindings, poses)
before returning.  Outbound notifications are queued as events and
collected with :meth:`Board.drain_events`.

Two modes:

  play       drag end snaps against the level's targets; completion is
             reported once every target is occupied.
  authoring  drag moves, drag end and rotations run magnetism against
             the other pieces; targets are ignored and every committed
             pose is reported with ``PieceMoved``.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Union

from tangram.config import (
    BOARD_SETTINGS, MAGNETISM, SNAP_RULES,
    BoardSettings, MagnetismConfig, SnapRules,
)
from tangram.geometry import CoordinateMapper, normalize_rotation
from tangram.level import (
    CapturedPose, Difficulty, Level, level_from_poses,
    structural_problems, validate_level,
)
from tangram.shapes import Point

from .events import (
    BoardEvent, Completed, EventQueue, IndicatorShown, PieceMoved,
    Snapped, Unsnapped,
)
from .magnetism import MagnetismResult, apply_magnetism
from .models import BoardError, Piece, Target, Transform, UnknownPieceError
from .snapping import SnapResult, snap_piece, unsnap_piece
from .tray import layout_tray
from .win import is_complete, progress


log = logging.getLogger(__name__)


class BoardMode(str, Enum):
    PLAY = "play"
    AUTHORING = "authoring"


DragOutcome = Union[SnapResult, MagnetismResult, None]


class Board:
    """Holds one loaded level and applies host inputs to it."""

    def __init__(
        self,
        settings: BoardSettings = BOARD_SETTINGS,
        rules: SnapRules = SNAP_RULES,
        magnetism: MagnetismConfig = MAGNETISM,
        mode: BoardMode = BoardMode.PLAY,
    ) -> None:
        self.settings = settings
        self.rules = rules
        self.magnetism = magnetism
        self.mode = mode
        self.mapper = CoordinateMapper(settings.canvas_width, settings.canvas_height)

        self.level: Level | None = None
        self.pieces: list[Piece] = []
        self.targets: list[Target] = []
        self.dragging: str | None = None
        self._completed = False
        self._events = EventQueue()

    # ── Level lifecycle ────────────────────────────────────────────

    def load_level(self, level: Level) -> None:
        """Build pieces and targets from *level*, replacing any current state."""
        problems = structural_problems(level)
        if problems:
            self._fail(BoardError(level.id, "; ".join(problems)))
            return
        for problem in validate_level(level):
            log.warning("Level %s: %s", level.name, problem)

        to_canvas = self.mapper.to_canvas
        self.targets = [
            Target(
                id=t.id,
                kind=t.kind,
                pose=Transform(*to_canvas(t.x_pct, t.y_pct),
                               rotation_deg=t.rotation_deg,
                               mirrored=t.mirrored and t.kind.is_chiral),
            )
            for t in level.targets
        ]
        self.pieces = [
            Piece(
                id=p.id,
                kind=p.kind,
                transform=Transform(*to_canvas(p.x_pct, p.y_pct),
                                    rotation_deg=p.rotation_deg),
                color=p.color,
            )
            for p in level.pieces
        ]
        if self.settings.tray_layout:
            layout_tray(self.pieces, self.settings.canvas_width, self.settings.canvas_height)

        self.level = level
        self.dragging = None
        self._completed = False
        self._events.clear()
        log.info("Loaded level %s (%s): %d targets, %d pieces, mode=%s",
                 level.name, level.difficulty.value,
                 len(self.targets), len(self.pieces), self.mode.value)

    def reset(self) -> None:
        """Restore the loaded level's starting state."""
        if self.level is None:
            return
        log.info("Resetting level %s", self.level.name)
        self.load_level(self.level)

    # ── Drag gestures ──────────────────────────────────────────────

    def begin_drag(self, piece_id: str) -> None:
        piece = self._piece(piece_id)
        if piece is None:
            return
        self._start_drag(piece)

    def move_drag(self, piece_id: str, position: Point) -> MagnetismResult | None:
        """Move a piece to its raw drag position (plus magnetism when authoring).

        A move without a preceding ``begin_drag`` starts the drag
        implicitly, so a snapped piece is released before it leaves its
        target.
        """
        piece = self._piece(piece_id)
        if piece is None:
            return None
        if self.dragging != piece.id:
            self._start_drag(piece)
        piece.transform.x, piece.transform.y = position
        if self.mode is BoardMode.AUTHORING:
            return self._settle(piece)
        return None

    def end_drag(self, piece_id: str) -> DragOutcome:
        """Finish a drag: snap in play mode, final magnetism pass when authoring."""
        piece = self._piece(piece_id)
        if piece is None:
            return None
        if self.dragging == piece.id:
            self.dragging = None

        if self.mode is BoardMode.AUTHORING:
            return self._settle(piece)

        result = snap_piece(piece, self.targets, self.rules)
        if result.snapped:
            self._events.emit(Snapped(piece.id, result.target_id))
        self._check_win()
        return result

    # ── Rotation / mirroring ───────────────────────────────────────

    def rotate(self, piece_id: str, delta_deg: float) -> MagnetismResult | None:
        piece = self._piece(piece_id)
        if piece is None:
            return None
        piece.transform.rotation_deg = normalize_rotation(
            piece.transform.rotation_deg + delta_deg)
        log.debug("Rotated %s by %.1f° to %.1f°",
                  piece.id, delta_deg, piece.transform.rotation_deg)
        if self.mode is BoardMode.AUTHORING:
            return self._settle(piece)
        return None

    def rotate_step(self, piece_id: str) -> MagnetismResult | None:
        """Rotate by the fixed button / double-tap increment."""
        return self.rotate(piece_id, self.rules.rotate_step_deg)

    def set_mirror(self, piece_id: str, mirrored: bool) -> None:
        if self.mode is not BoardMode.AUTHORING:
            self._fail(BoardError(piece_id, "mirroring is only available while authoring"))
            return
        piece = self._piece(piece_id)
        if piece is None:
            return
        if not piece.kind.is_chiral:
            log.debug("Mirror flag on %s has no geometric effect", piece.id)
        piece.transform.mirrored = mirrored
        self._report_move(piece)

    # ── Queries ────────────────────────────────────────────────────

    def is_complete(self) -> bool:
        return is_complete(self.targets)

    def progress(self) -> tuple[int, int]:
        return progress(self.targets)

    def piece(self, piece_id: str) -> Piece | None:
        return next((p for p in self.pieces if p.id == piece_id), None)

    def target(self, target_id: str) -> Target | None:
        return next((t for t in self.targets if t.id == target_id), None)

    def drain_events(self) -> list[BoardEvent]:
        return self._events.drain()

    def capture_level(
        self,
        name: str | None = None,
        difficulty: Difficulty = Difficulty.EASY,
    ) -> Level:
        """Snapshot current piece poses as the targets of a new Level."""
        poses = [
            CapturedPose(
                kind=p.kind,
                x=p.transform.x,
                y=p.transform.y,
                rotation_deg=p.transform.rotation_deg,
                mirrored=p.transform.mirrored,
            )
            for p in self.pieces
        ]
        return level_from_poses(poses, self.mapper, name=name, difficulty=difficulty)

    # ── Internals ──────────────────────────────────────────────────

    def _start_drag(self, piece: Piece) -> None:
        target_id = unsnap_piece(piece, self.targets)
        if target_id is not None:
            self._completed = False
            self._events.emit(Unsnapped(piece.id, target_id))
        self.dragging = piece.id

    def _settle(self, piece: Piece) -> MagnetismResult:
        result = apply_magnetism(piece, self.pieces, self.magnetism, self.rules.unit_size)
        for indicator in result.indicators:
            self._events.emit(IndicatorShown(piece.id, indicator))
        self._report_move(piece)
        return result

    def _report_move(self, piece: Piece) -> None:
        t = piece.transform
        self._events.emit(PieceMoved(piece.id, t.x, t.y, t.rotation_deg, t.mirrored))

    def _check_win(self) -> None:
        occupied, total = self.progress()
        log.debug("Win check: %d/%d targets occupied", occupied, total)
        if total and occupied == total and not self._completed:
            self._completed = True
            self._events.emit(Completed())
            log.info("Puzzle complete: all %d targets occupied", total)

    def _piece(self, piece_id: str) -> Piece | None:
        piece = self.piece(piece_id)
        if piece is None:
            self._fail(UnknownPieceError(piece_id))
        return piece

    def _fail(self, error: BoardError) -> None:
        if self.settings.strict:
            raise error
        log.warning("Ignoring invalid board call: %s", error)
