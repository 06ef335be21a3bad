"""Level record dataclasses — the plain data a host stores and loads."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from tangram.shapes import PieceKind


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


@dataclass(frozen=True)
class TargetSpec:
    """A solution slot, positioned in percentages of the canvas."""
    id: str
    kind: PieceKind
    x_pct: float
    y_pct: float
    rotation_deg: float = 0.0
    mirrored: bool = False          # parallelogram only


@dataclass(frozen=True)
class PieceSpec:
    """A piece's starting pose.  ``color`` is a presentation hint only."""
    id: str
    kind: PieceKind
    x_pct: float
    y_pct: float
    rotation_deg: float = 0.0
    color: str = "red"


@dataclass(frozen=True)
class Level:
    id: str
    name: str
    difficulty: Difficulty = Difficulty.EASY
    targets: tuple[TargetSpec, ...] = field(default_factory=tuple)
    pieces: tuple[PieceSpec, ...] = field(default_factory=tuple)

    @property
    def is_authoring(self) -> bool:
        """A level without targets is a free-form canvas for the designer."""
        return not self.targets


class LevelError(Exception):
    """Raised when a level record cannot be turned into a Level."""

    def __init__(self, level_id: str, field_name: str, reason: str) -> None:
        self.level_id = level_id
        self.field_name = field_name
        self.reason = reason
        super().__init__(f"Level '{level_id}' {field_name}: {reason}")
