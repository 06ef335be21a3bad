"""Level parsing — convert raw dicts/JSON into Level."""

from __future__ import annotations

import uuid

from tangram.shapes import PieceKind

from .models import Difficulty, Level, LevelError, PieceSpec, TargetSpec


def parse_level(data: dict) -> Level:
    """Parse a raw dict (from JSON) into a Level.

    Raises
    ------
    LevelError
        If a required field is missing or a kind/difficulty is unknown.
    """
    level_id = str(data.get("id") or uuid.uuid4())
    if "name" not in data:
        raise LevelError(level_id, "name", "Missing level name")

    raw_difficulty = data.get("difficulty", Difficulty.EASY.value)
    try:
        difficulty = Difficulty(str(raw_difficulty).lower())
    except ValueError:
        raise LevelError(level_id, "difficulty",
                         f"Unknown difficulty '{raw_difficulty}'") from None

    targets = tuple(
        _parse_target(level_id, i, t)
        for i, t in enumerate(data.get("targets", []))
    )
    pieces = tuple(
        _parse_piece(level_id, i, p)
        for i, p in enumerate(data.get("pieces", []))
    )

    return Level(
        id=level_id,
        name=data["name"],
        difficulty=difficulty,
        targets=targets,
        pieces=pieces,
    )


def _parse_kind(level_id: str, where: str, raw: object) -> PieceKind:
    try:
        return PieceKind(raw)
    except ValueError:
        raise LevelError(level_id, f"{where}.kind",
                         f"Unknown piece kind '{raw}'") from None


def _require(level_id: str, where: str, data: dict, key: str) -> object:
    if key not in data:
        raise LevelError(level_id, f"{where}.{key}", "Missing field")
    return data[key]


def _parse_target(level_id: str, index: int, data: dict) -> TargetSpec:
    where = f"targets[{index}]"
    kind = _parse_kind(level_id, where, _require(level_id, where, data, "kind"))
    return TargetSpec(
        id=str(data.get("id") or f"target-{index}-{kind.value}"),
        kind=kind,
        x_pct=float(_require(level_id, where, data, "x_pct")),
        y_pct=float(_require(level_id, where, data, "y_pct")),
        rotation_deg=float(data.get("rotation_deg", 0.0)),
        mirrored=bool(data.get("mirrored", False)),
    )


def _parse_piece(level_id: str, index: int, data: dict) -> PieceSpec:
    where = f"pieces[{index}]"
    kind = _parse_kind(level_id, where, _require(level_id, where, data, "kind"))
    return PieceSpec(
        id=str(data.get("id") or f"piece-{index}-{kind.value}"),
        kind=kind,
        x_pct=float(_require(level_id, where, data, "x_pct")),
        y_pct=float(_require(level_id, where, data, "y_pct")),
        rotation_deg=float(data.get("rotation_deg", 0.0)),
        color=str(data.get("color", "red")),
    )
