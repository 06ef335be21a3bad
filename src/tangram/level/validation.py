"""Level validation — sanity checks on a parsed Level."""

from __future__ import annotations

from tangram.shapes import PieceKind

from .models import Level


def structural_problems(level: Level) -> list[str]:
    """Problems that make a level unusable: unknown kinds, duplicate ids."""
    errors: list[str] = []

    # ── Kinds must come from the catalog ──
    for t in level.targets:
        if not isinstance(t.kind, PieceKind):
            errors.append(f"Target '{t.id}': unknown kind '{t.kind}'")
    for p in level.pieces:
        if not isinstance(p.kind, PieceKind):
            errors.append(f"Piece '{p.id}': unknown kind '{p.kind}'")

    # ── IDs must be unique within each collection ──
    for label, items in (("target", level.targets), ("piece", level.pieces)):
        seen: set[str] = set()
        for item in items:
            if item.id in seen:
                errors.append(f"Duplicate {label} id '{item.id}'")
            seen.add(item.id)

    return errors


def validate_level(level: Level) -> list[str]:
    """Validate a Level. Returns error messages (empty = valid)."""
    errors = structural_problems(level)

    # ── Percentages stay on the canvas ──
    for label, items in (("Target", level.targets), ("Piece", level.pieces)):
        for item in items:
            for axis, value in (("x_pct", item.x_pct), ("y_pct", item.y_pct)):
                if not 0.0 <= value <= 100.0:
                    errors.append(
                        f"{label} '{item.id}': {axis}={value} outside [0, 100]"
                    )

    # ── Each kind is a single physical piece ──
    target_kinds = [t.kind for t in level.targets]
    for kind in dict.fromkeys(target_kinds):
        if target_kinds.count(kind) > 1:
            errors.append(f"Kind '{getattr(kind, 'value', kind)}' has more than one target")
    piece_kinds = [p.kind for p in level.pieces]
    for kind in dict.fromkeys(piece_kinds):
        if piece_kinds.count(kind) > 1:
            errors.append(f"Kind '{getattr(kind, 'value', kind)}' has more than one piece")

    # ── Every target needs a piece that can fill it ──
    available = set(piece_kinds)
    for t in level.targets:
        if isinstance(t.kind, PieceKind) and t.kind not in available:
            errors.append(f"Target '{t.id}': no piece of kind '{t.kind.value}'")

    # ── Mirroring only means something for the parallelogram ──
    for t in level.targets:
        if t.mirrored and isinstance(t.kind, PieceKind) and not t.kind.is_chiral:
            errors.append(f"Target '{t.id}': only the parallelogram can be mirrored")

    return errors
