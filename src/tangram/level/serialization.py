"""Level serialization — JSON-safe dict conversion."""

from __future__ import annotations

from .models import Level


def level_to_dict(level: Level) -> dict:
    """Serialize a Level to a JSON-safe dict (inverse of ``parse_level``)."""
    return {
        "id": level.id,
        "name": level.name,
        "difficulty": level.difficulty.value,
        "targets": [
            {
                "id": t.id,
                "kind": t.kind.value,
                "x_pct": t.x_pct,
                "y_pct": t.y_pct,
                "rotation_deg": t.rotation_deg,
                **({"mirrored": True} if t.mirrored else {}),
            }
            for t in level.targets
        ],
        "pieces": [
            {
                "id": p.id,
                "kind": p.kind.value,
                "x_pct": p.x_pct,
                "y_pct": p.y_pct,
                "rotation_deg": p.rotation_deg,
                "color": p.color,
            }
            for p in level.pieces
        ],
    }
