"""Completion check over target occupancy."""

from __future__ import annotations

from typing import Sequence

from .models import Target


def is_complete(targets: Sequence[Target]) -> bool:
    """True iff every target is occupied (vacuously true for no targets)."""
    return all(t.occupied for t in targets)


def progress(targets: Sequence[Target]) -> tuple[int, int]:
    """Return (occupied, total)."""
    return sum(1 for t in targets if t.occupied), len(targets)
