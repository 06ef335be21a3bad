"""Outbound board events.

The board never calls into the host; it appends events to a queue the
host drains after each input, then renders or persists as it sees fit.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Union

from .magnetism import SnapIndicator


@dataclass(frozen=True)
class Snapped:
    piece_id: str
    target_id: str


@dataclass(frozen=True)
class Unsnapped:
    piece_id: str
    target_id: str


@dataclass(frozen=True)
class Completed:
    pass


@dataclass(frozen=True)
class PieceMoved:
    """Authoring mode: a piece's committed pose after any move or rotation."""
    piece_id: str
    x: float
    y: float
    rotation_deg: float
    mirrored: bool = False


@dataclass(frozen=True)
class IndicatorShown:
    piece_id: str
    indicator: SnapIndicator


BoardEvent = Union[Snapped, Unsnapped, Completed, PieceMoved, IndicatorShown]


class EventQueue:
    def __init__(self) -> None:
        self._events: deque[BoardEvent] = deque()

    def emit(self, event: BoardEvent) -> None:
        self._events.append(event)

    def drain(self) -> list[BoardEvent]:
        out = list(self._events)
        self._events.clear()
        return out

    def clear(self) -> None:
        self._events.clear()

    def __len__(self) -> int:
        return len(self._events)
