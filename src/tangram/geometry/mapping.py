"""Percentage <-> canvas coordinate mapping.

Levels are authored in percentages (0-100 on each axis) so that one
definition lays out proportionally on any canvas.  The canvas size is
always passed in; nothing here asks a display for its dimensions.
"""

from __future__ import annotations

from dataclasses import dataclass


def to_canvas(
    x_pct: float, y_pct: float,
    canvas_width: float, canvas_height: float,
) -> tuple[float, float]:
    """Convert a percentage position into canvas units."""
    return (x_pct / 100.0 * canvas_width, y_pct / 100.0 * canvas_height)


def to_percent(
    point: tuple[float, float],
    canvas_width: float, canvas_height: float,
) -> tuple[float, float]:
    """Inverse of :func:`to_canvas`."""
    return (point[0] / canvas_width * 100.0, point[1] / canvas_height * 100.0)


@dataclass(frozen=True)
class CoordinateMapper:
    """Bound mapper for a fixed canvas size."""

    canvas_width: float
    canvas_height: float

    def __post_init__(self) -> None:
        if self.canvas_width <= 0 or self.canvas_height <= 0:
            raise ValueError(
                f"Canvas size must be positive, got "
                f"{self.canvas_width}x{self.canvas_height}"
            )

    def to_canvas(self, x_pct: float, y_pct: float) -> tuple[float, float]:
        return to_canvas(x_pct, y_pct, self.canvas_width, self.canvas_height)

    def to_percent(self, point: tuple[float, float]) -> tuple[float, float]:
        return to_percent(point, self.canvas_width, self.canvas_height)

    @property
    def center(self) -> tuple[float, float]:
        return (self.canvas_width / 2, self.canvas_height / 2)

    @property
    def aspect_ratio(self) -> float:
        return self.canvas_width / self.canvas_height

    @property
    def is_portrait(self) -> bool:
        return self.canvas_height > self.canvas_width
