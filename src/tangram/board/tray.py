"""Tray layout — park every piece in a tidy grid along the bottom edge."""

from __future__ import annotations

import logging
from typing import Sequence

from .models import Piece


log = logging.getLogger(__name__)

TRAY_COLUMNS = 4
TRAY_HEIGHT_FRACTION = 0.25
TRAY_BOTTOM_PADDING = 10.0


def layout_tray(
    pieces: Sequence[Piece],
    canvas_width: float,
    canvas_height: float,
    columns: int = TRAY_COLUMNS,
) -> None:
    """Place pieces row by row, bottom-up, and reset their rotation.

    Canvas y grows downward, so the first row sits just above the
    bottom padding.
    """
    tray_height = canvas_height * TRAY_HEIGHT_FRACTION
    cell_w = canvas_width / columns
    cell_h = tray_height / 2
    bottom = canvas_height - TRAY_BOTTOM_PADDING

    for index, piece in enumerate(pieces):
        row, column = divmod(index, columns)
        piece.transform.x = cell_w * column + cell_w / 2
        piece.transform.y = bottom - row * cell_h - cell_h / 2
        piece.transform.rotation_deg = 0.0
        log.debug("Tray: %s at (%.0f, %.0f)",
                  piece.id, piece.transform.x, piece.transform.y)
