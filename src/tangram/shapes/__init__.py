"""Shape catalog — the seven piece kinds and their canonical polygons."""

from .models import PieceKind, Point, Polygon
from .catalog import CANONICAL_POLYGONS, polygon, scale, centroid, kind_area

__all__ = [
    # Models
    "PieceKind", "Point", "Polygon",
    # Catalog
    "CANONICAL_POLYGONS", "polygon", "scale", "centroid", "kind_area",
]
