from .polygon import polygon_area, polygon_bounds, bounds_overlap, bounds_gap
from .transform import (
    normalize_rotation,
    angular_distance,
    signed_angle_difference,
    rotate_point,
    distance,
)
from .mapping import CoordinateMapper, to_canvas, to_percent
