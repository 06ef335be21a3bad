"""Level records — dataclasses, parsing, validation, serialization,
built-in level loading and authoring capture."""

from .models import Difficulty, TargetSpec, PieceSpec, Level, LevelError
from .parsing import parse_level
from .validation import structural_problems, validate_level
from .serialization import level_to_dict
from .loader import load_builtin_levels, get_level, LevelLibrary, LEVELS_DIR
from .authoring import (
    CapturedPose, level_from_poses, random_level_name, default_start_pieces,
)

__all__ = [
    # Models
    "Difficulty", "TargetSpec", "PieceSpec", "Level", "LevelError",
    # Parsing / Validation / Serialization
    "parse_level", "structural_problems", "validate_level", "level_to_dict",
    # Loader
    "load_builtin_levels", "get_level", "LevelLibrary", "LEVELS_DIR",
    # Authoring
    "CapturedPose", "level_from_poses", "random_level_name", "default_start_pieces",
]
