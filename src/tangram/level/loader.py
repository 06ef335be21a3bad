"""Level loader — reads the built-in data/*.json levels and keeps the
in-memory library that merges them with host-supplied user levels.

Persisting user levels is the host's job; the library only holds them.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path

from .models import Level
from .parsing import parse_level
from .validation import validate_level


LEVELS_DIR = Path(__file__).resolve().parent / "data"

log = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def load_builtin_levels() -> tuple[Level, ...]:
    """Load every bundled level, ordered by its ``order`` field."""
    raw: list[tuple[int, str, dict]] = []
    for path in sorted(LEVELS_DIR.glob("*.json")):
        data = json.loads(path.read_text(encoding="utf-8"))
        raw.append((int(data.get("order", 0)), path.stem, data))
    raw.sort(key=lambda item: (item[0], item[1]))

    levels = []
    for _, stem, data in raw:
        level = parse_level(data)
        for problem in validate_level(level):
            log.warning("Built-in level %s: %s", stem, problem)
        levels.append(level)
    log.info("Loaded %d built-in levels", len(levels))
    return tuple(levels)


def get_level(name_or_id: str) -> Level | None:
    """Look up a built-in level by id or (case-insensitive) name."""
    key = name_or_id.lower()
    for level in load_builtin_levels():
        if level.id == name_or_id or level.name.lower() == key:
            return level
    return None


class LevelLibrary:
    """Built-in levels followed by user-created ones."""

    def __init__(self, user_levels: list[Level] | None = None) -> None:
        self._builtin = list(load_builtin_levels())
        self._user: list[Level] = list(user_levels or [])

    @property
    def user_levels(self) -> list[Level]:
        return list(self._user)

    def all_levels(self) -> list[Level]:
        return self._builtin + self._user

    def add(self, level: Level) -> None:
        self._user.append(level)
        log.info("Added user level %s (%s)", level.name, level.id)

    def remove(self, level_id: str) -> bool:
        """Delete a user level by id. Returns True if it existed."""
        for i, level in enumerate(self._user):
            if level.id == level_id:
                del self._user[i]
                log.info("Deleted user level %s", level.name)
                return True
        log.warning("No user level with id %s", level_id)
        return False

    def is_user_level(self, level_id: str) -> bool:
        return any(level.id == level_id for level in self._user)

    def find(self, name_or_id: str) -> Level | None:
        key = name_or_id.lower()
        for level in self.all_levels():
            if level.id == name_or_id or level.name.lower() == key:
                return level
        return None
