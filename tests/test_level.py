"""Tests for level records: parsing, validation, serialization, the
built-in library and authoring helpers.

Validates:
  - Raw dicts parse into Level with ids and defaults filled in
  - Missing / unknown fields raise LevelError naming the field
  - validate_level reports every problem it finds
  - Every bundled level loads and validates cleanly
  - LevelLibrary merges built-in and user levels
"""

from __future__ import annotations

import json
import random
import unittest

from tangram.geometry import CoordinateMapper
from tangram.level import (
    CapturedPose, Difficulty, Level, LevelError, LevelLibrary, TargetSpec,
    default_start_pieces, get_level, level_from_poses, level_to_dict,
    load_builtin_levels, parse_level, random_level_name, structural_problems,
    validate_level,
)
from tangram.shapes import PieceKind

from tests.tangram_fixture import make_single_square_level, make_two_piece_level


def _raw_level() -> dict:
    return {
        "id": "kite",
        "name": "Kite",
        "difficulty": "Medium",
        "targets": [
            {"kind": "square", "x_pct": 50, "y_pct": 40, "rotation_deg": 45},
            {"id": "t-par", "kind": "parallelogram", "x_pct": 50, "y_pct": 60,
             "mirrored": True},
        ],
        "pieces": [
            {"kind": "square", "x_pct": 10, "y_pct": 90, "color": "purple"},
            {"id": "p-par", "kind": "parallelogram", "x_pct": 90, "y_pct": 90},
        ],
    }


class TestParseLevel(unittest.TestCase):

    def test_parse(self):
        level = parse_level(_raw_level())

        self.assertEqual(level.id, "kite")
        self.assertIs(level.difficulty, Difficulty.MEDIUM)
        self.assertEqual(len(level.targets), 2)
        square = level.targets[0]
        self.assertEqual(square.id, "target-0-square")
        self.assertIs(square.kind, PieceKind.SQUARE)
        self.assertEqual(square.rotation_deg, 45)
        self.assertFalse(square.mirrored)
        self.assertTrue(level.targets[1].mirrored)
        self.assertEqual(level.pieces[0].id, "piece-0-square")
        self.assertEqual(level.pieces[0].color, "purple")
        self.assertEqual(level.pieces[1].color, "red")
        self.assertEqual(level.pieces[1].rotation_deg, 0)

    def test_missing_id_gets_generated(self):
        raw = _raw_level()
        del raw["id"]
        self.assertTrue(parse_level(raw).id)

    def test_defaults(self):
        level = parse_level({"name": "Blank"})
        self.assertIs(level.difficulty, Difficulty.EASY)
        self.assertEqual(level.targets, ())
        self.assertTrue(level.is_authoring)

    def test_missing_name(self):
        raw = _raw_level()
        del raw["name"]
        with self.assertRaises(LevelError) as ctx:
            parse_level(raw)
        self.assertEqual(ctx.exception.field_name, "name")

    def test_unknown_kind(self):
        raw = _raw_level()
        raw["pieces"][1]["kind"] = "hexagon"
        with self.assertRaises(LevelError) as ctx:
            parse_level(raw)
        self.assertEqual(ctx.exception.level_id, "kite")
        self.assertEqual(ctx.exception.field_name, "pieces[1].kind")
        self.assertIn("hexagon", str(ctx.exception))

    def test_unknown_difficulty(self):
        raw = _raw_level()
        raw["difficulty"] = "nightmare"
        with self.assertRaises(LevelError) as ctx:
            parse_level(raw)
        self.assertEqual(ctx.exception.field_name, "difficulty")

    def test_missing_coordinate(self):
        raw = _raw_level()
        del raw["targets"][0]["y_pct"]
        with self.assertRaises(LevelError) as ctx:
            parse_level(raw)
        self.assertEqual(ctx.exception.field_name, "targets[0].y_pct")


class TestSerialization(unittest.TestCase):

    def test_dict_survives_json(self):
        level = parse_level(_raw_level())
        data = json.loads(json.dumps(level_to_dict(level)))
        self.assertEqual(parse_level(data), level)

    def test_mirrored_only_written_when_set(self):
        data = level_to_dict(parse_level(_raw_level()))
        self.assertNotIn("mirrored", data["targets"][0])
        self.assertTrue(data["targets"][1]["mirrored"])
        self.assertEqual(data["difficulty"], "medium")


class TestValidateLevel(unittest.TestCase):

    def test_fixture_levels_are_valid(self):
        self.assertEqual(validate_level(make_single_square_level()), [])
        self.assertEqual(validate_level(make_two_piece_level()), [])

    def test_duplicate_ids(self):
        level = make_two_piece_level()
        first = level.targets[0]
        level = Level(id="x", name="x", targets=(first, first), pieces=level.pieces)
        errors = validate_level(level)
        self.assertIn("Duplicate target id 't-square'", errors)
        self.assertIn("Kind 'square' has more than one target", errors)
        self.assertEqual(structural_problems(level), ["Duplicate target id 't-square'"])

    def test_structural_problems_cover_unknown_kinds_only(self):
        base = make_single_square_level()
        level = Level(id="x", name="x", pieces=base.pieces, targets=(
            TargetSpec(id="t-hex", kind="hexagon", x_pct=50, y_pct=150),
        ))
        self.assertEqual(structural_problems(level),
                         ["Target 't-hex': unknown kind 'hexagon'"])
        errors = validate_level(level)
        self.assertEqual(errors[0], "Target 't-hex': unknown kind 'hexagon'")
        self.assertTrue(any("y_pct=150" in e for e in errors))
        self.assertEqual(structural_problems(base), [])

    def test_out_of_range_percentage(self):
        level = Level(id="x", name="x", targets=(
            TargetSpec(id="t", kind=PieceKind.SQUARE, x_pct=120, y_pct=50),
        ))
        errors = validate_level(level)
        self.assertTrue(any("x_pct=120" in e for e in errors))
        self.assertTrue(any("no piece of kind 'square'" in e for e in errors))

    def test_mirror_on_symmetric_kind(self):
        base = make_single_square_level()
        flipped = TargetSpec(id="t-square", kind=PieceKind.SQUARE,
                             x_pct=50, y_pct=50, mirrored=True)
        level = Level(id="x", name="x", targets=(flipped,), pieces=base.pieces)
        self.assertEqual(validate_level(level),
                         ["Target 't-square': only the parallelogram can be mirrored"])


class TestBuiltinLevels(unittest.TestCase):

    def test_library_order(self):
        names = [level.name for level in load_builtin_levels()]
        self.assertEqual(names, ["Designer", "Bird", "Rocket", "House", "Cat", "Simple Shape"])

    def test_all_builtin_levels_validate(self):
        for level in load_builtin_levels():
            with self.subTest(level=level.name):
                self.assertEqual(validate_level(level), [])
                self.assertEqual(len(level.pieces), 7)

    def test_puzzles_use_all_seven_kinds(self):
        for level in load_builtin_levels():
            if level.is_authoring:
                continue
            with self.subTest(level=level.name):
                self.assertEqual({t.kind for t in level.targets}, set(PieceKind))

    def test_designer_has_no_targets(self):
        self.assertTrue(get_level("designer").is_authoring)

    def test_get_level(self):
        self.assertEqual(get_level("simple-shape").name, "Simple Shape")
        self.assertEqual(get_level("CAT").name, "Cat")
        self.assertIsNone(get_level("Dragon"))


class TestLevelLibrary(unittest.TestCase):

    def test_user_levels_follow_builtins(self):
        user = make_single_square_level()
        library = LevelLibrary([user])
        self.assertEqual(library.all_levels()[-1], user)
        self.assertEqual(len(library.all_levels()), len(load_builtin_levels()) + 1)
        self.assertTrue(library.is_user_level(user.id))
        self.assertFalse(library.is_user_level("designer"))

    def test_add_find_remove(self):
        library = LevelLibrary()
        level = make_two_piece_level()
        library.add(level)
        self.assertIs(library.find("two piece"), level)
        self.assertTrue(library.remove(level.id))
        self.assertIsNone(library.find("two piece"))
        self.assertEqual(library.user_levels, [])

    def test_builtin_levels_cannot_be_removed(self):
        library = LevelLibrary()
        with self.assertLogs("tangram.level.loader", level="WARNING"):
            self.assertFalse(library.remove("designer"))
        self.assertIsNotNone(library.find("Designer"))


class TestAuthoringHelpers(unittest.TestCase):

    def test_random_level_name(self):
        name = random_level_name(random.Random(7))
        self.assertEqual(len(name), 5)
        self.assertTrue(name.isalpha() and name.isupper())
        self.assertEqual(name, random_level_name(random.Random(7)))

    def test_default_start_pieces(self):
        pieces = default_start_pieces()
        self.assertEqual([p.kind for p in pieces], list(PieceKind))
        self.assertEqual(pieces[0].x_pct, 15)
        self.assertEqual(pieces[0].color, "red")

    def test_level_from_poses(self):
        mapper = CoordinateMapper(768, 1024)
        poses = [
            CapturedPose(PieceKind.SQUARE, 384, 256, -45),
            CapturedPose(PieceKind.SMALL_TRIANGLE_1, 192, 512, 90, mirrored=True),
            CapturedPose(PieceKind.PARALLELOGRAM, 576, 768, 0, mirrored=True),
        ]

        level = level_from_poses(poses, mapper, name="KITES", difficulty=Difficulty.MEDIUM)

        self.assertEqual(level.name, "KITES")
        self.assertIs(level.difficulty, Difficulty.MEDIUM)
        square, small, par = level.targets
        self.assertEqual((square.x_pct, square.y_pct), (50, 25))
        self.assertEqual(square.rotation_deg, 315)
        self.assertEqual(square.id, "t-square")
        self.assertFalse(small.mirrored)
        self.assertTrue(par.mirrored)
        self.assertEqual(level.pieces, default_start_pieces())


if __name__ == "__main__":
    unittest.main()
