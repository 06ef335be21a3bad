"""Tests for authoring-mode magnetism.

Two 50×50 squares side by side:
  - Q anchored at (200, 200), bounding box [200, 250] × [200, 250]
  - P dragged near Q's right-hand side

Validates:
  - Strong corner / edge candidates pull P flush against Q
  - Edge pairs near anti-parallel rotate P into alignment first
  - A strong candidate whose pose overlaps Q is vetoed
  - Weak candidates only surface potential indicators
  - Disabled magnetism and per-feature toggles
"""

from __future__ import annotations

import unittest
from dataclasses import replace

from tangram.board import (
    CandidateKind, Transform, apply_magnetism, find_candidates, would_collide,
)
from tangram.board.magnetism import _alignment_delta
from tangram.config import MAGNETISM
from tangram.geometry import angular_distance
from tangram.shapes import PieceKind

from tests.tangram_fixture import make_piece


def _pair(px: float, py: float, rotation: float = 0.0):
    q = make_piece("Q", PieceKind.SQUARE, 200, 200)
    p = make_piece("P", PieceKind.SQUARE, px, py, rotation)
    return p, q


class TestAlignmentDelta(unittest.TestCase):

    def test_parallel_within_threshold(self):
        self.assertEqual(_alignment_delta(0, 10, 15), 10)

    def test_anti_parallel_within_threshold(self):
        self.assertEqual(_alignment_delta(0, 170, 15), -10)
        self.assertEqual(_alignment_delta(0, -170, 15), 10)
        self.assertEqual(_alignment_delta(0, 180, 15), 0)

    def test_outside_threshold(self):
        self.assertIsNone(_alignment_delta(0, 45, 15))


class TestCandidates(unittest.TestCase):

    def test_corner_strength(self):
        p, q = _pair(252, 203)
        corners = [c for c in find_candidates(p, [p, q]) if c.kind is CandidateKind.CORNER]
        self.assertTrue(corners)
        best = corners[0]
        self.assertAlmostEqual(best.strength, 1 - (2 ** 2 + 3 ** 2) ** 0.5 / 25)
        self.assertEqual(best.partner_id, "Q")

    def test_sorted_strongest_first(self):
        p, q = _pair(262, 203)
        strengths = [c.strength for c in find_candidates(p, [q])]
        self.assertEqual(strengths, sorted(strengths, reverse=True))

    def test_far_pieces_produce_nothing(self):
        p, q = _pair(600, 600)
        self.assertEqual(find_candidates(p, [q]), [])

    def test_corner_toggle(self):
        p, q = _pair(252, 203)
        config = replace(MAGNETISM, corner_alignment=False)
        kinds = {c.kind for c in find_candidates(p, [q], config)}
        self.assertEqual(kinds, {CandidateKind.EDGE})

    def test_edge_toggle(self):
        p, q = _pair(252, 203)
        config = replace(MAGNETISM, edge_alignment=False)
        kinds = {c.kind for c in find_candidates(p, [q], config)}
        self.assertEqual(kinds, {CandidateKind.CORNER})

    def test_angle_toggle_keeps_rotation(self):
        p, q = _pair(255, 200, 10)
        config = replace(MAGNETISM, angle_alignment=False)
        candidates = find_candidates(p, [q], config)
        self.assertTrue(candidates)
        self.assertTrue(all(c.rotation_deg is None for c in candidates))


class TestApplyMagnetism(unittest.TestCase):

    def test_strong_candidate_moves_piece_flush(self):
        p, q = _pair(252, 203)

        result = apply_magnetism(p, [p, q])

        self.assertTrue(result.moved)
        self.assertFalse(result.vetoed)
        self.assertAlmostEqual(p.transform.x, 250)
        self.assertAlmostEqual(p.transform.y, 200)
        self.assertEqual(len(result.indicators), 1)
        self.assertFalse(result.indicators[0].potential)

    def test_edge_rotation_alignment(self):
        p, q = _pair(255, 200, 10)

        result = apply_magnetism(p, [p, q])

        self.assertTrue(result.moved)
        self.assertIs(result.applied.kind, CandidateKind.EDGE)
        self.assertLess(angular_distance(p.transform.rotation_deg, 0), 1e-6)
        self.assertAlmostEqual(p.transform.x, 250, places=6)
        self.assertAlmostEqual(p.transform.y, 200, places=6)

    def test_overlap_veto(self):
        p, q = _pair(203, 202)

        result = apply_magnetism(p, [p, q])

        self.assertTrue(result.vetoed)
        self.assertFalse(result.moved)
        self.assertEqual(p.transform.position, (203, 202))

    def test_overlap_allowed_when_prevention_off(self):
        p, q = _pair(203, 202)
        config = replace(MAGNETISM, prevent_overlap=False)

        result = apply_magnetism(p, [p, q], config)

        self.assertTrue(result.moved)
        self.assertAlmostEqual(p.transform.x, 200)
        self.assertAlmostEqual(p.transform.y, 200)

    def test_weak_candidates_only_hint(self):
        p, q = _pair(262, 203)

        result = apply_magnetism(p, [p, q])

        self.assertFalse(result.moved)
        self.assertEqual(p.transform.position, (262, 203))
        self.assertEqual(len(result.candidates), 3)
        self.assertEqual(len(result.indicators),
                         min(MAGNETISM.max_hints, len(result.candidates)))
        self.assertTrue(all(i.potential for i in result.indicators))
        self.assertEqual(
            [(i.x, i.y) for i in result.indicators],
            [c.anchor for c in result.candidates[:MAGNETISM.max_hints]],
        )

    def test_hints_capped_at_max_hints(self):
        p, q = _pair(262, 203)
        config = replace(MAGNETISM, max_hints=2)

        result = apply_magnetism(p, [p, q], config)

        self.assertEqual(len(result.indicators), 2)
        self.assertEqual(
            [(i.x, i.y) for i in result.indicators],
            [c.anchor for c in result.candidates[:2]],
        )

    def test_indicators_can_be_hidden(self):
        p, q = _pair(252, 203)
        config = replace(MAGNETISM, show_indicators=False)

        result = apply_magnetism(p, [p, q], config)

        self.assertTrue(result.moved)
        self.assertEqual(result.indicators, [])

    def test_disabled(self):
        p, q = _pair(252, 203)
        config = replace(MAGNETISM, enabled=False)

        result = apply_magnetism(p, [p, q], config)

        self.assertFalse(result.moved)
        self.assertEqual(result.candidates, [])
        self.assertEqual(p.transform.position, (252, 203))


class TestWouldCollide(unittest.TestCase):

    def test_touching_is_not_a_collision(self):
        p, q = _pair(0, 0)
        self.assertFalse(would_collide(p, Transform(250, 200), [q]))

    def test_overlap_is_a_collision(self):
        p, q = _pair(0, 0)
        self.assertTrue(would_collide(p, Transform(240, 210), [q]))

    def test_self_is_ignored(self):
        p, _ = _pair(0, 0)
        self.assertFalse(would_collide(p, Transform(0, 0), [p]))


if __name__ == "__main__":
    unittest.main()
