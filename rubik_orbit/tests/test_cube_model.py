import itertools
import unittest
from collections import Counter

from rubik_orbit.core import Axis, CubeModel, Face
from rubik_orbit.core.cube_model import Turn
from rubik_orbit.logic.scramble import apply_scramble, generate_scramble

ALL_POSITIONS = set(itertools.product((-1, 0, 1), repeat=3))


def _finish(cube):
    ticks = 0
    while cube.is_turning():
        cube.advance()
        ticks += 1
    return ticks


class TestCubeModel(unittest.TestCase):
    def test_starts_solved_with_27_cubies(self):
        c = CubeModel()
        self.assertEqual(len(c.cubies), 27)
        self.assertEqual({x.position for x in c.cubies}, ALL_POSITIONS)
        self.assertTrue(c.is_solved())
        self.assertFalse(c.is_turning())

    def test_turn_commits_after_fifteen_ticks(self):
        commits = []
        c = CubeModel(on_commit=commits.append)
        self.assertTrue(c.start_turn(Axis.X, 1, 1))
        for _ in range(14):
            c.advance()
            self.assertTrue(c.is_turning())
            self.assertLess(c.turn.angle, 90.0)
        self.assertEqual(c.turn.angle, 84.0)
        c.advance()
        self.assertFalse(c.is_turning())
        self.assertEqual(commits, [Turn(Axis.X, 1, 1)])
        self.assertFalse(c.is_solved())

    def test_angle_is_clamped_and_commits_once(self):
        commits = []
        c = CubeModel(on_commit=commits.append)
        c.start_turn(Axis.Y, -1, -1)
        c.advance(ticks=100)
        self.assertIsNone(c.turn)
        for _ in range(5):
            c.advance()
        self.assertEqual(len(commits), 1)

    def test_start_turn_while_turning_is_ignored(self):
        c = CubeModel()
        c.start_turn(Axis.Z, 1, -1)
        c.advance()
        c.advance()
        before = c.turn
        self.assertFalse(c.start_turn(Axis.X, -1, 1))
        c.apply_turn(Axis.Y, 1, 1)
        self.assertEqual(c.turn, before)
        self.assertEqual(c.turn.angle, 12.0)

    def test_only_the_turned_layer_changes(self):
        c = CubeModel()
        untouched = {id(x): x.snapshot() for x in c.cubies if x.position[Axis.Z] != 1}
        layer = {x.position for x in c.layer_cubies(Axis.Z, 1)}

        c.start_turn(Axis.Z, 1, 1)
        _finish(c)

        for x in c.cubies:
            if id(x) in untouched:
                self.assertEqual(untouched[id(x)], x.snapshot())
        self.assertEqual({x.position for x in c.layer_cubies(Axis.Z, 1)}, layer)
        self.assertEqual({x.position for x in c.cubies}, ALL_POSITIONS)

    def test_turn_then_inverse_restores(self):
        for axis in Axis:
            for layer in (-1, 1):
                c = CubeModel()
                apply_scramble(c, generate_scramble(10, seed=7))
                before = c.snapshot()
                c.apply_turn(axis, layer, 1)
                c.apply_turn(axis, layer, -1)
                self.assertEqual(before, c.snapshot())

    def test_four_same_turns_restore(self):
        for axis in Axis:
            for layer, direction in itertools.product((-1, 1), repeat=2):
                c = CubeModel()
                before = c.snapshot()
                for _ in range(4):
                    c.start_turn(axis, layer, direction)
                    _finish(c)
                self.assertEqual(before, c.snapshot())

    def test_opposite_layers_commute(self):
        for axis in Axis:
            a = CubeModel()
            b = CubeModel()
            a.apply_turn(axis, 1, 1)
            a.apply_turn(axis, -1, -1)
            b.apply_turn(axis, -1, -1)
            b.apply_turn(axis, 1, 1)
            self.assertEqual(a.snapshot(), b.snapshot())

    def test_permutation_closure_after_scramble(self):
        c = CubeModel()
        solved_colors = sorted(c.cubies[0].colors.values())
        apply_scramble(c, generate_scramble(60, seed=3))

        self.assertEqual({x.position for x in c.cubies}, ALL_POSITIONS)
        for x in c.cubies:
            self.assertEqual(sorted(x.colors.values()), solved_colors)

        shown = Counter()
        for face in Face:
            for x in c.layer_cubies(face.axis, face.sign):
                shown[x.colors[face]] += 1
        self.assertEqual(set(shown.values()), {9})

    def test_draw_state_rotates_only_the_turning_layer(self):
        c = CubeModel()
        c.start_turn(Axis.X, -1, -1)
        c.advance()
        c.advance()
        states = c.draw_state()
        rotating = [s for s in states if s.rotation is not None]
        self.assertEqual(len(states), 27)
        self.assertEqual(len(rotating), 9)
        for s in rotating:
            self.assertEqual(s.position[0], -1)
            self.assertEqual(s.rotation, (Axis.X, -12.0))

    def test_invalid_turn_raises(self):
        c = CubeModel()
        with self.assertRaises(ValueError):
            c.start_turn(Axis.X, 0, 1)
        with self.assertRaises(ValueError):
            c.start_turn(Axis.X, 1, 2)
        self.assertFalse(c.is_turning())

    def test_reset(self):
        c = CubeModel()
        c.apply_turn(Axis.Y, 1, 1)
        c.start_turn(Axis.Z, -1, 1)
        c.reset()
        self.assertTrue(c.is_solved())
        self.assertFalse(c.is_turning())


if __name__ == "__main__":
    unittest.main()
