import unittest

from rubik_orbit.core import Axis, CubeModel
from rubik_orbit.core.cube_model import Turn
from rubik_orbit.logic.moves import format_sequence, parse_notation, parse_sequence, turn_notation
from rubik_orbit.logic.scramble import apply_scramble, generate_scramble


class TestMoves(unittest.TestCase):
    def test_notation(self):
        self.assertEqual(turn_notation(Turn(Axis.X, 1, -1)), "R")
        self.assertEqual(turn_notation(Turn(Axis.X, 1, 1)), "R'")
        self.assertEqual(turn_notation(Turn(Axis.X, -1, 1)), "L")
        self.assertEqual(turn_notation(Turn(Axis.Y, 1, -1)), "U")
        self.assertEqual(turn_notation(Turn(Axis.Z, -1, -1)), "B'")

    def test_parse_roundtrip_and_double(self):
        seq = "R U' F L' D B"
        self.assertEqual(format_sequence(parse_sequence(seq)), seq)
        self.assertEqual(parse_notation("R2"), [Turn(Axis.X, 1, -1)] * 2)
        self.assertEqual(parse_notation("U’"), [Turn(Axis.Y, 1, 1)])
        self.assertEqual(parse_notation(" "), [])

    def test_invalid_tokens(self):
        with self.assertRaises(ValueError):
            parse_notation("Q")
        with self.assertRaises(ValueError):
            parse_notation("R3")

    def test_sexy_move_has_order_six(self):
        c = CubeModel()
        turns = parse_sequence("R U R' U'")
        for _ in range(5):
            apply_scramble(c, turns)
            self.assertFalse(c.is_solved())
        apply_scramble(c, turns)
        self.assertTrue(c.is_solved())


class TestScramble(unittest.TestCase):
    def test_length_and_no_repeated_layer(self):
        seq = generate_scramble(40, seed=5)
        self.assertEqual(len(seq), 40)
        for a, b in zip(seq, seq[1:]):
            self.assertNotEqual((a.axis, a.layer), (b.axis, b.layer))

    def test_seed_is_reproducible(self):
        self.assertEqual(generate_scramble(20, seed=9), generate_scramble(20, seed=9))

    def test_invalid_length(self):
        with self.assertRaises(ValueError):
            generate_scramble(0)

    def test_inverse_sequence_solves(self):
        c = CubeModel()
        seq = generate_scramble(30, seed=11)
        apply_scramble(c, seq)
        self.assertFalse(c.is_solved())
        apply_scramble(c, [Turn(t.axis, t.layer, -t.direction) for t in reversed(seq)])
        self.assertTrue(c.is_solved())

    def test_ignored_while_turning(self):
        c = CubeModel()
        c.start_turn(Axis.X, 1, 1)
        before = c.snapshot()
        apply_scramble(c, generate_scramble(5, seed=1))
        self.assertEqual(before, c.snapshot())


if __name__ == "__main__":
    unittest.main()
