import unittest

from rubik_orbit.core.cubie import STICKER_PERMUTATIONS, Cubie
from rubik_orbit.core.geometry import Axis, Face


def _colors():
    return {f: f.name.lower() for f in Face}


class TestCubie(unittest.TestCase):
    def test_positive_x_cycles_up_front_down_back(self):
        perm = STICKER_PERMUTATIONS[(Axis.X, 1)]
        self.assertIs(perm[Face.U], Face.F)
        self.assertIs(perm[Face.F], Face.D)
        self.assertIs(perm[Face.D], Face.B)
        self.assertIs(perm[Face.B], Face.U)
        self.assertIs(perm[Face.L], Face.L)
        self.assertIs(perm[Face.R], Face.R)

    def test_negative_direction_reverses_cycle(self):
        for axis in Axis:
            fwd = STICKER_PERMUTATIONS[(axis, 1)]
            back = STICKER_PERMUTATIONS[(axis, -1)]
            for face in Face:
                self.assertIs(back[fwd[face]], face)

    def test_quarter_turn_moves_position_and_colors_together(self):
        c = Cubie((0, 1, 0), _colors())
        c.quarter_turn(Axis.X, 1)
        self.assertEqual(c.position, (0, 0, 1))
        # el sticker que miraba arriba ahora mira al frente
        self.assertEqual(c.colors[Face.F], "u")
        self.assertEqual(c.colors[Face.D], "f")

    def test_y_turn_follows_geometry(self):
        c = Cubie((1, 0, 0), _colors())
        c.quarter_turn(Axis.Y, 1)
        self.assertEqual(c.position, (0, 0, -1))
        self.assertEqual(c.colors[Face.B], "r")

    def test_colors_dict_is_permuted_in_place(self):
        c = Cubie((1, 1, 1), _colors())
        colors = c.colors
        c.quarter_turn(Axis.Z, -1)
        self.assertIs(c.colors, colors)
        self.assertEqual(sorted(colors.values()), sorted(_colors().values()))

    def test_four_quarter_turns_restore(self):
        for axis in Axis:
            for direction in (1, -1):
                c = Cubie((1, -1, 0), _colors())
                before = c.snapshot()
                for _ in range(4):
                    c.quarter_turn(axis, direction)
                self.assertEqual(before, c.snapshot())


if __name__ == "__main__":
    unittest.main()
