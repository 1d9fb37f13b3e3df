import itertools
import unittest

from rubik_orbit.core.geometry import Axis
from rubik_orbit.interaction.gestures import resolve_turn_direction


class TestGestures(unittest.TestCase):
    def test_z_face(self):
        self.assertEqual(resolve_turn_direction(Axis.Z, 1, 30, 5), 1)
        self.assertEqual(resolve_turn_direction(Axis.Z, 1, -30, 5), -1)
        self.assertEqual(resolve_turn_direction(Axis.Z, 1, 5, 30), -1)
        self.assertEqual(resolve_turn_direction(Axis.Z, 1, 5, -30), 1)

    def test_x_face(self):
        self.assertEqual(resolve_turn_direction(Axis.X, 1, 5, 30), 1)
        self.assertEqual(resolve_turn_direction(Axis.X, 1, 5, -30), -1)
        self.assertEqual(resolve_turn_direction(Axis.X, 1, 30, 5), -1)
        self.assertEqual(resolve_turn_direction(Axis.X, 1, -30, 5), 1)

    def test_y_face(self):
        self.assertEqual(resolve_turn_direction(Axis.Y, 1, 30, 5), 1)
        self.assertEqual(resolve_turn_direction(Axis.Y, 1, -30, 5), -1)
        self.assertEqual(resolve_turn_direction(Axis.Y, 1, 5, 30), 1)
        self.assertEqual(resolve_turn_direction(Axis.Y, 1, 5, -30), -1)

    def test_bottom_layer_flips_sign(self):
        for axis in Axis:
            for dx, dy in [(30, 5), (-30, 5), (5, 30), (5, -30)]:
                self.assertEqual(
                    resolve_turn_direction(axis, -1, dx, dy),
                    -resolve_turn_direction(axis, 1, dx, dy),
                )

    def test_ties(self):
        # X: empate -> horizontal; Y/Z: empate -> vertical
        self.assertEqual(resolve_turn_direction(Axis.X, 1, 10, 10), -1)
        self.assertEqual(resolve_turn_direction(Axis.Y, 1, 10, 10), 1)
        self.assertEqual(resolve_turn_direction(Axis.Z, 1, 10, 10), -1)

    def test_zero_drag_still_resolves(self):
        self.assertEqual(resolve_turn_direction(Axis.Z, 1, 0, 0), 1)
        self.assertEqual(resolve_turn_direction(Axis.X, 1, 0, 0), 1)
        self.assertEqual(resolve_turn_direction(Axis.Y, 1, 0, 0), -1)

    def test_never_zero(self):
        for axis, layer, dx, dy in itertools.product(Axis, (-1, 1), (-7, 0, 7), (-7, 0, 7)):
            self.assertIn(resolve_turn_direction(axis, layer, dx, dy), (-1, 1))


if __name__ == "__main__":
    unittest.main()
