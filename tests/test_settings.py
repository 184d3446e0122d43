import unittest

from pydantic import ValidationError

from planar.geometry.point import Point2D
from planar.geometry.settings import DEFAULT_TOLERANCE, configure, get_settings, reset_settings
from planar.geometry.vec2 import Vector2D


class TestSettings(unittest.TestCase):
    def tearDown(self):
        reset_settings()

    def test_defaults(self):
        s = get_settings()
        self.assertEqual(s.tolerance, DEFAULT_TOLERANCE)
        self.assertIsNone(s.seed)

    def test_configured_tolerance_is_the_default(self):
        v = Vector2D(1e-4, 0)
        self.assertFalse(v.is_nearly_zero())
        configure(tolerance=1e-3)
        self.assertTrue(v.is_nearly_zero())
        self.assertTrue(Point2D(0, 1e-4).is_nearly_zero())
        self.assertTrue(Vector2D(1, 0).is_nearly_perpendicular(Vector2D(1e-4, 1)))
        # an explicit tolerance still wins
        self.assertFalse(v.is_nearly_zero(1e-6))

    def test_configure_keeps_other_fields(self):
        configure(seed=3)
        configure(tolerance=0.5)
        self.assertEqual(get_settings().seed, 3)
        self.assertEqual(get_settings().tolerance, 0.5)

    def test_negative_tolerance_rejected(self):
        with self.assertRaises(ValidationError):
            configure(tolerance=-1.0)
        self.assertEqual(get_settings().tolerance, DEFAULT_TOLERANCE)

    def test_seed_makes_random_values_reproducible(self):
        configure(seed=7)
        first = [Vector2D.random(-1, 1), Point2D.random(0, 5)]
        configure(seed=7)
        second = [Vector2D.random(-1, 1), Point2D.random(0, 5)]
        self.assertEqual(first, second)


if __name__ == "__main__":
    unittest.main()
