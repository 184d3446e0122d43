import unittest

import numpy as np

from planar.geometry.errors import NegativeToleranceError
from planar.geometry.point import Point2D
from planar.geometry.vec2 import Vector2D


class TestPoint(unittest.TestCase):
    def test_construction(self):
        p = Point2D(1, np.float32(2.5))
        self.assertIsInstance(p.x, float)
        self.assertEqual(p, Point2D(1.0, 2.5))
        self.assertEqual(Point2D.zero(), Point2D(0, 0))

    def test_random_in_closed_range(self):
        rng = np.random.default_rng(2)
        for _ in range(300):
            p = Point2D.random(10, -10, rng)
            self.assertTrue(-10 <= p.x <= 10)
            self.assertTrue(-10 <= p.y <= 10)

    def test_vector_to_and_distance(self):
        o = Point2D(0, 0)
        p = Point2D(3, 4)
        self.assertEqual(o.vector_to(p), Vector2D(3, 4))
        self.assertEqual(o.distance(p), 5)
        self.assertEqual(o.distance_squared(p), 25)
        self.assertEqual(o.manhattan_distance(p), 7)
        self.assertEqual(p.distance(o), 5)

    def test_vector_from_and_between(self):
        a = Point2D(1, 2)
        b = Point2D(4, 6)
        self.assertEqual(b.vector_from(a), Vector2D(3, 4))
        self.assertEqual(a.vector_from(b), Vector2D(-3, -4))
        self.assertEqual(Point2D.vector_between(a, b), a.vector_to(b))
        self.assertEqual(Point2D.vector_between(a, b), Vector2D.between(a, b))

    def test_is_nearly_equal(self):
        a = Point2D(1, 1)
        self.assertTrue(a.is_nearly_equal(Point2D(4, 5), 5))
        self.assertFalse(a.is_nearly_equal(Point2D(4, 5), 4.5))
        self.assertTrue(a.is_nearly_equal(a, 0))
        self.assertFalse(a.is_nearly_equal(Point2D(1, 1 + 1e-15), 0))
        self.assertTrue(Point2D(1e-13, -1e-13).is_nearly_zero())
        self.assertFalse(Point2D(1e-6, 0).is_nearly_zero())

    def test_negative_tolerance(self):
        with self.assertRaises(NegativeToleranceError):
            Point2D(1, 1).is_nearly_equal(Point2D(1, 1), -0.1)
        with self.assertRaises(NegativeToleranceError):
            Point2D(1, 1).is_nearly_zero(-0.1)

    def test_operators(self):
        p = Point2D(1, 2)
        v = Vector2D(3, 4)
        self.assertEqual(p + v, Point2D(4, 6))
        self.assertEqual(p - v, Point2D(-2, -2))
        # p1 - p2 points from p2 to p1
        self.assertEqual(Point2D(4, 6) - p, Vector2D(3, 4))
        self.assertEqual(Point2D(4, 6) - p, p.vector_to(Point2D(4, 6)))

    def test_compound_operators(self):
        p = Point2D(1, 2)
        alias = p
        p += Vector2D(3, 4)
        self.assertIs(p, alias)
        self.assertEqual(p, Point2D(4, 6))
        p -= Vector2D(1, 1)
        self.assertEqual(alias, Point2D(3, 5))

    def test_unsupported_operands(self):
        with self.assertRaises(TypeError):
            Point2D(1, 2) + Point2D(1, 2)
        with self.assertRaises(TypeError):
            Point2D(1, 2) - 3

    def test_hash(self):
        self.assertEqual(hash(Point2D(1, 2)), hash(Point2D(1.0, 2.0)))
        self.assertEqual(len({Point2D(1, 2), Point2D(1, 2), Point2D(0, 0)}), 2)


if __name__ == "__main__":
    unittest.main()
