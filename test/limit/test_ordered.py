from datetime import date
from decimal import Decimal
from fractions import Fraction
import unittest
import numpy as np
from limit import limit, bounds, at_least, at_most, between, unbounded, InvertedBoundsException
from test import parse_value, parse_bound
from test.resources.tests import load_cases


class TestLimit(unittest.TestCase):

    cases = load_cases('ordered')
    values = range(-6, 7)

    def test_cases(self):
        for row in self.cases:
            value, bound, expected = parse_value(row['value']), parse_bound(row['bound']), parse_value(row['expected'])
            with self.subTest(value=value, bound=str(bound)):
                self.assertEqual(expected, limit(value, bound))

    def test_at_least_is_max(self):
        for value in self.values:
            for start in self.values:
                self.assertEqual(max(value, start), limit(value, bounds[start:]))

    def test_at_most_is_min(self):
        for value in self.values:
            for end in self.values:
                self.assertEqual(min(value, end), limit(value, bounds[:end]))

    def test_between_stays_inside(self):
        for value in self.values:
            for start in self.values:
                for end in range(start, 7):
                    result = limit(value, bounds[start:end])
                    self.assertTrue(start <= result <= end)
                    if start <= value <= end:
                        self.assertEqual(value, result)

    def test_unbounded_is_identity(self):
        value = Fraction(3, 7)
        self.assertIs(value, limit(value, bounds[:]))
        self.assertEqual(-2 ** 31, limit(-2 ** 31, unbounded()))

    def test_constructors(self):
        self.assertEqual(3, limit(2, at_least(3)))
        self.assertEqual(7, limit(9, at_most(7)))
        self.assertEqual(3, limit(2, between(3, 7)))
        self.assertEqual(7, limit(9, slice(3, 7)))

    def test_inverted_bound(self):
        with self.assertRaises(InvertedBoundsException):
            limit(4, bounds[5:3])
        with self.assertRaises(InvertedBoundsException):
            limit(5, between(5, 3))

    def test_inverted_bound_is_logged(self):
        with self.assertLogs('limit', level='DEBUG') as logs:
            with self.assertRaises(InvertedBoundsException):
                limit(4, bounds[5:3])
        self.assertIn('[5, 3]', logs.output[0])

    def test_other_ordered_types(self):
        self.assertEqual(Fraction(1, 3), limit(Fraction(1, 4), bounds[Fraction(1, 3):]))
        self.assertEqual(Decimal('2.5'), limit(Decimal('9'), bounds[Decimal('1'):Decimal('2.5')]))
        self.assertEqual(date(2020, 1, 1), limit(date(1999, 5, 5), bounds[date(2020, 1, 1):date(2021, 1, 1)]))
        self.assertEqual(np.int8(50), limit(np.int8(100), bounds[:np.int8(50)]))
        self.assertEqual(2 ** 100, limit(2 ** 200, bounds[:2 ** 100]))

    def test_floats_are_refused(self):
        with self.assertRaises(TypeError):
            limit(5.0, bounds[3:])
        with self.assertRaises(TypeError):
            limit(5, bounds[3.0:])
        with self.assertRaises(TypeError):
            limit(5, bounds[:np.float32(7)])
        with self.assertRaises(TypeError):
            limit(np.float16(5), bounds[:])

    def test_other_shapes_are_refused(self):
        with self.assertRaises(TypeError):
            limit(5, range(3, 7))
        with self.assertRaises(TypeError):
            limit(5, (3, 7))
        with self.assertRaises(TypeError):
            limit(5, slice(3, 7, 2))
        with self.assertRaises(TypeError):
            limit(5, None)


if __name__ == '__main__':
    unittest.main()
