import unittest

from fixedrational.intmath import (
    INT64_MAX,
    INT64_MIN,
    add_with_overflow,
    fits,
    gcd,
    lcm,
    lcm_with_overflow,
    multiply_with_overflow,
    remainder_with_overflow,
    subtract_with_overflow,
    truncated_div,
    truncated_rem,
    wrap,
)


class IntMathTests(unittest.TestCase):
    def test_gcd(self):
        self.assertEqual(gcd(210, 165), 15)
        self.assertEqual(gcd(7, 0), 7)
        self.assertEqual(gcd(0, 9), 9)
        self.assertEqual(gcd(0, 0), 0)

    def test_lcm(self):
        self.assertEqual(lcm(4, 6), 12)
        self.assertEqual(lcm(0, 5), 0)
        self.assertEqual(lcm(5, 0), 0)
        self.assertEqual(lcm_with_overflow(4, 6), (12, False))
        self.assertTrue(lcm_with_overflow(2**62, 3)[1])

    def test_bounds_and_wrap(self):
        self.assertEqual(INT64_MAX, 2**63 - 1)
        self.assertEqual(INT64_MIN, -(2**63))
        self.assertTrue(fits(INT64_MIN))
        self.assertFalse(fits(INT64_MAX + 1))
        self.assertEqual(wrap(INT64_MAX + 1), INT64_MIN)
        self.assertEqual(wrap(-1), -1)
        self.assertEqual(wrap(2**64), 0)

    def test_truncating_division(self):
        self.assertEqual(truncated_div(-7, 2), -3)
        self.assertEqual(truncated_div(7, -2), -3)
        self.assertEqual(truncated_rem(-7, 2), -1)
        self.assertEqual(truncated_rem(7, -2), 1)
        with self.assertRaises(ZeroDivisionError):
            truncated_div(1, 0)

    def test_checked_primitives(self):
        self.assertEqual(add_with_overflow(INT64_MAX, 1), (INT64_MIN, True))
        self.assertEqual(add_with_overflow(2, 3), (5, False))
        self.assertEqual(subtract_with_overflow(INT64_MIN, 1), (INT64_MAX, True))
        self.assertEqual(multiply_with_overflow(3, 4), (12, False))
        self.assertEqual(multiply_with_overflow(2**62, 4), (0, True))
        self.assertEqual(remainder_with_overflow(INT64_MIN, -1), (0, True))
        self.assertEqual(remainder_with_overflow(-7, 3), (-1, False))


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()
