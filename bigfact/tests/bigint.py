from bigfact.bigint import MAX_DIGITS, MAX_MULTIPLIER, MAX_SEED, BigUInt, num_digits
from bigfact.exceptions import CapacityExceeded
from bigfact.test import MyTestCase, parametrize


class BigUIntTest(MyTestCase):
    @parametrize(
        (0, 1),
        (9, 1),
        (10, 2),
        (99999, 5),
        (2**63 - 1, 19),
    )
    def test_num_digits(self, value, truth):
        result = num_digits(value)
        self.assertEqual(truth, result)

    @parametrize(
        (0, "0", [0]),
        (1, "1", [1]),
        (10, "10", [0, 1]),
        (1234567890, "1234567890", [0, 9, 8, 7, 6, 5, 4, 3, 2, 1]),
        (MAX_SEED, str(MAX_SEED), [int(c) for c in reversed(str(MAX_SEED))]),
    )
    def test_init(self, value, truth_str, truth_digits):
        x = BigUInt(value)
        self.assertEqual(truth_str, x.to_decimal_string())
        self.assertIterEqual(truth_digits, x.digits())
        self.assertEqual(len(truth_digits), len(x))
        self.assertEqual(MAX_DIGITS, x.capacity)

    def test_init_resets(self):
        x = BigUInt(987654321)
        x.init(5)
        self.assertEqual("5", str(x))
        self.assertEqual(1, len(x))
        x.init(0)
        self.assertTrue(x.is_zero())

    @parametrize(
        (-1, ValueError),
        (MAX_SEED + 1, ValueError),
        (True, TypeError),
        (1.0, TypeError),
        ("1", TypeError),
    )
    def test_init_invalid(self, value, exc):
        with self.assertRaises(exc):
            BigUInt(value)

    @parametrize(
        (0,),
        (-5,),
    )
    def test_invalid_capacity(self, capacity):
        with self.assertRaises(ValueError):
            BigUInt(1, capacity)

    def test_init_capacity(self):
        x = BigUInt(7, capacity=2)
        with self.assertRaises(CapacityExceeded) as cm:
            x.init(123)
        self.assertEqual(2, cm.exception.capacity)
        self.assertEqual(3, cm.exception.required)
        self.assertEqual("7", str(x))

    @parametrize(
        (1, 7, "7"),
        (12, 12, "144"),
        (99, 99, "9801"),
        (123456789, 1, "123456789"),
        (5, 2, "10"),
        (1, 1000000, "1000000"),
        (9, MAX_MULTIPLIER, str(9 * MAX_MULTIPLIER)),
        (999999999, MAX_MULTIPLIER, str(999999999 * MAX_MULTIPLIER)),
    )
    def test_multiply_by_small(self, value, multiplier, truth):
        x = BigUInt(value)
        result = x.multiply_by_small(multiplier)
        self.assertIs(x, result)
        self.assertEqual(truth, x.to_decimal_string())
        self.assertEqual(len(truth), len(x))

    @parametrize(
        (0,),
        (1,),
        (123456789,),
        (MAX_SEED,),
    )
    def test_multiply_by_zero(self, value):
        x = BigUInt(value)
        x.multiply_by_small(0)
        self.assertEqual("0", x.to_decimal_string())
        self.assertEqual(1, len(x))
        self.assertIterEqual([0], x.digits())
        self.assertTrue(x.is_zero())

        x.multiply_by_small(12345)
        self.assertEqual("0", str(x))

    def test_multiply_by_zero_clears_buffer(self):
        x = BigUInt(999, capacity=5)
        x.multiply_by_small(0)
        x.multiply_by_small(1)
        x.init(0)
        self.assertEqual(BigUInt(0, capacity=5), x)
        self.assertEqual(0, int(x))

    def test_digit_invariants(self):
        x = BigUInt(1)
        for i in range(2, 100):
            x.multiply_by_small(i)
            digits = x.digits()
            self.assertTrue(all(0 <= d <= 9 for d in digits))
            self.assertNotEqual(0, digits[-1])

    @parametrize(
        (-1, ValueError),
        (MAX_MULTIPLIER + 1, ValueError),
        (2.0, TypeError),
        (False, TypeError),
    )
    def test_multiply_invalid(self, multiplier, exc):
        x = BigUInt(3)
        with self.assertRaises(exc):
            x.multiply_by_small(multiplier)
        self.assertEqual("3", str(x))

    def test_multiply_capacity(self):
        x = BigUInt(99999, capacity=5)
        with self.assertRaises(CapacityExceeded) as cm:
            x.multiply_by_small(2)
        self.assertEqual(5, cm.exception.capacity)
        self.assertEqual(6, cm.exception.required)
        self.assertIsInstance(cm.exception, OverflowError)

        # unchanged after the failed multiplication
        self.assertEqual("99999", x.to_decimal_string())
        self.assertEqual(5, len(x))

        x.multiply_by_small(1)
        self.assertEqual("99999", str(x))

    def test_multiply_fills_capacity(self):
        x = BigUInt(99999, capacity=6)
        x.multiply_by_small(10)
        self.assertEqual("999990", str(x))
        self.assertEqual(6, len(x))

    def test_copy(self):
        x = BigUInt(42, capacity=10)
        y = x.copy()
        y.multiply_by_small(10)
        self.assertEqual("42", str(x))
        self.assertEqual("420", str(y))
        self.assertEqual(10, y.capacity)

    def test_eq(self):
        self.assertEqual(BigUInt(120), BigUInt(120, capacity=3))
        self.assertNotEqual(BigUInt(120), BigUInt(12))
        self.assertEqual(BigUInt(120), 120)
        self.assertNotEqual(BigUInt(0), -0.0)
        self.assertNotEqual(BigUInt(1), True)

    def test_repr(self):
        self.assertEqual("BigUInt(720, capacity=4)", repr(BigUInt(720, capacity=4)))


if __name__ == "__main__":
    import unittest

    unittest.main()
