import unittest
from itertools import product

from nit.maxnits import compute_max_nits, integer_log
from nit.errors import MaxNitComputationError, MaxNitComputationFailure
from utils import reference_capacity

class TestMaxNits(unittest.TestCase):

    def assertFailure(self, failure: MaxNitComputationFailure, base: int, bits: int) -> None:
        with self.assertRaises(MaxNitComputationError) as ctx:
            compute_max_nits(base, bits)
        self.assertEqual(ctx.exception.failure, failure)

    def test_binary(self):
        for bits in range(1, 129):
            self.assertEqual(compute_max_nits(2, bits), bits)

    def test_formula(self):
        for base, bits in product(range(3, 129), [1, 2, 7, 8, 16, 31, 32, 64, 100, 127, 128]):
            if 2**bits - 1 < base - 1:
                continue
            self.assertEqual(compute_max_nits(base, bits), reference_capacity(base, bits))

    def test_known_values(self):
        self.assertEqual(compute_max_nits(3, 8), 5)
        # 4**4 == 2**8 exceeds the largest byte value
        self.assertEqual(compute_max_nits(4, 8), 3)
        self.assertEqual(compute_max_nits(10, 8), 2)
        self.assertEqual(compute_max_nits(16, 8), 1)
        self.assertEqual(compute_max_nits(128, 8), 1)
        self.assertEqual(compute_max_nits(3, 16), 10)
        self.assertEqual(compute_max_nits(10, 64), 19)
        self.assertEqual(compute_max_nits(128, 128), 18)
        self.assertEqual(compute_max_nits(3, 2), 1)
        # a base-4 digit needs all values of two bits, the top one never fits
        self.assertEqual(compute_max_nits(4, 2), 0)

    def test_bits(self):
        self.assertFailure(MaxNitComputationFailure.BITS_TOO_SMALL, 2, 0)
        self.assertFailure(MaxNitComputationFailure.BITS_TOO_SMALL, 2, -1)
        self.assertFailure(MaxNitComputationFailure.BITS_TOO_LARGE, 2, 129)
        self.assertEqual(compute_max_nits(2, 128), 128)

    def test_base(self):
        self.assertFailure(MaxNitComputationFailure.BASE_TOO_SMALL, 0, 8)
        self.assertFailure(MaxNitComputationFailure.BASE_TOO_SMALL, 1, 8)
        self.assertFailure(MaxNitComputationFailure.BASE_TOO_SMALL, -3, 8)
        self.assertFailure(MaxNitComputationFailure.BASE_TOO_LARGE, 129, 128)
        self.assertFailure(MaxNitComputationFailure.BASE_TOO_LARGE, 129, 8)
        self.assertEqual(compute_max_nits(127, 128), 18)

    def test_base_exceeds_bits(self):
        self.assertFailure(MaxNitComputationFailure.BASE_EXCEEDS_MAX_BIT_VALUES, 3, 1)
        self.assertFailure(MaxNitComputationFailure.BASE_EXCEEDS_MAX_BIT_VALUES, 5, 2)
        self.assertFailure(MaxNitComputationFailure.BASE_EXCEEDS_MAX_BIT_VALUES, 128, 6)
        self.assertEqual(compute_max_nits(2, 1), 1)

    def test_check_order(self):
        self.assertFailure(MaxNitComputationFailure.BITS_TOO_SMALL, 0, 0)
        self.assertFailure(MaxNitComputationFailure.BITS_TOO_LARGE, 200, 200)
        self.assertFailure(MaxNitComputationFailure.BASE_TOO_SMALL, 1, 128)

    def test_types(self):
        self.assertRaises(TypeError, compute_max_nits, 2.0, 8)
        self.assertRaises(TypeError, compute_max_nits, 2, "8")
        self.assertRaises(TypeError, compute_max_nits, True, 8)

    def test_error_message(self):
        with self.assertRaises(MaxNitComputationError) as ctx:
            compute_max_nits(3, 1)
        self.assertIn("at least one base digit", str(ctx.exception))
        self.assertIsInstance(ctx.exception, ValueError)

    def test_integer_log(self):
        self.assertEqual(integer_log(1, 2), 0)
        self.assertEqual(integer_log(8, 2), 3)
        self.assertEqual(integer_log(9, 3), 2)
        self.assertEqual(integer_log(2**128 - 1, 2), 127)
        self.assertRaises(ValueError, integer_log, 0, 2)
        self.assertRaises(ValueError, integer_log, 10, 1)

if __name__ == '__main__':
    unittest.main()
