import unittest
from itertools import product
import random

from nit.arraycontainer import get_nits, set_nits, to_nits, from_nits
from nit.backend import get_uint_dtype
from nit.layout import NitLayout
from nit.datacontainer import NitContainer
from nit.unsignedtype import U8, U16, U32, U64, U128
from nit.placesindex import PlacesIndex
from nit.nitvalue import Nit
from nit.errors import IndexOutOfBounds, NitCreationError
from utils import backends, bases, rand_values

class TestArrayContainer(unittest.TestCase):

    def setUp(self) -> None:
        self.types = [U8, U16, U32, U64]
        self.rng = random.Random(2024)

    def data(self, xp, layout: NitLayout) -> list[int]:
        return rand_values(self.rng, layout.max_value, 30)

    def test_get_nits(self):
        for xp, utype, base in product(backends, self.types, bases()):
            layout = NitLayout(utype, base)
            values = self.data(xp, layout)
            array = xp.asarray(values, dtype=get_uint_dtype(xp, utype))
            for index in layout.indices():
                digits = get_nits(array, layout, index)
                self.assertEqual(digits.dtype, array.dtype)
                ref = [NitContainer(utype, v).get_nit_indexed(index).get() for v in values]
                self.assertTrue(xp.all(digits == xp.asarray(ref, dtype=array.dtype)))

    def test_set_nits(self):
        for xp, utype, base in product(backends, self.types, bases()):
            layout = NitLayout(utype, base)
            values = self.data(xp, layout)
            dtype = get_uint_dtype(xp, utype)
            for pos in {0, layout.capacity - 1}:
                new = [self.rng.randrange(base) for _ in values]
                array = xp.asarray(values, dtype=dtype)
                previous = set_nits(array, layout, pos, new)

                containers = [NitContainer(utype, v) for v in values]
                ref_previous = [c.set_nit(pos, Nit(d, base)).get() for c, d in zip(containers, new)]
                self.assertTrue(xp.all(previous == xp.asarray(ref_previous, dtype=dtype)))
                self.assertTrue(xp.all(array == xp.asarray([c.value for c in containers], dtype=dtype)))
                self.assertTrue(xp.all(get_nits(array, layout, pos) == xp.asarray(new, dtype=dtype)))

    def test_set_nits_broadcast(self):
        for xp in backends:
            layout = NitLayout(U8, 3)
            array = xp.zeros((4, 2), dtype=get_uint_dtype(xp, U8))
            for i in range(layout.capacity):
                set_nits(array, layout, i, 2)
            self.assertTrue(xp.all(array == 0b11110010))
            previous = set_nits(array, layout, 4, 0)
            self.assertTrue(xp.all(previous == 2))
            self.assertTrue(xp.all(array == 0b11110010 - 2*81))

    def test_to_from_nits(self):
        for xp, utype, base in product(backends, self.types, bases()):
            layout = NitLayout(utype, base)
            values = self.data(xp, layout)
            dtype = get_uint_dtype(xp, utype)
            array = xp.reshape(xp.asarray(values, dtype=dtype), (2, -1))
            digits = to_nits(array, layout)
            self.assertEqual(digits.shape, (layout.capacity, *array.shape))
            for index in layout.indices():
                self.assertTrue(xp.all(digits[index.get(), ...] == get_nits(array, layout, index)))
            self.assertTrue(xp.all(from_nits(digits, layout) == array))

    def test_checks(self):
        for xp in backends:
            layout = NitLayout(U8, 3)
            array = xp.zeros(4, dtype=get_uint_dtype(xp, U16))
            self.assertRaises(ValueError, get_nits, array, layout, 0)
            self.assertRaises(ValueError, to_nits, array, layout)

            array = xp.zeros(4, dtype=get_uint_dtype(xp, U8))
            self.assertRaises(IndexOutOfBounds, get_nits, array, layout, 5)
            self.assertRaises(TypeError, get_nits, array, layout, PlacesIndex(0, 8, 2))
            self.assertRaises(NitCreationError, set_nits, array, layout, 0, [0, 1, 3, 0])
            self.assertRaises(NitCreationError, set_nits, array, layout, 0, -1)
            self.assertRaises(TypeError, set_nits, array, layout, 0, 1.5)
            self.assertRaises(TypeError, set_nits, array, layout, 0, [0.0, 1.0, 2.0, 1.0])
            self.assertRaises(TypeError, set_nits, array, layout, 0, True)
            self.assertTrue(xp.all(array == 0))

            digits = xp.zeros((4, 3), dtype=get_uint_dtype(xp, U8))
            self.assertRaises(ValueError, from_nits, digits, layout)
            digits = xp.full((5, 3), 3, dtype=get_uint_dtype(xp, U8))
            self.assertRaises(NitCreationError, from_nits, digits, layout)
            digits = xp.full((5, 3), 1.5)
            self.assertRaises(ValueError, from_nits, digits, layout)

    def test_no_128_bit_dtype(self):
        for xp in backends:
            self.assertRaises(TypeError, get_uint_dtype, xp, U128)

if __name__ == '__main__':
    unittest.main()
