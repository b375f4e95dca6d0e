# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Optional

from .unsignedtype import UnsignedType
from .placesindex import PlacesIndex
from .nitvalue import Nit
from .errors import PlacesIndexCreationError

class NitContainer:
    """
    An unsigned integer of a fixed width whose base-``b`` digits (nits) can be read and
    overwritten individually. The digits are extracted with

    .. math:: d_i = \\left\\lfloor\\frac{n}{b^i}\\right\\rfloor \\bmod b

    and written by adding the difference of the new and the old digit, scaled by :math:`b^i`.
    The base is chosen per operation, the same integer may be read in several bases.

    Example::

        data = NitContainer(U8)
        for i in range(5):
            assert data.set_nit(i, Trit.TWO) == Trit.ZERO
        assert data.value == 0b11110010
    """

    #-------------------------------------------------------------------------
    #members & properties

    _type: UnsignedType
    _value: int

    @property
    def type(self) -> UnsignedType:
        """The unsigned integer type backing the nits."""
        return self._type

    @property
    def bits(self) -> int:
        return self._type.bits

    @property
    def value(self) -> int:
        """The current integer."""
        return self._value

    @value.setter
    def value(self, value: int) -> None:
        self._type.check_value(value)
        self._value = value

    #-------------------------------------------------------------------------
    #constructor

    def __init__(self, utype: UnsignedType, value: int = 0) -> None:
        self._type = utype
        self.value = value

    #-------------------------------------------------------------------------
    #reading

    def get_nit_indexed(self, n: PlacesIndex) -> Nit:
        """
        Returns the base digit at the ``n``th place, falling in the range of ``0..base``.
        """
        return self._get(self._type.get_places_shifter(n).get(), n.base)

    def get_nit(self, n: int, base: int) -> Optional[Nit]:
        """
        Returns the base-``base`` digit at the ``n``th place or ``None`` if there is no such place.
        """
        try:
            index = PlacesIndex(n, self.bits, base)
        except PlacesIndexCreationError:
            return None
        return self.get_nit_indexed(index)

    def get_nit_unchecked(self, n: int, base: int) -> Nit:
        """
        Returns the base-``base`` digit at the ``n``th place. It is up to the caller to ensure
        that the place is within the capacity of this integer, see :class:`PlacesIndex`.
        """
        return self.get_nit_indexed(PlacesIndex.unchecked(n, self.bits, base))

    #-------------------------------------------------------------------------
    #writing

    def set_nit_indexed(self, n: PlacesIndex, value: Nit) -> Nit:
        """
        Sets the base digit at the ``n``th place and returns the previous digit.

        The new digit reads back unchanged and all other digits are kept as long as the
        current integer is at most :math:`b^c - 1`, with ``c`` the capacity of the type in
        base ``b`` (see :attr:`NitLayout.max_value`). Larger integers have bits above the
        digits, there the result is :math:`n + (d_{new} - d_{old}) b^i \\bmod 2^{bits}` and
        the written digit may read back differently.
        """
        if value.base != n.base:
            raise TypeError(f"Can't write a base {value.base} nit at a base {n.base} index")
        return self._set(self._type.get_places_shifter(n).get(), n.base, value)

    def set_nit(self, n: int, value: Nit) -> Nit:
        """
        Sets the digit at the ``n``th place in the base of ``value`` and returns the previous digit.
        Raises a :class:`PlacesIndexCreationError` if there is no such place.
        """
        return self.set_nit_indexed(PlacesIndex(n, self.bits, value.base), value)

    def set_nit_unchecked(self, n: int, value: Nit) -> Nit:
        """
        Sets the digit at the ``n``th place in the base of ``value`` and returns the previous digit.
        It is up to the caller to ensure that the place is within the capacity of this integer.
        """
        return self.set_nit_indexed(PlacesIndex.unchecked(n, self.bits, value.base), value)

    #-------------------------------------------------------------------------
    #helpers

    def _get(self, shift: int, base: int) -> Nit:
        return Nit.unchecked(self._extract(shift, base), base)

    def _set(self, shift: int, base: int, value: Nit) -> Nit:
        utype = self._type
        digit = self._extract(shift, base)
        # Only the most significant digit can overflow here. The difference and its
        # scaled adjustment wrap, and the wrapped sum is the expected value mod 2**bits.
        diff = utype.wrapping_sub(value.get(), digit)
        adjust = utype.wrapping_mul(diff, shift)
        self._value = utype.wrapping_add(self._value, adjust)
        return Nit.unchecked(digit, base)

    def _extract(self, shift: int, base: int) -> int:
        # a zero shift only comes from an out of range unchecked index
        if shift == 0:
            return 0
        return (self._value // shift) % base

    #-------------------------------------------------------------------------
    #some magic

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NitContainer)\
               and self._type == other._type\
               and self._value == other._value

    __hash__ = None # type: ignore

    def __repr__(self) -> str:
        return f"NitContainer({self._type}, {self._value:#x})"
