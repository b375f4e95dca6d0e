# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from dataclasses import dataclass

from .supported import SUPPORTED_WIDTHS, all_ones
from .placesindex import PlacesIndex
from .placesshifter import PlacesShifter

@dataclass(frozen=True, init=False)
class UnsignedType:
    """
    A fixed-width unsigned integer type. All arithmetic is modular in :math:`2^{bits}`,
    matching the wrapping arithmetic of a machine word of that width.
    """

    #-------------------------------------------------------------------------
    #members & properties

    #: The width of the type in bits.
    bits: int

    #: All ones, the largest value of the type.
    mask: int

    #: The name of the matching array dtype.
    name: str

    #-------------------------------------------------------------------------
    #constructor

    def __init__(self, bits: int) -> None:
        if bits not in SUPPORTED_WIDTHS:
            raise ValueError(f"Bit width must be one of {SUPPORTED_WIDTHS}, got {bits}")
        object.__setattr__(self, "bits", bits)
        object.__setattr__(self, "mask", all_ones(bits))
        object.__setattr__(self, "name", f"uint{bits}")

    #-------------------------------------------------------------------------
    #methods

    def get_places_shifter(self, n: PlacesIndex) -> PlacesShifter:
        """
        Returns the places shifter used to get the ``n``th base digit of an integer of this type,
        functionally equivalent to ``base ** n``.
        """
        self._check_index(n)
        # The places index was validated against the capacity of this width,
        # so the power never wraps.
        shift = self.wrapping_pow(n.base, n.index)
        return PlacesShifter(shift, self.bits, n.base)

    def wrapping_add(self, lhs: int, rhs: int) -> int:
        return (lhs + rhs) & self.mask

    def wrapping_sub(self, lhs: int, rhs: int) -> int:
        return (lhs - rhs) & self.mask

    def wrapping_mul(self, lhs: int, rhs: int) -> int:
        return (lhs * rhs) & self.mask

    def wrapping_pow(self, base: int, exp: int) -> int:
        return pow(base, exp, self.mask + 1)

    def check_value(self, value: int) -> None:
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"Value must be an integer, got {type(value).__name__}")
        if not 0 <= value <= self.mask:
            raise ValueError(f"Value must be within 0..={self.mask} for {self.name}, got {value}")

    def _check_index(self, n: PlacesIndex) -> None:
        if n.bits != self.bits:
            raise TypeError(f"Index for {n.bits} bits can't be used with {self.name}")

    def __str__(self) -> str:
        return self.name

U8 = UnsignedType(8)
U16 = UnsignedType(16)
U32 = UnsignedType(32)
U64 = UnsignedType(64)
U128 = UnsignedType(128)

_types = {t.bits: t for t in (U8, U16, U32, U64, U128)}

def unsigned_type(bits: int) -> UnsignedType:
    """Look up the unsigned integer type with the given bit width."""
    if bits not in _types:
        raise ValueError(f"Bit width must be one of {SUPPORTED_WIDTHS}, got {bits}")
    return _types[bits]
