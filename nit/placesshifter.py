# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from dataclasses import dataclass

from .options import debug_assert

@dataclass(frozen=True)
class PlacesShifter:
    """
    A value that is equal to ``base ** i`` for a valid places index ``i``, i.e. the
    :math:`b^i` in :math:`d_i = \\lfloor n / b^i \\rfloor \\bmod b`. It is never zero.
    The value is not validated, use :meth:`UnsignedType.get_places_shifter` to obtain one.
    """

    #: The power of the base.
    shift: int

    #: The bit width of the integer type the power was computed in.
    bits: int

    #: The base of the digits.
    base: int

    def __post_init__(self) -> None:
        debug_assert(self.shift != 0, "A places shifter must not be zero")

    def get(self) -> int:
        """Returns the underlying value."""
        return self.shift
