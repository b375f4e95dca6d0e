# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Sequence, Iterator
from dataclasses import dataclass
import logging

from .unsignedtype import UnsignedType
from .placesindex import PlacesIndex
from .placesshifter import PlacesShifter
from .datacontainer import NitContainer
from .nitvalue import Nit
from .maxnits import compute_max_nits
from .errors import IndexOutOfBounds

logger = logging.getLogger(__name__)

@dataclass(frozen=True, init=False)
class NitLayout:
    """
    The base-``base`` digit layout of an unsigned integer type. The combination of bit width and
    base is validated once on construction, and the capacity and the places shifters of all
    positions are computed in advance.
    """

    #-------------------------------------------------------------------------
    #members & properties

    #: The unsigned integer type holding the digits.
    type: UnsignedType

    #: The base of the digits.
    base: int

    #: The maximum amount of digits that fit into the type.
    capacity: int

    _shifters: tuple[PlacesShifter, ...]

    @property
    def bits(self) -> int:
        return self.type.bits

    @property
    def max_value(self) -> int:
        """The largest integer whose digits all fit into the layout."""
        return self.base ** self.capacity - 1

    #-------------------------------------------------------------------------
    #constructor

    def __init__(self, utype: UnsignedType, base: int) -> None:
        capacity = compute_max_nits(base, utype.bits)
        object.__setattr__(self, "type", utype)
        object.__setattr__(self, "base", base)
        object.__setattr__(self, "capacity", capacity)
        shifters = tuple(utype.get_places_shifter(self._index(i)) for i in range(capacity))
        object.__setattr__(self, "_shifters", shifters)
        logger.debug("nit layout for %s in base %d holds %d digits", utype, base, capacity)

    #-------------------------------------------------------------------------
    #indices

    def index(self, n: int) -> PlacesIndex:
        """The validated index of the ``n``th digit."""
        if not isinstance(n, int) or isinstance(n, bool):
            raise TypeError(f"Index must be an integer, got {type(n).__name__}")
        if n < 0 or n >= self.capacity:
            raise IndexOutOfBounds(n, self.capacity)
        return self._index(n)

    def indices(self) -> Iterator[PlacesIndex]:
        """All valid indices, starting from the least significant digit."""
        for i in range(self.capacity):
            yield self._index(i)

    def shifter(self, n: PlacesIndex) -> PlacesShifter:
        """The cached places shifter of a valid index."""
        self._check_index(n)
        return self._shifters[n.index]

    #-------------------------------------------------------------------------
    #single digits

    def get_nit(self, value: int, n: int | PlacesIndex) -> Nit:
        """Returns the ``n``th digit of ``value``."""
        shift = self._shift(n)
        return NitContainer(self.type, value)._get(shift, self.base)

    def set_nit(self, value: int, n: int | PlacesIndex, nit: Nit | int) -> tuple[int, Nit]:
        """
        Replaces the ``n``th digit of ``value``. Returns the new integer and the previous digit.
        """
        shift = self._shift(n)
        container = NitContainer(self.type, value)
        previous = container._set(shift, self.base, self._as_nit(nit))
        return container.value, previous

    #-------------------------------------------------------------------------
    #all digits

    def to_nits(self, value: int) -> list[Nit]:
        """All digits of ``value``, starting from the least significant digit."""
        container = NitContainer(self.type, value)
        return [container._get(shifter.get(), self.base) for shifter in self._shifters]

    def from_nits(self, nits: Sequence[Nit | int]) -> int:
        """
        The integer composed of the given digits, starting from the least significant digit,
        i.e. :math:`n = \\sum_i d_i b^i`.
        """
        if len(nits) > self.capacity:
            raise ValueError(f"Expect at most {self.capacity} digits, got {len(nits)}")
        container = NitContainer(self.type)
        for shifter, nit in zip(self._shifters, nits):
            container._set(shifter.get(), self.base, self._as_nit(nit))
        return container.value

    #-------------------------------------------------------------------------
    #helpers

    def _index(self, n: int) -> PlacesIndex:
        # positions below the capacity were validated on construction
        index = object.__new__(PlacesIndex)
        index._set(n, self.bits, self.base)
        return index

    def _shift(self, n: int | PlacesIndex) -> int:
        if isinstance(n, PlacesIndex):
            return self.shifter(n).get()
        return self.shifter(self.index(n)).get()

    def _as_nit(self, nit: Nit | int) -> Nit:
        if isinstance(nit, Nit):
            if nit.base != self.base:
                raise TypeError(f"Expect a base {self.base} nit, got base {nit.base}")
            return nit
        return Nit(nit, self.base)

    def _check_index(self, n: PlacesIndex) -> None:
        if n.bits != self.bits or n.base != self.base:
            raise TypeError(f"Index for {n.bits} bits in base {n.base} doesn't match {self}")
        # unchecked indices may point past the cached shifters
        if n.index < 0 or n.index >= self.capacity:
            raise IndexOutOfBounds(n.index, self.capacity)

    def __len__(self) -> int:
        return self.capacity

    def __str__(self) -> str:
        return f"NitLayout({self.type}, base={self.base})"
