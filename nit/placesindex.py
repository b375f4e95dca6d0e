# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from __future__ import annotations
from dataclasses import dataclass

from .maxnits import compute_max_nits
from .errors import MaxNitComputationError, PlacesIndexCreationError, BadNitLimitEvaluation, IndexOutOfBounds
from .options import get_options, OptionType

@dataclass(frozen=True, init=False, order=True)
class PlacesIndex:
    """
    The placement of a base-``base`` digit in an integer with ``bits`` bits, starting from the
    least significant digit (right-hand side). For example, in base 10::

        3,203
        │ ││└─ the ones place (10 ** 0); i = 0
        │ │└── the tens place (10 ** 1); i = 1
        │ └─── the hundreds place (10 ** 2); i = 2
        └───── the thousands place (10 ** 3); i = 3

    A places index is only valid for the bit width and base it was created for.
    """

    #-------------------------------------------------------------------------
    #members & properties

    #: The zero-based index of the digit.
    index: int

    #: The bit width of the integer the index points into.
    bits: int

    #: The base of the digits.
    base: int

    #-------------------------------------------------------------------------
    #constructor

    def __init__(self, index: int, bits: int, base: int) -> None:
        try:
            capacity = compute_max_nits(base, bits)
        except MaxNitComputationError as err:
            raise BadNitLimitEvaluation(err.failure) from err
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError(f"Index must be an integer, got {type(index).__name__}")
        # zero-based, so an index equal to the capacity is already out of range
        if index < 0 or index >= capacity:
            raise IndexOutOfBounds(index, capacity)
        self._set(index, bits, base)

    @classmethod
    def unchecked(cls, index: int, bits: int, base: int) -> PlacesIndex:
        """
        Creates an index which is assumed to be valid. Using an index outside of the capacity
        of ``bits`` and ``base`` leads to meaningless results, unless debug assertions are
        enabled, in which case an ``AssertionError`` is raised.
        """
        if get_options(OptionType.DEBUG).debug_assertions:
            try:
                cls(index, bits, base)
            except PlacesIndexCreationError as err:
                raise AssertionError(f"Unchecked places index is invalid: {err}") from err
        places = object.__new__(cls)
        places._set(index, bits, base)
        return places

    def _set(self, index: int, bits: int, base: int) -> None:
        object.__setattr__(self, "index", index)
        object.__setattr__(self, "bits", bits)
        object.__setattr__(self, "base", base)

    #-------------------------------------------------------------------------
    #methods

    def get(self) -> int:
        """Returns the underlying index."""
        return self.index

    def __int__(self) -> int:
        return self.index

    def __index__(self) -> int:
        return self.index

    def __str__(self) -> str:
        return f"PlacesIndex(index={self.index},bits={self.bits},base={self.base})"
