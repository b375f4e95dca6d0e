# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from enum import Enum

class MaxNitComputationFailure(Enum):
    """
    The reason the maximum amount of nits for a base and bit width could not be computed.
    """

    #: No information is representable by such a base, and it breaks the modulo arithmetic.
    BASE_TOO_SMALL = "The base is less than or equal to 1."
    BASE_TOO_LARGE = "The base is greater than what is currently supported."
    BITS_TOO_SMALL = "The bits are zero."
    BITS_TOO_LARGE = "The bits are greater than what is currently supported."
    #: Not even a single digit of the base fits in the bits.
    BASE_EXCEEDS_MAX_BIT_VALUES = "The amount of bits can't store enough values to represent at least one base digit."

    def __str__(self) -> str:
        return self.value

class NitError(Exception):
    """Base class of all errors raised by nit."""

class MaxNitComputationError(NitError, ValueError):
    """The maximum amount of nits could not be computed for a base and bit width."""

    failure: MaxNitComputationFailure
    base: int
    bits: int

    def __init__(self, failure: MaxNitComputationFailure, base: int, bits: int) -> None:
        self.failure = failure
        self.base = base
        self.bits = bits
        super().__init__(f"{failure} (base={base}, bits={bits})")

class PlacesIndexCreationError(NitError, ValueError):
    """A places index could not be created."""

class BadNitLimitEvaluation(PlacesIndexCreationError):
    """
    The nit limit couldn't be evaluated because either the base or the bit count is erroneous.
    The reason is available as ``failure``.
    """

    failure: MaxNitComputationFailure

    def __init__(self, failure: MaxNitComputationFailure) -> None:
        self.failure = failure
        super().__init__(str(failure))

class IndexOutOfBounds(PlacesIndexCreationError, IndexError):
    """The index goes beyond the computed nit capacity."""

    index: int
    capacity: int

    def __init__(self, index: int, capacity: int) -> None:
        self.index = index
        self.capacity = capacity
        super().__init__(f"The index goes beyond the computed nit capacity, got {index} for a capacity of {capacity}.")

class NitCreationError(NitError, ValueError):
    """The value is not within the range of 0..base."""

    def __init__(self, value: int, base: int) -> None:
        super().__init__(f"The value is not within the range of 0..{base}, got {value}.")
