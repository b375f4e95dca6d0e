# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from __future__ import annotations
from typing import Any, ClassVar
from dataclasses import dataclass
from functools import total_ordering

from .errors import NitCreationError

@total_ordering
@dataclass(frozen=True, init=False, eq=False)
class Nit:
    """
    A base-``base`` digit of an integer, which falls in the range of ``0..base``.
    """

    #-------------------------------------------------------------------------
    #members & properties

    #: The value of the digit.
    value: int

    #: The base of the digit, i.e., the number of possible values it can take.
    base: int

    #-------------------------------------------------------------------------
    #constructor

    def __init__(self, value: int, base: int) -> None:
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"Value must be an integer, got {type(value).__name__}")
        if not 0 <= value < base:
            raise NitCreationError(value, base)
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "base", base)

    @classmethod
    def unchecked(cls, value: int, base: int) -> Nit:
        """
        Creates a nit without checking the value. The value must be within ``0..base``,
        otherwise the nit and everything computed from it is meaningless.
        """
        nit = object.__new__(cls)
        object.__setattr__(nit, "value", value)
        object.__setattr__(nit, "base", base)
        return nit

    #-------------------------------------------------------------------------
    #methods

    def get(self) -> int:
        """Returns the underlying value; the digit in the relevant base."""
        return self.value

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    #-------------------------------------------------------------------------
    #some magic

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Nit)\
               and self.base == other.base\
               and self.value == other.value

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Nit) or self.base != other.base:
            return NotImplemented
        return self.value < other.value

    def __hash__(self) -> int:
        return hash((self.base, self.value))

    def __repr__(self) -> str:
        return f"Nit(value={self.value},base={self.base})"

class Bit(Nit):
    """A binary nit."""

    BASE: ClassVar[int] = 2
    ZERO: ClassVar[Bit]
    ONE: ClassVar[Bit]

    def __init__(self, value: int) -> None:
        super().__init__(value, self.BASE)

class Trit(Nit):
    """A ternary nit."""

    BASE: ClassVar[int] = 3
    ZERO: ClassVar[Trit]
    ONE: ClassVar[Trit]
    TWO: ClassVar[Trit]

    def __init__(self, value: int) -> None:
        super().__init__(value, self.BASE)

Bit.ZERO = Bit(0)
Bit.ONE = Bit(1)
Trit.ZERO = Trit(0)
Trit.ONE = Trit(1)
Trit.TWO = Trit(2)
