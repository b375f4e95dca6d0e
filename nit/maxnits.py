# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from .supported import MAXIMUM_SUPPORTED_BITS, MAXIMUM_SUPPORTED_BASE, all_ones
from .errors import MaxNitComputationFailure, MaxNitComputationError

def compute_max_nits(base: int, bits: int) -> int:
    """
    Computes the maximum amount of base-``base`` digits that can be stored in an integer with ``bits`` bits,
    i.e. :math:`\\lfloor\\log_{base}(2^{bits}-1)\\rfloor` for ``base > 2`` and ``bits`` for ``base == 2``.
    The digits are indexed from zero, so the valid indices are ``0..result``.

    Raises a :class:`MaxNitComputationError` if the combination of base and bits is not supported.
    """
    _check_int("Base", base)
    _check_int("Bits", bits)
    if bits < 1:
        raise MaxNitComputationError(MaxNitComputationFailure.BITS_TOO_SMALL, base, bits)
    if bits > MAXIMUM_SUPPORTED_BITS:
        raise MaxNitComputationError(MaxNitComputationFailure.BITS_TOO_LARGE, base, bits)
    if base <= 1:
        raise MaxNitComputationError(MaxNitComputationFailure.BASE_TOO_SMALL, base, bits)
    if base == 2:
        return bits
    if base > MAXIMUM_SUPPORTED_BASE:
        raise MaxNitComputationError(MaxNitComputationFailure.BASE_TOO_LARGE, base, bits)

    max_value = all_ones(bits)
    if max_value < base - 1:
        raise MaxNitComputationError(MaxNitComputationFailure.BASE_EXCEEDS_MAX_BIT_VALUES, base, bits)
    return integer_log(max_value, base)

def integer_log(value: int, base: int) -> int:
    """Largest ``k`` with ``base**k <= value``, computed without floating point."""
    if value < 1 or base < 2:
        raise ValueError(f"Integer logarithm is undefined for value={value} and base={base}")
    k = 0
    power = base
    while power <= value:
        power *= base
        k += 1
    return k

def _check_int(msg: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{msg} must be an integer, got {type(value).__name__}")
