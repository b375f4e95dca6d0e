# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""Limits on the integer widths and bases this library can represent."""

#: The maximum amount of bits supported for a backing integer.
#: This also bounds the base, as a larger base would need more bits than that to be represented.
MAXIMUM_SUPPORTED_BITS: int = 128

#: The maximum supported base.
MAXIMUM_SUPPORTED_BASE: int = MAXIMUM_SUPPORTED_BITS

#: Widths of the unsigned integer types that can back a sequence of nits.
SUPPORTED_WIDTHS: tuple[int, ...] = (8, 16, 32, 64, 128)

def all_ones(bits: int) -> int:
    """The largest unsigned value representable with the given amount of bits."""
    return (1 << bits) - 1
