# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""
Digit access on arrays of unsigned integers. The arrays are processed elementwise with the
native wrapping arithmetic of their dtype, so they behave like many :class:`NitContainer`.
"""

from typing import Any, TypeVar

from .backend import ArrayLike, ArrayNamespace, namespace_of_arrays, get_uint_dtype, device
from .layout import NitLayout
from .placesindex import PlacesIndex
from .errors import NitCreationError

T = TypeVar("T", bound=ArrayLike)

def get_nits(array: T, layout: NitLayout, n: int | PlacesIndex) -> T:
    """
    The ``n``th digit of every element of ``array``, with the same shape and dtype.
    """
    xp = namespace_of_arrays(array)
    dtype = _check_dtype(xp, layout, array)
    shift, base = _shift_and_base(xp, layout, n, dtype)
    return (array // shift) % base

def set_nits(array: T, layout: NitLayout, n: int | PlacesIndex, values: Any) -> T:
    """
    Overwrites the ``n``th digit of every element of ``array`` in place with ``values``,
    which is broadcast against ``array``. Returns the previous digits.
    """
    xp = namespace_of_arrays(array)
    dtype = _check_dtype(xp, layout, array)
    shift, base = _shift_and_base(xp, layout, n, dtype)
    values = _check_values(xp, layout, values, dtype)

    digits = (array // shift) % base
    # wrapping arithmetic of the dtype, see NitContainer.set_nit_indexed
    adjust = (values - digits) * shift
    array[...] = array + adjust
    return digits

def to_nits(array: T, layout: NitLayout) -> T:
    """
    Decomposes integers with shape (...) into digits with shape (capacity, ...),
    starting from the least significant digit.
    """
    xp = namespace_of_arrays(array)
    dtype = _check_dtype(xp, layout, array)
    digits = xp.zeros((layout.capacity, *array.shape), dtype=dtype, device=device(array))
    for index in layout.indices():
        shift, base = _shift_and_base(xp, layout, index, dtype)
        digits[index.index, ...] = (array // shift) % base
    return digits

def from_nits(digits: T, layout: NitLayout) -> T:
    """
    Composes digits with shape (capacity, ...) into integers with shape (...).
    """
    xp = namespace_of_arrays(digits)
    dtype = _check_dtype(xp, layout, digits)
    if len(digits.shape) == 0 or digits.shape[0] != layout.capacity:
        raise ValueError(f"Expect an array of shape ({layout.capacity}, ...)")
    _check_values(xp, layout, digits, dtype)
    array = xp.zeros(digits.shape[1:], dtype=dtype, device=device(digits))
    for index in layout.indices():
        shift, _ = _shift_and_base(xp, layout, index, dtype)
        array = array + digits[index.index, ...] * shift
    return array

#-------------------------------------------------------------------------
#helpers

def _check_dtype(xp: ArrayNamespace, layout: NitLayout, inp: ArrayLike) -> Any:
    dtype = get_uint_dtype(xp, layout.type)
    if inp.dtype != dtype:
        raise ValueError(f"Input should have dtype={dtype}")
    return dtype

def _shift_and_base(xp: ArrayNamespace, layout: NitLayout, n: int | PlacesIndex, dtype: Any) -> tuple[Any, Any]:
    index = n if isinstance(n, PlacesIndex) else layout.index(n)
    shift = layout.shifter(index).get()
    return xp.asarray(shift, dtype=dtype), xp.asarray(layout.base, dtype=dtype)

def _check_values(xp: ArrayNamespace, layout: NitLayout, values: Any, dtype: Any) -> Any:
    values = xp.asarray(values)
    if not xp.isdtype(values.dtype, "integral"):
        raise TypeError(f"Values must be integers, got dtype={values.dtype}")
    invalid = values[(values < 0) | (values >= layout.base)]
    if invalid.shape[0] != 0:
        raise NitCreationError(int(invalid[0]), layout.base)
    return xp.astype(values, dtype)
