# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Protocol
import array_api_compat as api
from array_api_compat import device

from .unsignedtype import UnsignedType

class ArrayLike(Protocol):

    @property
    def shape(self) -> tuple[int | None, ...]: ...
    @property
    def dtype(self) -> Any: ...

#: An array API compatible namespace, e.g. ``array_api_compat.numpy``.
ArrayNamespace = Any

def namespace_of_arrays(*arrays: ArrayLike) -> ArrayNamespace:
    return api.array_namespace(*arrays)

def get_uint_dtype(xp: ArrayNamespace, utype: UnsignedType) -> Any:
    """The unsigned integer dtype of the namespace matching ``utype``."""
    info = xp.__array_namespace_info__()
    dtypes = info.dtypes(kind="unsigned integer")
    if utype.name not in dtypes:
        raise TypeError(f"No array dtype for {utype} available")
    return dtypes[utype.name]
