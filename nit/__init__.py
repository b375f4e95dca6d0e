# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""
nit supplies non-binary "bit"-sets over fixed-width unsigned integers. Any base-``b`` digit of
an integer can be read and overwritten in place, using only integer arithmetic::

    from nit import NitContainer, Trit, U8

    data = NitContainer(U8)
    for i in range(5):
        data.set_nit(i, Trit.TWO)
    assert data.value == 0b11110010
"""

import logging

from .supported import MAXIMUM_SUPPORTED_BITS, MAXIMUM_SUPPORTED_BASE, SUPPORTED_WIDTHS
from .maxnits import compute_max_nits
from .nitvalue import Nit, Bit, Trit
from .placesindex import PlacesIndex
from .placesshifter import PlacesShifter
from .unsignedtype import UnsignedType, U8, U16, U32, U64, U128, unsigned_type
from .datacontainer import NitContainer
from .layout import NitLayout
from .arraycontainer import get_nits, set_nits, to_nits, from_nits
from .options import DebugOptions, set_options, get_options, OptionType
from .errors import (
    MaxNitComputationFailure,
    NitError,
    MaxNitComputationError,
    PlacesIndexCreationError,
    BadNitLimitEvaluation,
    IndexOutOfBounds,
    NitCreationError
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
