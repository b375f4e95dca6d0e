# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""typing has all classes used in the external API of nit."""

from .nitvalue import Nit, Bit, Trit
from .placesindex import PlacesIndex
from .placesshifter import PlacesShifter
from .unsignedtype import UnsignedType
from .datacontainer import NitContainer
from .layout import NitLayout

from .errors import (
    MaxNitComputationFailure,
    NitError,
    MaxNitComputationError,
    PlacesIndexCreationError,
    BadNitLimitEvaluation,
    IndexOutOfBounds,
    NitCreationError
)

from .options import Options, DebugOptions, OptionType
