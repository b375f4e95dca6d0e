# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Hashable, Any, Self
from enum import Enum
import threading

class OptionType(Enum):
    DEBUG = 0

class Options:

    key: Hashable

    def __init__(self, category: OptionType):
        self.key = (category, threading.get_ident())

    def __enter__(self) -> Self:
        global _opts
        if self.key in _opts:
            self._tmp = _opts[self.key]
        else:
            self._tmp = None
        _opts[self.key] = self
        return self

    def __exit__(self, *_) -> None:
        global _opts
        if self._tmp is not None:
            _opts[self.key] = self._tmp
        else:
            del _opts[self.key]

class DebugOptions(Options):
    """
    Context manager for the precondition checks of the unchecked entry points. If enabled,
    violated preconditions raise an ``AssertionError``, otherwise the result is unreliable.
    """

    #: Whether the preconditions of unchecked operations are verified.
    debug_assertions: bool

    def __init__(self, *, debug_assertions: bool = __debug__):
        self.debug_assertions = debug_assertions
        super().__init__(OptionType.DEBUG)

_opts: dict[Any, Options] = {}

def get_options(otype: OptionType) -> DebugOptions:
    global _opts
    key = (otype, threading.get_ident())
    if key in _opts:
        return _opts[key] # type: ignore
    elif otype == OptionType.DEBUG:
        return DebugOptions()
    else:
        raise KeyError("No options set for the current thread.")

def set_options(opts: DebugOptions) -> None:
    global _opts
    _opts[opts.key] = opts

def debug_assert(condition: bool, msg: str) -> None:
    if not condition and get_options(OptionType.DEBUG).debug_assertions:
        raise AssertionError(msg)
