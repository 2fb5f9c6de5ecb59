"""
things - presence checks, either-selectors, map builders and a JSON bridge

Stateless helpers; every function can be called in isolation.
"""

from .core import (
    NOT_GIVEN,
    Pair,
    ThingsConfig,
    DEFAULT_CONFIG,
    LENIENT_CONFIG,
    ErrorType,
    ThingsError,
    MissingValueError,
    ArgumentNotSpecifiedError,
    NoMatchFoundError,
    CodecError,
)
from .verify import (
    verify,
    is_present,
    is_empty,
    is_not_empty,
    require_not_none,
    either,
    either_match,
    either_positive,
    first_present,
)
from .builders import pair, to_map, to_map_by, enum_to_map, pluck, get_first, build, close
from .codec import encode, decode, to_json, json_to_map

__version__ = "0.1.0"

__all__ = [
    # Core
    "NOT_GIVEN",
    "Pair",
    "ThingsConfig",
    "DEFAULT_CONFIG",
    "LENIENT_CONFIG",
    "ErrorType",
    "ThingsError",
    "MissingValueError",
    "ArgumentNotSpecifiedError",
    "NoMatchFoundError",
    "CodecError",
    # Verify
    "verify",
    "is_present",
    "is_empty",
    "is_not_empty",
    "require_not_none",
    "either",
    "either_match",
    "either_positive",
    "first_present",
    # Builders
    "pair",
    "to_map",
    "to_map_by",
    "enum_to_map",
    "pluck",
    "get_first",
    "build",
    "close",
    # Codec
    "encode",
    "decode",
    "to_json",
    "json_to_map",
]
