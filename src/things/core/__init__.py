"""
Core module - error types, configuration and shared value types
"""

from .types import NOT_GIVEN, Pair
from .config import DEFAULT_CONFIG, LENIENT_CONFIG, ThingsConfig
from .error_types import (
    ErrorType,
    ThingsError,
    MissingValueError,
    ArgumentNotSpecifiedError,
    NoMatchFoundError,
    CodecError,
)

__all__ = [
    # Types
    "NOT_GIVEN",
    "Pair",
    # Config
    "ThingsConfig",
    "DEFAULT_CONFIG",
    "LENIENT_CONFIG",
    # Error Types
    "ErrorType",
    "ThingsError",
    "MissingValueError",
    "ArgumentNotSpecifiedError",
    "NoMatchFoundError",
    "CodecError",
]
