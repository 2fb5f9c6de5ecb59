"""
Builders module - maps, plucked lists and object helpers
"""

from .maps import pair, to_map, to_map_by, enum_to_map
from .pluck import pluck, get_first
from .objects import build, close

__all__ = [
    "pair",
    "to_map",
    "to_map_by",
    "enum_to_map",
    "pluck",
    "get_first",
    "build",
    "close",
]
