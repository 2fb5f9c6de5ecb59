"""
Codec module - JSON bridge
"""

from .json_bridge import encode, decode, normalize_quotes, to_json, json_to_map

__all__ = [
    "encode",
    "decode",
    "normalize_quotes",
    "to_json",
    "json_to_map",
]
