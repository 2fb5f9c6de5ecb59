"""
JSON bridge - thin wrappers over pydantic-core's JSON codec

encode()/decode() raise CodecError. to_json()/json_to_map() never raise on
bad data: a failed encode yields "" and a failed decode yields an empty
mapping (silent degrade). Only a None input is rejected.
"""

import logging
from typing import Any, Callable, MutableMapping, TypeVar

from pydantic_core import PydanticSerializationError, from_json, to_json as _core_to_json

from ..core.config import DEFAULT_CONFIG, ThingsConfig
from ..core.error_types import CodecError
from ..verify.presence import require_not_none, resolve_argument

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=MutableMapping)

EMPTY = ""


def normalize_quotes(text: str) -> str:
    """
    Permissive JSON: turn every single quote into a double quote

    Applied blindly, so an apostrophe inside a string value breaks the
    document (which then degrades like any other malformed input).
    """
    return text.replace("'", '"')


def encode(value: Any) -> str:
    """
    Serialize a value to JSON text

    Handles builtins plus dataclasses, pydantic models, enums, datetimes,
    UUIDs and sets.

    Raises:
        CodecError: the value (or something inside it) is not serializable
    """
    try:
        return _core_to_json(value).decode("utf-8")
    except (PydanticSerializationError, ValueError, TypeError) as e:
        raise CodecError(
            f"Cannot encode {type(value).__name__} as JSON: {e}",
            operation="encode",
            context={"value_type": type(value).__name__},
        ) from e


def decode(text: str, permissive: bool = True) -> Any:
    """
    Parse JSON text

    Args:
        text: JSON document
        permissive: Accept single-quoted strings

    Raises:
        CodecError: malformed document
    """
    if permissive:
        text = normalize_quotes(text)
    try:
        return from_json(text)
    except ValueError as e:
        raise CodecError(f"Cannot decode JSON: {e}", operation="decode") from e


def to_json(value: Any) -> str:
    """
    Serialize a value to JSON text, returning "" if it cannot be encoded

    Raises:
        MissingValueError: value is None
    """
    require_not_none(value, "Cannot transform null object in JSON.")
    try:
        return encode(value)
    except CodecError as e:
        logger.debug("to_json degraded to empty string: %s", e.message)
        return EMPTY


def json_to_map(
    text: str,
    factory: Callable[[], M] | None = dict,
    *,
    config: ThingsConfig = DEFAULT_CONFIG,
) -> M:
    """
    Parse permissive JSON text into a mapping built by ``factory``

    Malformed text, or a document whose top level is not an object, gives an
    empty mapping instead of an error.

    Example:
        >>> json_to_map("{'home': 'house', 'vehicle': 'car'}")
        {'home': 'house', 'vehicle': 'car'}

    Raises:
        MissingValueError: text is None
        ArgumentNotSpecifiedError: strict mode and factory is None
    """
    require_not_none(text, "Cannot transform null string in Map.")
    factory = resolve_argument(
        factory, "factory", config=config, fallback=dict,
        message="Implementation of Map was not specified.",
    )
    target = factory()

    try:
        document = decode(text)
    except CodecError as e:
        logger.debug("json_to_map degraded to empty mapping: %s", e.message)
        return target

    if not isinstance(document, dict):
        logger.debug(
            "json_to_map degraded to empty mapping: top level is %s, not an object",
            type(document).__name__,
        )
        return target

    target.update(document)
    return target
