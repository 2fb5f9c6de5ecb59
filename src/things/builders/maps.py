"""
Map builders - ad-hoc mappings from pairs, items or enum classes

Collision policy for every builder: first write wins. When two items
produce the same key the value of the earlier one is kept and the later
one is dropped.
"""

from enum import Enum
from typing import Any, Callable, Iterable, MutableMapping, TypeVar

from ..core.config import DEFAULT_CONFIG, ThingsConfig
from ..core.error_types import ArgumentNotSpecifiedError, MissingValueError
from ..core.rows import iter_items
from ..core.types import Pair, identity
from ..verify.presence import resolve_argument, verify

K = TypeVar("K")
V = TypeVar("V")
M = TypeVar("M", bound=MutableMapping)
E = TypeVar("E", bound=Enum)


def pair(key: K, value: V) -> Pair[K, V]:
    """Create a key/value entry for to_map()"""
    return Pair(key, value)


def _populate(target: M, entries: Iterable[tuple[Any, Any]]) -> M:
    for key, value in entries:
        if key not in target:
            target[key] = value
    return target


def to_map(
    factory: Callable[[], M] | None,
    *entries: Pair | tuple[Any, Any],
    config: ThingsConfig = DEFAULT_CONFIG,
) -> M:
    """
    Build a mapping from key/value entries

    Args:
        factory: Zero-argument constructor of the target mapping
            (dict, OrderedDict, a defaultdict partial, ...)
        *entries: Pair objects or plain (key, value) tuples
        config: Argument handling (lenient mode falls back to dict)

    Raises:
        ArgumentNotSpecifiedError: no entries, or strict mode and factory is None
    """
    verify(entries, ArgumentNotSpecifiedError("Collection not specified.", argument="entries"))
    factory = resolve_argument(
        factory,
        "factory",
        config=config,
        fallback=dict,
        message="Implementation of Map was not specified.",
    )
    return _populate(factory(), entries)


def to_map_by(
    items: Iterable[Any],
    key_mapper: Callable[[Any], Any] | None,
    value_mapper: Callable[[Any], Any] | None,
    factory: Callable[[], M] | None = dict,
    *,
    config: ThingsConfig = DEFAULT_CONFIG,
) -> M:
    """
    Build a mapping by extracting a key and a value from every item

    A polars DataFrame is consumed row by row, each row a ``{column: value}``
    dict.

    Raises:
        ArgumentNotSpecifiedError: items missing or empty, or strict mode and
            a mapper/factory is None
    """
    verify(items, ArgumentNotSpecifiedError("Collection not specified.", argument="items"))
    key_mapper = resolve_argument(
        key_mapper, "key_mapper", config=config, fallback=identity,
        message="Key mapper not specified.",
    )
    value_mapper = resolve_argument(
        value_mapper, "value_mapper", config=config, fallback=identity,
        message="Value mapper not specified.",
    )
    factory = resolve_argument(
        factory, "factory", config=config, fallback=dict,
        message="Implementation of Map was not specified.",
    )

    entries = ((key_mapper(item), value_mapper(item)) for item in iter_items(items))
    return _populate(factory(), entries)


def enum_to_map(
    enum_cls: type[E] | None,
    function: Callable[[E], V] | None,
    *,
    config: ThingsConfig = DEFAULT_CONFIG,
) -> dict[E, V]:
    """
    Map every member of an Enum to ``function(member)``

    Keys follow declaration order; aliases are skipped because iterating an
    Enum class skips them.

    Raises:
        MissingValueError: enum_cls is None or not an Enum class
        ArgumentNotSpecifiedError: strict mode and function is None
    """
    if not (isinstance(enum_cls, type) and issubclass(enum_cls, Enum)):
        raise MissingValueError(
            "Enum class not specified.", context={"value_type": type(enum_cls).__name__}
        )
    function = resolve_argument(
        function, "function", config=config, fallback=identity,
        message="Function lambda not specified.",
    )
    return {member: function(member) for member in enum_cls}
