"""
Pluck - pull one value out of every item of a collection
"""

from typing import Any, Callable, Sequence, TypeVar

from ..core.config import DEFAULT_CONFIG, ThingsConfig
from ..core.error_types import ArgumentNotSpecifiedError
from ..core.rows import iter_items
from ..core.types import identity
from ..verify.presence import is_empty, resolve_argument, verify

T = TypeVar("T")
R = TypeVar("R")


def pluck(
    items: Any,
    function: Callable[[Any], R] | None,
    *,
    config: ThingsConfig = DEFAULT_CONFIG,
) -> list[R]:
    """
    Apply ``function`` to every item, preserving order and length

    Args:
        items: Any collection; a polars DataFrame is plucked row by row
        function: Extractor, e.g. ``operator.itemgetter("k")`` or
            ``lambda p: p.key``
        config: Argument handling (lenient mode plucks the items themselves)

    Raises:
        ArgumentNotSpecifiedError: items missing or empty, or strict mode and
            function is None
    """
    verify(items, ArgumentNotSpecifiedError("Collection not specified.", argument="items"))
    function = resolve_argument(
        function, "function", config=config, fallback=identity,
        message="Function lambda not specified.",
    )
    return [function(item) for item in iter_items(items)]


def get_first(items: Sequence[T] | None) -> T | None:
    """
    First element of a collection, or None when it is None or empty

    A polars DataFrame yields its first row as a ``{column: value}`` dict.
    """
    if is_empty(items):
        return None
    return next(iter_items(items))
