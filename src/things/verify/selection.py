"""
Either-selectors - pick the first usable value out of several candidates
"""

from typing import Any, Callable, Iterable, TypeVar

from ..core.config import DEFAULT_CONFIG, ThingsConfig
from ..core.error_types import ArgumentNotSpecifiedError, NoMatchFoundError
from .presence import resolve_argument

T = TypeVar("T")


def _is_not_none(item: Any) -> bool:
    return item is not None


def _first(predicate: Callable[[T], Any], items: tuple[T, ...], message: str) -> T:
    for item in items:
        if predicate(item):
            return item
    raise NoMatchFoundError(message, candidates=len(items))


def either(*items: T) -> T:
    """
    First item that is not None

    Raises:
        NoMatchFoundError: no items, or all of them are None
    """
    return _first(_is_not_none, items, "No non-None value found.")


def either_match(
    predicate: Callable[[T], Any] | None,
    *items: T,
    config: ThingsConfig = DEFAULT_CONFIG,
) -> T:
    """
    First item satisfying ``predicate``

    In lenient mode a None predicate selects the first non-None item.
    """
    predicate = resolve_argument(
        predicate,
        "predicate",
        config=config,
        fallback=_is_not_none,
        message="Predicate not specified.",
    )
    return _first(predicate, items, "No value matched the predicate.")


def either_positive(*numbers: int) -> int:
    """
    First number strictly greater than zero

    Raises:
        NoMatchFoundError: no numbers, or none of them is positive
    """
    return _first(lambda n: n > 0, numbers, "No positive value found.")


def first_present(items: Iterable[T] | None) -> T:
    """
    Iterable form of either(): first item that is not None
    """
    if items is None:
        raise ArgumentNotSpecifiedError("Items not specified.", argument="items")
    return either(*items)
