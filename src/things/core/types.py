"""
Small value types shared by the helpers
"""

from dataclasses import dataclass
from typing import Any, Generic, Iterator, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class _NotGiven:
    """Marker for an argument the caller did not pass at all (distinct from None)"""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOT_GIVEN"

    def __bool__(self) -> bool:
        return False


NOT_GIVEN = _NotGiven()


@dataclass(frozen=True)
class Pair(Generic[K, V]):
    """
    Immutable key/value entry

    Unpacks like a 2-tuple, so ``key, value = pair`` works and a Pair can be
    used anywhere a ``(key, value)`` tuple is accepted.
    """

    key: K
    value: V

    def __iter__(self) -> Iterator[Any]:
        yield self.key
        yield self.value

    def as_tuple(self) -> tuple[K, V]:
        return (self.key, self.value)


def identity(item: Any) -> Any:
    """Lenient-mode stand-in for a missing mapper"""
    return item
