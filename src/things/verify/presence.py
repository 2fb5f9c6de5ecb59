"""
Presence checks - the verify() guard and its helpers

A value is "present" when it survives this cascade, evaluated in order and
stopping at the first category that applies:

1. None                      -> missing
2. bool                      -> must be True
3. str                       -> must be non-empty
4. sized collection          -> must be non-empty (list, tuple, set, bytes,
                                numpy arrays, polars Series/DataFrame, ...)
5. mapping                   -> must be non-empty
6. extra predicate (if any)  -> must be truthy for the value

Everything else (numbers, including 0, and plain objects) is present.
"""

from collections.abc import Mapping, Sized
from typing import Any, Callable, TypeVar

from ..core.config import DEFAULT_CONFIG, ThingsConfig
from ..core.error_types import ArgumentNotSpecifiedError, MissingValueError
from ..core.rows import iter_items
from ..core.types import NOT_GIVEN

T = TypeVar("T")


def is_present(value: Any) -> bool:
    """
    Type-directed presence check (steps 1-5 of the cascade, no predicate)
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return len(value) > 0
    if isinstance(value, Sized) and not isinstance(value, Mapping):
        # len() rather than truthiness: numpy/polars containers refuse bool()
        try:
            return len(value) > 0
        except TypeError:
            # 0-d numpy arrays define __len__ but are scalars
            return True
    if isinstance(value, Mapping):
        return len(value) > 0
    return True


def _check_error(error: Any) -> None:
    """Reject failure arguments that are neither a message nor an exception"""
    if error is NOT_GIVEN or error is None or isinstance(error, (str, BaseException)):
        return
    if isinstance(error, type) and issubclass(error, BaseException):
        return
    raise TypeError(
        f"error must be a message, an exception or an exception class, not {type(error).__name__}"
    )


def _failure(error: Any, value: Any) -> BaseException:
    """Turn the caller's failure argument into the exception to raise"""
    context = {"value_type": type(value).__name__}

    if error is NOT_GIVEN:
        return MissingValueError(context=context)
    if error is None:
        # lenient mode: never raise None, fall back to a missing-value error
        return MissingValueError("Exception not specified.", context=context)
    if isinstance(error, str):
        return MissingValueError(error, context=context)
    if isinstance(error, BaseException):
        return error
    return error()


def verify(
    value: T,
    error: Any = NOT_GIVEN,
    predicate: Callable[[T], Any] | None = NOT_GIVEN,  # type: ignore[assignment]
    *,
    config: ThingsConfig = DEFAULT_CONFIG,
) -> T:
    """
    Return ``value`` unchanged if it is present, otherwise raise

    Args:
        value: Candidate value
        error: What to raise on failure - a message (wrapped in
            MissingValueError), an exception instance, or an exception class.
            Defaults to MissingValueError.
        predicate: Extra check run after the type-directed checks pass
        config: Argument handling (see ThingsConfig.strict_arguments)

    Returns:
        The same object that was passed in (identity, not a copy)

    Raises:
        MissingValueError: value is not present and no error was supplied,
            or strict mode and error is None
        ArgumentNotSpecifiedError: strict mode and predicate is None
        TypeError: error is not a message, an exception or an exception class
    """
    _check_error(error)
    if config.strict_arguments:
        if error is None:
            raise MissingValueError("Exception was not specified.", context={"argument": "error"})
        if predicate is None:
            raise ArgumentNotSpecifiedError("Predicate was not specified.", argument="predicate")

    if not is_present(value):
        raise _failure(error, value)

    if predicate is not NOT_GIVEN and predicate is not None and not predicate(value):
        raise _failure(error, value)

    return value


def require_not_none(value: T, message: str | None = None) -> T:
    """
    Null-only check: unlike verify(), False/""/[] pass through
    """
    if value is None:
        raise MissingValueError(message or "Value not specified.")
    return value


def resolve_argument(
    argument: Any,
    name: str,
    *,
    config: ThingsConfig = DEFAULT_CONFIG,
    fallback: Any = NOT_GIVEN,
    message: str | None = None,
) -> Any:
    """
    Resolve an auxiliary argument (predicate, factory, mapper)

    Present arguments are returned as-is. A missing one raises
    ArgumentNotSpecifiedError in strict mode, or when there is no fallback;
    in lenient mode the fallback is returned instead.
    """
    if argument is not None and argument is not NOT_GIVEN:
        return argument
    if config.strict_arguments or fallback is NOT_GIVEN:
        raise ArgumentNotSpecifiedError(message, argument=name)
    return fallback


def is_empty(items: Any, predicate: Callable[[Any], Any] | None = None) -> bool:
    """
    True if ``items`` is None or has no elements

    With a predicate, a non-empty collection is also "empty" when ANY
    element satisfies the predicate.
    """
    if items is None or len(items) == 0:
        return True
    if predicate is None:
        return False
    return any(predicate(item) for item in iter_items(items))


def is_not_empty(items: Any, predicate: Callable[[Any], Any] | None = None) -> bool:
    """
    True if ``items`` has elements and, with a predicate, ALL of them satisfy it
    """
    if is_empty(items):
        return False
    if predicate is None:
        return True
    return all(predicate(item) for item in iter_items(items))
