"""
Object helpers - in-place building and bulk closing
"""

from typing import Any, Callable, TypeVar

from ..verify.presence import require_not_none

T = TypeVar("T")


def build(obj: T, builder: Callable[[T], Any]) -> T:
    """
    Run ``builder`` against ``obj`` and return ``obj``

    Handy for populating a freshly created container inline::

        headers = build({}, lambda h: h.update(accept="application/json"))
    """
    builder(require_not_none(obj, "Cannot build object when it is null"))
    return obj


def close(*closeables: Any) -> None:
    """
    Close every non-None argument, in order

    The first failing close() propagates and the remaining objects are left open.
    """
    for obj in closeables:
        if obj is not None:
            obj.close()
