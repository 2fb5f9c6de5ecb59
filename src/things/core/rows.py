"""
Item iteration shared by the collection helpers
"""

from typing import Any, Iterable, Iterator

import polars as pl


def iter_items(items: Iterable[Any]) -> Iterator[Any]:
    """
    Iterate the items of a collection

    A polars DataFrame is iterated row by row as ``{column: value}`` dicts
    (iterating it directly would yield columns); everything else is
    iterated as-is.
    """
    if isinstance(items, pl.DataFrame):
        return items.iter_rows(named=True)
    return iter(items)
