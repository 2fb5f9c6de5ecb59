"""
Demo: things helpers

Walks through:
1. Presence checks with verify()
2. Either-selectors
3. Map builders and pluck
4. The permissive JSON bridge
"""

from collections import OrderedDict
from enum import Enum
from operator import itemgetter

import polars as pl

from things import (
    LENIENT_CONFIG,
    MissingValueError,
    NoMatchFoundError,
    either,
    either_positive,
    enum_to_map,
    json_to_map,
    pair,
    pluck,
    to_json,
    to_map,
    to_map_by,
    verify,
)


class Market(str, Enum):
    KOSPI = "KOSPI"
    KOSDAQ = "KOSDAQ"


def main():
    print("=" * 60)
    print("things Demo")
    print("=" * 60)
    print()

    print("🔎 Step 1: verify()")
    print("-" * 60)
    for candidate in ["x", [1], {"a": 1}, 0, True]:
        print(f"  verify({candidate!r}) -> {verify(candidate)!r}")
    for candidate in [None, False, "", [], {}]:
        try:
            verify(candidate)
        except MissingValueError as e:
            print(f"  verify({candidate!r}) -> {e}")
    print(f"  lenient predicate=None -> {verify('x', predicate=None, config=LENIENT_CONFIG)!r}")

    print()
    print("🎯 Step 2: either()")
    print("-" * 60)
    print(f"  either(None, None, 'x') -> {either(None, None, 'x')!r}")
    print(f"  either_positive(0, -1, 7) -> {either_positive(0, -1, 7)!r}")
    try:
        either()
    except NoMatchFoundError as e:
        print(f"  either() -> {e}")

    print()
    print("🗺️  Step 3: Map builders")
    print("-" * 60)
    names = to_map(OrderedDict, pair("firstName", "greg"), pair("firstName", "ignored"))
    print(f"  first write wins: {dict(names)}")

    df = pl.DataFrame({"code": ["005930", "000660"], "name": ["Samsung", "SK hynix"]})
    print(f"  rows -> map: {to_map_by(df, itemgetter('code'), itemgetter('name'))}")
    print(f"  pluck codes: {pluck(df, itemgetter('code'))}")
    print(f"  enum -> map: {enum_to_map(Market, lambda m: len(m.value))}")

    print()
    print("📦 Step 4: JSON bridge")
    print("-" * 60)
    text = "{'home': 'house'}"
    print(f"  json_to_map({text!r}) -> {json_to_map(text)}")
    print(f"  json_to_map('not json') -> {json_to_map('not json')}")
    print(f"  to_json(names) -> {to_json(names)}")
    print(f"  to_json(object()) -> {to_json(object())!r}")

    print()
    print("✅ Done")


if __name__ == "__main__":
    main()
