"""
Tests for either-selectors
"""

import pytest

from things.core.config import LENIENT_CONFIG
from things.core.error_types import ArgumentNotSpecifiedError, NoMatchFoundError
from things.verify.selection import either, either_match, either_positive, first_present


def test_either_skips_none():
    assert either(None, None, "x") == "x"


def test_either_keeps_falsy_values():
    """Only None is skipped; 0, "" and False are valid picks"""
    assert either(None, 0, 5) == 0
    assert either(None, "", "x") == ""
    assert either(False, True) is False


def test_either_empty_raises():
    with pytest.raises(NoMatchFoundError) as exc_info:
        either()
    assert exc_info.value.candidates == 0


def test_either_all_none_raises():
    with pytest.raises(NoMatchFoundError) as exc_info:
        either(None, None)
    assert exc_info.value.candidates == 2


def test_either_positive():
    assert either_positive(0, -1, 7, 3) == 7
    assert either_positive(2) == 2


def test_either_positive_no_match():
    with pytest.raises(NoMatchFoundError, match="positive"):
        either_positive(0, -5)
    with pytest.raises(NoMatchFoundError):
        either_positive()


def test_either_match():
    assert either_match(lambda s: s.startswith("b"), "apple", "banana", "blueberry") == "banana"
    with pytest.raises(NoMatchFoundError):
        either_match(lambda s: s.startswith("z"), "apple")


def test_either_match_none_predicate():
    with pytest.raises(ArgumentNotSpecifiedError):
        either_match(None, "a")
    assert either_match(None, None, "a", config=LENIENT_CONFIG) == "a"


def test_first_present():
    assert first_present([None, "x", "y"]) == "x"
    assert first_present(iter([None, 4])) == 4
    with pytest.raises(NoMatchFoundError):
        first_present([])
    with pytest.raises(ArgumentNotSpecifiedError):
        first_present(None)
