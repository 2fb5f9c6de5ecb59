"""
Tests for the JSON bridge (strict codec + silent-degrade wrappers)
"""

import json
import logging
from collections import OrderedDict
from dataclasses import dataclass
from enum import Enum

import pytest
from pydantic import BaseModel

from things.core.config import LENIENT_CONFIG
from things.core.error_types import (
    ArgumentNotSpecifiedError,
    CodecError,
    ErrorType,
    MissingValueError,
)
from things.codec.json_bridge import decode, encode, json_to_map, normalize_quotes, to_json


class Market(str, Enum):
    KOSPI = "KOSPI"


@dataclass
class Point:
    x: int
    y: int


class Stock(BaseModel):
    code: str
    market: Market


class TestJsonToMap:
    """Permissive JSON text to mappings"""

    def test_single_quotes_normalized(self):
        assert json_to_map("{'a':'b'}") == {"a": "b"}

    def test_double_quotes(self):
        result = json_to_map('{"home": "house", "vehicle": "car"}')
        assert result["home"] == "house"
        assert result["vehicle"] == "car"

    def test_numeric_string_keys(self):
        result = json_to_map("{'1': 'apple', '4' : 'zebra', '100' : 'baseball'}")
        assert result["1"] == "apple"
        assert len(result) == 3

    def test_nested_values_kept(self):
        result = json_to_map("{'a': {'b': [1, 2]}, 'c': true}")
        assert result == {"a": {"b": [1, 2]}, "c": True}

    def test_custom_factory(self):
        result = json_to_map("{'z': 1, 'a': 2}", OrderedDict)
        assert isinstance(result, OrderedDict)
        assert list(result) == ["z", "a"]

    @pytest.mark.parametrize("text", ["not json", "", "{'a': ", "[1, 2, 3]", "42", "{'it's': 1}"])
    def test_malformed_or_non_object_degrades_to_empty(self, text):
        assert json_to_map(text) == {}

    def test_degraded_result_uses_factory(self):
        result = json_to_map("not json", OrderedDict)
        assert isinstance(result, OrderedDict)
        assert len(result) == 0

    def test_degrade_is_logged_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="things.codec.json_bridge"):
            json_to_map("not json")
        assert "degraded" in caplog.text

    def test_none_text_raises(self):
        with pytest.raises(MissingValueError, match="null string"):
            json_to_map(None)

    def test_none_factory(self):
        with pytest.raises(ArgumentNotSpecifiedError):
            json_to_map("{}", None)
        assert json_to_map("{'a': 1}", None, config=LENIENT_CONFIG) == {"a": 1}


class TestToJson:
    """Values to JSON text"""

    def test_builtin_values(self):
        assert json.loads(to_json({"a": [1, 2], "b": None})) == {"a": [1, 2], "b": None}

    def test_string_is_quoted(self):
        text = to_json("{'home' : 'house'}")
        assert json.loads(text) == "{'home' : 'house'}"

    def test_dataclass_and_model(self):
        assert json.loads(to_json(Point(1, 2))) == {"x": 1, "y": 2}
        stock = Stock(code="005930", market=Market.KOSPI)
        assert json.loads(to_json(stock)) == {"code": "005930", "market": "KOSPI"}

    def test_falsy_values_are_encoded(self):
        assert to_json(False) == "false"
        assert to_json([]) == "[]"

    def test_unserializable_degrades_to_empty_string(self):
        assert to_json(object()) == ""

    def test_none_raises(self):
        with pytest.raises(MissingValueError, match="null object"):
            to_json(None)


class TestStrictCodec:
    """encode()/decode() surface CodecError"""

    def test_encode_error(self):
        with pytest.raises(CodecError) as exc_info:
            encode(object())
        assert exc_info.value.error_type == ErrorType.CODEC_ERROR
        assert exc_info.value.operation == "encode"

    def test_decode_error(self):
        with pytest.raises(CodecError) as exc_info:
            decode("not json")
        assert exc_info.value.operation == "decode"

    def test_decode_strict_rejects_single_quotes(self):
        with pytest.raises(CodecError):
            decode("{'a': 1}", permissive=False)
        assert decode("{'a': 1}") == {"a": 1}

    def test_decode_arrays(self):
        assert decode("['x', 'y']") == ["x", "y"]


def test_normalize_quotes():
    assert normalize_quotes("{'a': 'b'}") == '{"a": "b"}'
