"""Tests for the value helpers in utils.py.

Tests _to_jsonable with primitives, sequences, dicts, dataclasses, numpy
values, enums, objects with to_js, non-finite floats and the str fallback.
Tests _present, _freeze and _join_tokens.
"""

import math
from dataclasses import dataclass

import numpy as np
import pytest

from plotlyspec.models import HoverOn, Mode, RGB
from plotlyspec.utils import _freeze, _join_tokens, _present, _to_jsonable


class TestToJsonable:
    """Tests for _to_jsonable function."""

    def test_primitives(self):
        """Test that primitive types are returned as-is."""
        assert _to_jsonable("hello") == "hello"
        assert _to_jsonable(42) == 42
        assert _to_jsonable(3.14) == 3.14
        assert _to_jsonable(True) is True
        assert _to_jsonable(False) is False
        assert _to_jsonable(None) is None

    def test_list_and_tuple(self):
        """Test that lists and tuples become lists, converted recursively."""
        assert _to_jsonable([1, "two", 3.0]) == [1, "two", 3.0]
        assert _to_jsonable((1, 2, 3)) == [1, 2, 3]

    def test_dict(self):
        """Test that dicts are converted recursively with string keys."""
        assert _to_jsonable({1: "one", "b": (2, 3)}) == {"1": "one", "b": [2, 3]}

    def test_nested_dataclass(self):
        """Test that plain dataclasses are converted field by field."""
        @dataclass
        class Point:
            x: int
            y: int

        @dataclass
        class Segment:
            start: Point
            end: Point

        seg = Segment(start=Point(0, 0), end=Point(10, 10))
        assert _to_jsonable(seg) == {"start": {"x": 0, "y": 0}, "end": {"x": 10, "y": 10}}

    def test_to_js_objects(self):
        """Test that objects with to_js serialize through it."""
        assert _to_jsonable(RGB(1, 2, 3)) == "rgb(1,2,3)"
        assert _to_jsonable([RGB(1, 2, 3)]) == ["rgb(1,2,3)"]

    def test_enums(self):
        """Test that enum members become their token, not the member."""
        result = _to_jsonable(Mode.MARKERS)
        assert result == "markers"
        assert type(result) is str

    def test_numpy_values(self):
        """Test that numpy arrays and scalars are unwrapped."""
        assert _to_jsonable(np.array([1, 2, 3])) == [1, 2, 3]
        assert _to_jsonable(np.array([[1.5, 2.5]])) == [[1.5, 2.5]]
        assert _to_jsonable(np.float64(2.5)) == 2.5
        assert type(_to_jsonable(np.int64(7))) is int
        assert _to_jsonable(np.bool_(True)) is True

    def test_non_finite_floats(self):
        """Test that NaN and infinities become None."""
        assert _to_jsonable(float("nan")) is None
        assert _to_jsonable([1.0, math.inf, -math.inf]) == [1.0, None, None]
        assert _to_jsonable(np.array([1.0, np.nan])) == [1.0, None]

    def test_unknown_type_fallback(self):
        """Test that unknown types fall back to str()."""
        class CustomClass:
            def __str__(self):
                return "custom"

        assert _to_jsonable(CustomClass()) == "custom"


class TestPresent:
    """Tests for _present."""

    def test_drops_none(self):
        assert _present({"a": 1, "b": None}) == {"a": 1}

    def test_keeps_falsy_values(self):
        """False, 0 and empty sequences are present values."""
        assert _present({"a": False, "b": 0, "c": (), "d": ""}) == {
            "a": False,
            "b": 0,
            "c": [],
            "d": "",
        }

    def test_empty(self):
        assert _present({"a": None}) == {}


class TestFreeze:
    """Tests for _freeze."""

    def test_none(self):
        assert _freeze(None) is None

    def test_list_and_generator(self):
        assert _freeze([1, 2]) == (1, 2)
        assert _freeze(i * 2 for i in range(3)) == (0, 2, 4)

    def test_numpy(self):
        assert _freeze(np.arange(3)) == (0, 1, 2)

    def test_rejects_strings(self):
        with pytest.raises(TypeError):
            _freeze("abc")


class TestJoinTokens:
    """Tests for _join_tokens."""

    def test_order_and_repeats_kept(self):
        tokens = [Mode.LINES, Mode.MARKERS, Mode.LINES]
        assert _join_tokens(tokens) == "lines+markers+lines"
        assert _join_tokens(tokens).split("+") == [t.value for t in tokens]

    def test_single_and_empty(self):
        assert _join_tokens([HoverOn.FILLS]) == "fills"
        assert _join_tokens([]) == ""
        assert _join_tokens(None) is None
