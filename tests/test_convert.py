"""Tests for fitcms_core.convert."""

import pytest

from fitcms_core.convert import to_mapping, to_python, to_value
from fitcms_core.values import Empty, VList, VMapping, VScalar


class TestToValue:
    def test_string(self):
        assert to_value("hello") == VScalar("hello")

    def test_none(self):
        assert to_value(None) is Empty

    def test_integer(self):
        assert to_value(500) == VScalar("500")

    def test_integral_float(self):
        assert to_value(2.0) == VScalar("2")

    def test_float(self):
        assert to_value(1.5) == VScalar("1.5")

    def test_bool(self):
        assert to_value(True) == VScalar("true")
        assert to_value(False) == VScalar("false")

    def test_dict_keeps_order(self):
        v = to_value({"b": "1", "a": "2"})
        assert isinstance(v, VMapping)
        assert list(v.entries) == ["b", "a"]

    def test_nested(self):
        v = to_value({"stats": [{"number": 500, "label": "Workouts"}], "x": None})
        assert v == VMapping({
            "stats": VList([
                VMapping({"number": VScalar("500"), "label": VScalar("Workouts")}),
            ]),
            "x": Empty,
        })

    def test_value_passes_through(self):
        s = VScalar("x")
        assert to_value(s) is s

    def test_other_objects_stringified(self):
        assert to_value(3 + 4j) == VScalar("(3+4j)")


class TestToMapping:
    def test_dict(self):
        assert to_mapping({"a": "1"}) == VMapping({"a": VScalar("1")})

    def test_non_dict_gives_empty_mapping(self):
        assert to_mapping("text") == VMapping()
        assert to_mapping(None) == VMapping()


class TestToPython:
    def test_tree(self):
        tree = VMapping({
            "title": VScalar("Run"),
            "tags": VList([VMapping({"text": VScalar("legs")})]),
            "gone": Empty,
        })
        assert to_python(tree) == {
            "title": "Run",
            "tags": [{"text": "legs"}],
            "gone": None,
        }

    def test_inverse_of_to_value(self):
        data = {"a": "1", "b": ["x", {"c": "d"}], "e": {"f": "g"}}
        assert to_python(to_value(data)) == data

    def test_rejects_non_values(self):
        with pytest.raises(TypeError):
            to_python(object())
