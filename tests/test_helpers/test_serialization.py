"""Tests for the JSON helpers."""

import json

import pytest

from selectorkit.serialization import from_json_text, to_json_text
from selectorkit.shapes import Rectangle


class Circle:
    def __init__(self, radius: float) -> None:
        raise AssertionError("__init__ must not be called")

    def diameter(self) -> float:
        return self.radius * 2


# ---------------------------------------------------------------------------
# to_json_text
# ---------------------------------------------------------------------------


class TestToJsonText:
    def test_list(self) -> None:
        assert to_json_text([1, 2, 3]) == "[1,2,3]"

    def test_object_keeps_insertion_order(self) -> None:
        assert to_json_text({"width": 10, "height": 20}) == '{"width":10,"height":20}'

    def test_nested(self) -> None:
        assert to_json_text({"a": [1, {"b": None}]}) == '{"a":[1,{"b":null}]}'

    def test_dataclass(self) -> None:
        assert to_json_text(Rectangle(10, 20)) == '{"width":10,"height":20}'

    def test_indent(self) -> None:
        assert to_json_text({"a": 1}, indent=2) == '{\n  "a": 1\n}'

    def test_non_finite_floats_become_null(self) -> None:
        value = {"a": float("nan"), "b": [float("inf"), -float("inf")], "c": 1.5}
        assert to_json_text(value) == '{"a":null,"b":[null,null],"c":1.5}'

    def test_non_finite_dataclass_field(self) -> None:
        assert to_json_text(Rectangle(float("nan"), 2)) == '{"width":null,"height":2}'

    def test_unserializable(self) -> None:
        with pytest.raises(TypeError):
            to_json_text({1, 2})


# ---------------------------------------------------------------------------
# from_json_text
# ---------------------------------------------------------------------------


class TestFromJsonText:
    def test_round_trip_restores_methods(self) -> None:
        text = to_json_text({"width": 10, "height": 20})
        r = from_json_text(Rectangle, text)
        assert isinstance(r, Rectangle)
        assert vars(r) == {"width": 10, "height": 20}
        assert r.area() == 200

    def test_init_is_not_called(self) -> None:
        c = from_json_text(Circle, '{"radius":10}')
        assert c.diameter() == 20

    def test_fields_are_not_validated(self) -> None:
        r = from_json_text(Rectangle, '{"width":2,"height":3,"colour":"red"}')
        assert r.colour == "red"
        assert r.area() == 6

    def test_serializes_back(self) -> None:
        c = from_json_text(Circle, '{"radius":10}')
        assert to_json_text(c) == '{"radius":10}'

    def test_non_object_root(self) -> None:
        with pytest.raises(TypeError):
            from_json_text(Rectangle, "[1,2,3]")

    def test_prototype_must_be_class(self) -> None:
        with pytest.raises(TypeError):
            from_json_text(Rectangle(1, 2), '{"width":1}')  # type: ignore[arg-type]

    def test_malformed_json(self) -> None:
        with pytest.raises(json.JSONDecodeError):
            from_json_text(Rectangle, "{width: 1}")
