"""
Tests for the type registry and the leaf predicates.
"""

import math
import re
import weakref
from collections import OrderedDict
from datetime import date, datetime

import pytest

from rtv.types import (
    DEFAULT_OBJECT_TYPE,
    Type,
    arg_types,
    get_def,
    has_args,
    is_known,
    is_object_type,
    object_types,
    verify_type,
)
from rtv.util import UNDEFINED, own_keys, print_value, read_prop
from rtv.validation import (
    MAX_SAFE_INT,
    PREDICATES,
    is_any_object,
    is_class_object,
    is_hash_map,
    is_json,
    is_number,
    is_object,
    is_plain_object,
    is_primitive,
)


class Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y


class TestTypeRegistry:
    def test_is_known(self):
        assert is_known("string")
        assert is_known(Type.HASH_MAP)
        assert not is_known("foo")
        assert not is_known(None)

    def test_verify_type(self):
        assert verify_type("finite") is Type.FINITE
        with pytest.raises(ValueError, match="Invalid type"):
            verify_type("symbol")

    def test_has_args(self):
        assert has_args(Type.STRING)
        assert has_args(Type.ARRAY)
        assert not has_args(Type.BOOLEAN)
        assert not has_args("unknown")

    def test_object_types(self):
        assert object_types() == [
            Type.ANY_OBJECT,
            Type.OBJECT,
            Type.PLAIN_OBJECT,
            Type.CLASS_OBJECT,
        ]
        assert is_object_type(Type.OBJECT)
        assert not is_object_type(Type.MAP)
        assert not is_object_type(Type.HASH_MAP)
        assert DEFAULT_OBJECT_TYPE is Type.OBJECT

    def test_arg_types(self):
        assert Type.SET in arg_types()
        assert Type.JSON not in arg_types()

    def test_arg_names(self):
        assert "ctor" in get_def(Type.CLASS_OBJECT).arg_names
        assert "ctor" not in get_def(Type.OBJECT).arg_names

    def test_every_type_has_predicate(self):
        assert set(PREDICATES) == set(Type)


class TestPredicates:
    def test_numbers(self):
        assert is_number(float("inf"))
        assert not is_number(float("nan"))
        assert not is_number(True)
        assert PREDICATES[Type.FINITE](1.5)
        assert not PREDICATES[Type.FINITE](math.inf)
        assert PREDICATES[Type.INT](3)
        assert not PREDICATES[Type.INT](3.0)
        assert PREDICATES[Type.SAFE_INT](MAX_SAFE_INT)
        assert not PREDICATES[Type.SAFE_INT](MAX_SAFE_INT + 1)
        assert PREDICATES[Type.FLOAT](0.5)
        assert not PREDICATES[Type.FLOAT](1)

    def test_primitives(self):
        for value in (None, UNDEFINED, "a", b"a", 1, 1.5, True):
            assert is_primitive(value)
            assert not is_any_object(value)
        assert is_any_object([])

    def test_object(self):
        assert is_object({})
        assert is_object(Point(1, 2))
        assert not is_object([])
        assert not is_object(re.compile("a"))
        assert not is_object(date.today())
        assert not is_object(ValueError())
        assert not is_object(print)
        assert not is_object(Point)

    def test_plain_object(self):
        assert is_plain_object({})
        assert not is_plain_object(OrderedDict())
        assert not is_plain_object(Point(1, 2))

    def test_class_object(self):
        assert is_class_object(Point(1, 2))
        assert not is_class_object({})
        assert not is_class_object(weakref.WeakSet())

    def test_hash_map(self):
        assert is_hash_map({"a": 1})
        assert not is_hash_map({1: "a"})

    def test_dates(self):
        assert PREDICATES[Type.DATE](datetime.now())

    def test_json(self):
        assert is_json(None)
        assert is_json([1, {"a": 2}])
        assert not is_json(float("nan"))
        assert not is_json({1, 2})


class TestPrintValue:
    def test_scalars(self):
        assert print_value(None) == "None"
        assert print_value(UNDEFINED) == "undefined"
        assert print_value("a") == '"a"'
        assert print_value(1) == "1"

    def test_containers(self):
        assert print_value([1, "a"]) == '[1, "a"]'
        assert print_value({"a": None}) == '{"a": null}'

    def test_typesets(self):
        assert print_value(["!", Type.ANY, print], is_typeset=True) == (
            '["!", "any", "<validator>"]'
        )
        assert print_value(
            [Type.CLASS_OBJECT, {"ctor": Point}], is_typeset=True
        ) == '["class_object", {"ctor": "<constructor>"}]'


class TestPropertyAccess:
    def test_read_prop(self):
        assert read_prop({"a": 1}, "a") == 1
        assert read_prop({"a": 1}, "b") is UNDEFINED
        assert read_prop(Point(1, 2), "y") == 2
        assert read_prop(Point(1, 2), "z") is UNDEFINED
        assert read_prop(Point(1, 2), 0) is UNDEFINED

    def test_own_keys(self):
        assert own_keys({"b": 1, "a": 2}) == ["b", "a"]
        assert own_keys(Point(1, 2)) == ["x", "y"]
        assert own_keys(1) == []

    def test_own_keys_slots(self):
        class Slotted:
            __slots__ = ("a", "b")

            def __init__(self):
                self.a = 1

        class Mixed(Slotted):
            def __init__(self):
                super().__init__()
                self.c = 3

        assert own_keys(Slotted()) == ["a"]
        assert own_keys(Mixed()) == ["c", "a"]
