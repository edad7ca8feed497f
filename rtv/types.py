"""
Type registry: every known type name, which types take args, and which are object types.

Purely declarative. Object types describe a shape through the `$` property of
their args.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from .util import print_value


class Type(StrEnum):
    ANY = "any"
    NULL = "null"
    STRING = "string"
    BOOLEAN = "boolean"
    NUMBER = "number"
    FINITE = "finite"
    INT = "int"
    SAFE_INT = "safe_int"
    FLOAT = "float"
    FUNCTION = "function"
    REGEXP = "regexp"
    DATE = "date"
    ERROR = "error"
    AWAITABLE = "awaitable"
    ARRAY = "array"
    ANY_OBJECT = "any_object"
    OBJECT = "object"
    PLAIN_OBJECT = "plain_object"
    CLASS_OBJECT = "class_object"
    HASH_MAP = "hash_map"
    MAP = "map"
    WEAK_MAP = "weak_map"
    SET = "set"
    WEAK_SET = "weak_set"
    JSON = "json"


@dataclass(frozen=True, slots=True)
class TypeDef:
    """Static definition of a type."""

    name: Type
    has_args: bool = False
    is_object: bool = False
    arg_names: frozenset[str] = frozenset()


_NUMBER_ARGS = frozenset({"oneOf", "min", "max"})
_SHAPE_ARGS = frozenset({"$", "exact"})

# vvv new types go below vvv
_DEFS: dict[Type, TypeDef] = {
    d.name: d
    for d in (
        TypeDef(Type.ANY),
        TypeDef(Type.NULL),
        TypeDef(
            Type.STRING,
            has_args=True,
            arg_names=frozenset({"oneOf", "exp", "expFlags", "min", "max", "partial"}),
        ),
        TypeDef(Type.BOOLEAN),
        TypeDef(Type.NUMBER, has_args=True, arg_names=_NUMBER_ARGS),
        TypeDef(Type.FINITE, has_args=True, arg_names=_NUMBER_ARGS),
        TypeDef(Type.INT, has_args=True, arg_names=_NUMBER_ARGS),
        TypeDef(Type.SAFE_INT, has_args=True, arg_names=_NUMBER_ARGS),
        TypeDef(Type.FLOAT, has_args=True, arg_names=_NUMBER_ARGS),
        TypeDef(Type.FUNCTION),
        TypeDef(Type.REGEXP),
        TypeDef(Type.DATE),
        TypeDef(Type.ERROR),
        TypeDef(Type.AWAITABLE),
        TypeDef(
            Type.ARRAY,
            has_args=True,
            arg_names=frozenset({"$", "length", "min", "max"}),
        ),
        TypeDef(Type.ANY_OBJECT, has_args=True, is_object=True, arg_names=_SHAPE_ARGS),
        TypeDef(Type.OBJECT, has_args=True, is_object=True, arg_names=_SHAPE_ARGS),
        TypeDef(Type.PLAIN_OBJECT, has_args=True, is_object=True, arg_names=_SHAPE_ARGS),
        TypeDef(
            Type.CLASS_OBJECT,
            has_args=True,
            is_object=True,
            arg_names=_SHAPE_ARGS | {"ctor"},
        ),
        # NOTE: not an object type, hash maps have nothing to do with shapes
        TypeDef(
            Type.HASH_MAP,
            has_args=True,
            arg_names=frozenset({"length", "keyExp", "keyFlags", "$values", "deep"}),
        ),
        TypeDef(
            Type.MAP,
            has_args=True,
            arg_names=frozenset({"length", "$keys", "keyExp", "keyFlags", "$values"}),
        ),
        TypeDef(Type.WEAK_MAP),
        TypeDef(Type.SET, has_args=True, arg_names=frozenset({"length", "$values"})),
        TypeDef(Type.WEAK_SET),
        TypeDef(Type.JSON),
    )
}
# ^^^ new types go above ^^^

DEFAULT_OBJECT_TYPE = Type.OBJECT

_NAMES = frozenset(t.value for t in Type)


def is_known(name: Any) -> bool:
    return isinstance(name, str) and name in _NAMES


def verify_type(name: Any) -> Type:
    """Return the Type for `name`, raising ValueError for unknown type names."""
    if not is_known(name):
        raise ValueError(f"Invalid type={print_value(name)}")
    return Type(name)


def get_def(name: Any) -> TypeDef:
    return _DEFS[verify_type(name)]


def has_args(name: Any) -> bool:
    return is_known(name) and _DEFS[Type(name)].has_args


def is_object_type(name: Any) -> bool:
    return is_known(name) and _DEFS[Type(name)].is_object


def arg_types() -> list[Type]:
    """All types that accept args."""
    return [t for t, d in _DEFS.items() if d.has_args]


def object_types() -> list[Type]:
    """All object types."""
    return [t for t, d in _DEFS.items() if d.is_object]
