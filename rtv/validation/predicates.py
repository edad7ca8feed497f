"""
Leaf predicates: one pure boolean test per type.

These never look at qualifiers or args; validators layer those on top.
"""

from __future__ import annotations

import inspect
import math
import re
import weakref
from collections.abc import Mapping
from datetime import date
from typing import Any, Callable

from ..types import Type
from ..util import UNDEFINED

MAX_SAFE_INT = 2**53 - 1

_PRIMITIVES = (str, bytes, bool, int, float, complex)


def is_real_number(v: Any) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def is_any(v: Any) -> bool:
    return True


def is_null(v: Any) -> bool:
    return v is None


def is_string(v: Any) -> bool:
    return isinstance(v, str)


def is_boolean(v: Any) -> bool:
    return isinstance(v, bool)


def is_number(v: Any) -> bool:
    """Any int/float except NaN; infinities are allowed."""
    return is_real_number(v) and not (isinstance(v, float) and math.isnan(v))


def is_finite(v: Any) -> bool:
    return is_real_number(v) and (isinstance(v, int) or math.isfinite(v))


def is_int(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def is_safe_int(v: Any) -> bool:
    return is_int(v) and -MAX_SAFE_INT <= v <= MAX_SAFE_INT


def is_float(v: Any) -> bool:
    return isinstance(v, float) and math.isfinite(v)


def is_function(v: Any) -> bool:
    return callable(v)


def is_regexp(v: Any) -> bool:
    return isinstance(v, re.Pattern)


def is_date(v: Any) -> bool:
    return isinstance(v, date)


def is_error(v: Any) -> bool:
    return isinstance(v, BaseException)


def is_awaitable(v: Any) -> bool:
    return inspect.isawaitable(v)


def is_array(v: Any) -> bool:
    return isinstance(v, list)


def is_primitive(v: Any) -> bool:
    return v is None or v is UNDEFINED or isinstance(v, _PRIMITIVES)


def is_any_object(v: Any) -> bool:
    """Anything that isn't a primitive (or absent)."""
    return not is_primitive(v)


def is_object(v: Any) -> bool:
    """A mapping or a class instance, excluding other specialized object types."""
    if not is_any_object(v):
        return False
    if isinstance(v, Mapping):
        return True
    return not (
        isinstance(v, (list, tuple, set, frozenset, re.Pattern, date, BaseException))
        or inspect.isroutine(v)
        or inspect.isclass(v)
        or isinstance(v, weakref.WeakSet)
    )


def is_plain_object(v: Any) -> bool:
    return type(v) is dict


def is_class_object(v: Any) -> bool:
    """An instance of a class that isn't a builtin."""
    return (
        is_object(v)
        and type(v).__module__ != "builtins"
        and not isinstance(v, Mapping)
    )


def is_hash_map(v: Any) -> bool:
    return isinstance(v, dict) and all(isinstance(k, str) for k in v)


def is_map(v: Any) -> bool:
    return isinstance(v, Mapping)


def is_weak_map(v: Any) -> bool:
    return isinstance(v, (weakref.WeakKeyDictionary, weakref.WeakValueDictionary))


def is_set(v: Any) -> bool:
    return isinstance(v, (set, frozenset))


def is_weak_set(v: Any) -> bool:
    return isinstance(v, weakref.WeakSet)


def is_json(v: Any) -> bool:
    """Shallow: the value itself is a JSON type, contents are not inspected."""
    return (
        v is None
        or isinstance(v, (str, bool))
        or is_finite(v)
        or is_array(v)
        or is_plain_object(v)
    )


PREDICATES: dict[Type, Callable[[Any], bool]] = {
    Type.ANY: is_any,
    Type.NULL: is_null,
    Type.STRING: is_string,
    Type.BOOLEAN: is_boolean,
    Type.NUMBER: is_number,
    Type.FINITE: is_finite,
    Type.INT: is_int,
    Type.SAFE_INT: is_safe_int,
    Type.FLOAT: is_float,
    Type.FUNCTION: is_function,
    Type.REGEXP: is_regexp,
    Type.DATE: is_date,
    Type.ERROR: is_error,
    Type.AWAITABLE: is_awaitable,
    Type.ARRAY: is_array,
    Type.ANY_OBJECT: is_any_object,
    Type.OBJECT: is_object,
    Type.PLAIN_OBJECT: is_plain_object,
    Type.CLASS_OBJECT: is_class_object,
    Type.HASH_MAP: is_hash_map,
    Type.MAP: is_map,
    Type.WEAK_MAP: is_weak_map,
    Type.SET: is_set,
    Type.WEAK_SET: is_weak_set,
    Type.JSON: is_json,
}
