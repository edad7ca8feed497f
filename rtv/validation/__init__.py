"""
Pure type predicates.

Usage:
    from rtv.validation import is_finite, PREDICATES

    is_finite(float("inf"))          # False
    PREDICATES[Type.STRING]("a")     # True
"""

from .predicates import (
    MAX_SAFE_INT,
    PREDICATES,
    is_any,
    is_any_object,
    is_array,
    is_awaitable,
    is_boolean,
    is_class_object,
    is_date,
    is_error,
    is_finite,
    is_float,
    is_function,
    is_hash_map,
    is_int,
    is_json,
    is_map,
    is_null,
    is_number,
    is_object,
    is_plain_object,
    is_primitive,
    is_real_number,
    is_regexp,
    is_safe_int,
    is_set,
    is_string,
    is_weak_map,
    is_weak_set,
)

__all__ = [
    "MAX_SAFE_INT",
    "PREDICATES",
    "is_any",
    "is_any_object",
    "is_array",
    "is_awaitable",
    "is_boolean",
    "is_class_object",
    "is_date",
    "is_error",
    "is_finite",
    "is_float",
    "is_function",
    "is_hash_map",
    "is_int",
    "is_json",
    "is_map",
    "is_null",
    "is_number",
    "is_object",
    "is_plain_object",
    "is_primitive",
    "is_real_number",
    "is_regexp",
    "is_safe_int",
    "is_set",
    "is_string",
    "is_weak_map",
    "is_weak_set",
]
