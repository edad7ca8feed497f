"""
Utilities shared by the normalizer, engine and validators.

Provides the UNDEFINED sentinel, the diagnostic printer and safe property access.
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping, Set
from typing import Any


class _Undefined:
    """Marks a value that does not exist (e.g. a property missing from a shape)."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "undefined"

    def __copy__(self) -> _Undefined:
        return self

    def __deepcopy__(self, memo: dict) -> _Undefined:
        return self


UNDEFINED = _Undefined()


def _printable(value: Any, key: Any, in_list: bool, is_typeset: bool) -> Any:
    """Convert a value into something json.dumps() accepts."""
    if value is None or isinstance(value, (bool, int, str)):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else str(value)
    if value is UNDEFINED:
        return "undefined"
    if callable(value) and not isinstance(value, type):
        if is_typeset and in_list:
            return "<validator>"
        return "<function>"
    if isinstance(value, type):
        if is_typeset and key == "ctor":
            return "<constructor>"
        return f"<class {value.__name__}>"
    if isinstance(value, Mapping):
        return {
            str(k): _printable(v, k, False, is_typeset) for k, v in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [_printable(v, None, True, is_typeset) for v in value]
    if isinstance(value, Set):
        return [_printable(v, None, True, is_typeset) for v in value]
    return repr(value)


def print_value(value: Any, *, is_typeset: bool = False) -> str:
    """
    Render a value for error messages.

    Never used for control flow. Strings are double-quoted, scalars printed bare,
    and containers rendered as JSON.

    Args:
        value: Value to print
        is_typeset: If True, callables inside lists print as <validator> and
            `ctor` args print as <constructor>.
    """
    if value is None:
        return "None"
    if value is UNDEFINED:
        return "undefined"
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, (bool, int, float)):
        return repr(value)
    if callable(value) and not isinstance(value, type):
        return "<validator>" if is_typeset else "<function>"

    return json.dumps(_printable(value, None, False, is_typeset))


def own_keys(obj: Any) -> list[Any]:
    """Own keys of a mapping or instance, in insertion order."""
    if isinstance(obj, Mapping):
        return list(obj.keys())

    keys = list(getattr(obj, "__dict__", {}))
    for cls in reversed(type(obj).__mro__):
        slots = cls.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__") or name in keys:
                continue
            # unassigned slots are not own keys
            if hasattr(obj, name):
                keys.append(name)
    return keys


def read_prop(obj: Any, key: Any) -> Any:
    """Read a property from a mapping or object, UNDEFINED if missing."""
    if isinstance(obj, Mapping):
        return obj[key] if key in obj else UNDEFINED
    if not isinstance(key, str):
        return UNDEFINED
    return getattr(obj, key, UNDEFINED)
