"""
Qualifiers govern how absent values are treated, independent of type.

- REQUIRED: the value must exist and cannot be None
- EXPECTED: the value must exist but may be None
- OPTIONAL: the value may be None or UNDEFINED
- TRUTHY: any falsy value is permitted
"""

from __future__ import annotations

import math
from enum import StrEnum
from typing import Any

from .util import UNDEFINED, print_value


class Qualifier(StrEnum):
    REQUIRED = "!"
    EXPECTED = "+"
    OPTIONAL = "?"
    TRUTHY = "-"


REQUIRED = Qualifier.REQUIRED
EXPECTED = Qualifier.EXPECTED
OPTIONAL = Qualifier.OPTIONAL
TRUTHY = Qualifier.TRUTHY

DEFAULT_QUALIFIER = REQUIRED

_VALUES = frozenset(q.value for q in Qualifier)


def is_qualifier(value: Any) -> bool:
    return isinstance(value, str) and value in _VALUES


def verify_qualifier(value: Any) -> Qualifier:
    """Return the Qualifier for `value`, raising ValueError if it isn't one."""
    if not is_qualifier(value):
        raise ValueError(f"Invalid qualifier={print_value(value)}")
    return Qualifier(value)


def is_falsy(value: Any) -> bool:
    """
    Falsy in the sense of scalars only: UNDEFINED, None, False, 0, 0.0, NaN, "".

    Empty containers are not falsy.
    """
    if value is None or value is UNDEFINED:
        return True
    if isinstance(value, float):
        return value == 0 or math.isnan(value)
    if isinstance(value, (bool, int, str)):
        return not value
    return False


def value_permitted(value: Any, qualifier: Any = DEFAULT_QUALIFIER) -> bool:
    """Determine if an absent-like `value` passes on the qualifier alone."""
    q = verify_qualifier(qualifier)

    if q is TRUTHY:
        return is_falsy(value)
    if q is OPTIONAL:
        return value is None or value is UNDEFINED
    if q is EXPECTED:
        return value is None
    return False
