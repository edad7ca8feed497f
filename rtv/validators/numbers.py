"""
Validators for the number family: NUMBER, FINITE, INT, SAFE_INT, FLOAT.

Args (each ignored unless itself a valid value of the type):
    oneOf       a number or non-empty list of numbers; takes precedence over bounds
    min / max   inclusive bounds; max is ignored when below min
"""

from __future__ import annotations

from ..results import RtvSuccess
from ..types import Type
from ..validation.predicates import PREDICATES
from .base import TypeValidator


class NumericValidator(TypeValidator):
    def _validate(self, value, qualifier, args, context):
        is_type = PREDICATES[self.type]
        valid = is_type(value)

        if valid and args:
            one_of = args.get("oneOf")
            if is_type(one_of) or (isinstance(one_of, list) and one_of):
                choices = one_of if isinstance(one_of, list) else [one_of]
                valid = any(is_type(c) and value == c for c in choices)
            else:
                lo = args.get("min")
                hi = args.get("max")
                lo = lo if is_type(lo) else None
                if lo is not None:
                    valid = value >= lo
                if valid and is_type(hi) and (lo is None or hi >= lo):
                    valid = value <= hi

        if valid:
            return RtvSuccess(mvv=value)
        return self._error(value, qualifier, args)


class NumberValidator(NumericValidator):
    type = Type.NUMBER


class FiniteValidator(NumericValidator):
    type = Type.FINITE


class IntValidator(NumericValidator):
    type = Type.INT


class SafeIntValidator(NumericValidator):
    type = Type.SAFE_INT


class FloatValidator(NumericValidator):
    type = Type.FLOAT
