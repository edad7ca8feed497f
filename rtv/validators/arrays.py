"""
ARRAY validator.

Args:
    length      exact length, takes precedence over min/max
    min / max   length bounds; max is ignored when below min
    $           typeset every element must match
"""

from __future__ import annotations

from ..context import derive_context
from ..results import RtvSuccess
from ..types import Type
from ..validation.predicates import is_array
from .base import TypeValidator, length_arg


class ArrayValidator(TypeValidator):
    type = Type.ARRAY

    def _validate(self, value, qualifier, args, context):
        if not is_array(value):
            return self._error(value, qualifier, args)

        # only checked elements make it into the MVV
        mvv: list = []
        if not args:
            return RtvSuccess(mvv=mvv)

        length = length_arg(args.get("length"))
        if length is not None:
            valid = len(value) == length
        else:
            lo = length_arg(args.get("min"))
            hi = length_arg(args.get("max"))
            if lo is not None and hi is not None and hi < lo:
                hi = None
            valid = (lo is None or len(value) >= lo) and (hi is None or len(value) <= hi)

        if not valid:
            return self._error(value, qualifier, args)

        typeset = args.get("$")
        if not self.impl.is_typeset(typeset):
            return RtvSuccess(mvv=mvv)

        for idx, elem in enumerate(value):
            result = self.impl.check(elem, typeset, derive_context(context, value, idx))
            if not result.valid:
                return result.prepend(str(idx))
            mvv.append(result.mvv)

        return RtvSuccess(mvv=mvv)
