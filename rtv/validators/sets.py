"""
SET validator (set or frozenset).

Args:
    length      exact number of elements
    $values     typeset every element must match
"""

from __future__ import annotations

from ..context import derive_context
from ..results import RtvSuccess
from ..types import Type
from ..util import print_value
from ..validation.predicates import is_set
from .base import TypeValidator, hashable_or, length_arg


class SetValidator(TypeValidator):
    type = Type.SET

    def _validate(self, value, qualifier, args, context):
        if not is_set(value):
            return self._error(value, qualifier, args)

        mvv: set = set()
        if args:
            length = length_arg(args.get("length"))
            if length is not None and len(value) != length:
                return self._error(value, qualifier, args)

            ts_values = args.get("$values")
            if self.impl.is_typeset(ts_values):
                for elem in value:
                    # set elements have no key in their parent
                    result = self.impl.check(
                        elem, ts_values, derive_context(context, value, None)
                    )
                    if not result.valid:
                        return result.prepend(print_value(elem))
                    mvv.add(hashable_or(result.mvv, elem))

        return RtvSuccess(mvv=frozenset(mvv) if isinstance(value, frozenset) else mvv)
