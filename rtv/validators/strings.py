"""
STRING validator.

Args are applied in order of precedence, the first one present wins:
    exp (+ expFlags)  regular expression, searched anywhere in the value
    oneOf             a string or non-empty list of strings
    min / max         length bounds; `partial` (substring) applies with them
"""

from __future__ import annotations

import re

from ..qualifiers import REQUIRED
from ..results import RtvSuccess
from ..types import Type
from ..validation.predicates import is_string
from .base import TypeValidator, length_arg, regex_flags


class StringValidator(TypeValidator):
    type = Type.STRING

    def _validate(self, value, qualifier, args, context):
        if not is_string(value):
            return self._error(value, qualifier, args)

        # empty strings are only rejected when REQUIRED
        valid = bool(value) or qualifier is not REQUIRED

        if args:
            exp = args.get("exp")
            one_of = args.get("oneOf")

            if is_string(exp):
                flags = regex_flags(args.get("expFlags"))
                valid = re.search(exp, value, flags) is not None
            elif is_string(one_of) or (isinstance(one_of, list) and one_of):
                choices = one_of if isinstance(one_of, list) else [one_of]
                valid = any(is_string(c) and value == c for c in choices)
            else:
                min_len = length_arg(args.get("min"))
                max_len = length_arg(args.get("max"))
                if min_len is not None and max_len is not None and max_len < min_len:
                    max_len = None

                if min_len is not None or max_len is not None:
                    valid = (min_len is None or len(value) >= min_len) and (
                        max_len is None or len(value) <= max_len
                    )

                partial = args.get("partial")
                if valid and is_string(partial):
                    valid = partial in value

        if valid:
            return RtvSuccess(mvv=value)
        return self._error(value, qualifier, args)
