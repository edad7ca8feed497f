"""
Validators for keyed collections: MAP and HASH_MAP.

MAP args:
    length      exact number of entries
    $keys       typeset every key must match
    keyExp      regular expression every key must match; only with string keys
                (no `$keys`, or a `$keys` typeset of just STRING)
    keyFlags    flag letters for keyExp
    $values     typeset every value must match

HASH_MAP (a dict with string keys) takes the same args minus `$keys`, plus:
    deep        a value failing `$values` may instead be a nested hash map
                with the same args
"""

from __future__ import annotations

import re

from ..context import derive_context
from ..results import RtvSuccess
from ..types import Type
from ..util import print_value
from ..validation.predicates import is_hash_map, is_map, is_string
from .base import TypeValidator, hashable_or, length_arg, regex_flags


class MapValidator(TypeValidator):
    type = Type.MAP

    def _is_string_typeset(self, typeset) -> bool:
        fqts = self.impl.fully_qualify(typeset)
        return len(fqts) == 2 and fqts[1] == Type.STRING

    def _validate(self, value, qualifier, args, context):
        if not is_map(value):
            return self._error(value, qualifier, args)

        mvv: dict = {}
        if not args:
            return RtvSuccess(mvv=mvv)

        length = length_arg(args.get("length"))
        if length is not None and len(value) != length:
            return self._error(value, qualifier, args)

        ts_keys = args.get("$keys")
        ts_keys = ts_keys if self.impl.is_typeset(ts_keys) else None
        ts_values = args.get("$values")
        ts_values = ts_values if self.impl.is_typeset(ts_values) else None

        key_exp = args.get("keyExp")
        if not is_string(key_exp) or not (
            ts_keys is None or self._is_string_typeset(ts_keys)
        ):
            key_exp = None

        if ts_keys is None and ts_values is None and key_exp is None:
            return RtvSuccess(mvv=mvv)

        key_re = re.compile(key_exp, regex_flags(args.get("keyFlags"))) if key_exp else None

        for key, item in value.items():
            mvv_key, mvv_value = key, item

            if ts_keys is not None:
                result = self.impl.check(key, ts_keys, derive_context(context, value, None))
                if not result.valid:
                    return result.prepend(f"key={print_value(key)}")
                mvv_key = hashable_or(result.mvv, key)

            if key_re is not None and not (is_string(key) and key_re.search(key)):
                return self._error(
                    value, qualifier, args, path=[f"key={print_value(key)}"]
                )

            if ts_values is not None:
                result = self.impl.check(
                    item, ts_values, derive_context(context, value, key)
                )
                if not result.valid:
                    return result.prepend(f"valueKey={print_value(key)}")
                mvv_value = result.mvv

            mvv[mvv_key] = mvv_value

        return RtvSuccess(mvv=mvv)


class HashMapValidator(TypeValidator):
    type = Type.HASH_MAP

    def _validate(self, value, qualifier, args, context):
        if not is_hash_map(value):
            return self._error(value, qualifier, args)

        mvv: dict = {}
        if not args:
            return RtvSuccess(mvv=mvv)

        length = length_arg(args.get("length"))
        if length is not None and len(value) != length:
            return self._error(value, qualifier, args)

        ts_values = args.get("$values")
        ts_values = ts_values if self.impl.is_typeset(ts_values) else None
        key_exp = args.get("keyExp")
        key_re = (
            re.compile(key_exp, regex_flags(args.get("keyFlags")))
            if is_string(key_exp)
            else None
        )

        if ts_values is None and key_re is None:
            return RtvSuccess(mvv=mvv)

        for key, item in value.items():
            if key_re is not None and not key_re.search(key):
                return self._error(
                    value, qualifier, args, path=[f"key={print_value(key)}"]
                )

            if ts_values is None:
                mvv[key] = item
                continue

            item_context = derive_context(context, value, key)
            result = self.impl.check(item, ts_values, item_context)
            if not result.valid and args.get("deep"):
                result = self.impl.check(item, [qualifier, self.type, args], item_context)
            if not result.valid:
                return result.prepend(f"valueKey={print_value(key)}")
            mvv[key] = result.mvv

        return RtvSuccess(mvv=mvv)
