"""
Validators for object types: ANY_OBJECT, OBJECT, PLAIN_OBJECT, CLASS_OBJECT.

Args:
    $       shape: property name -> typeset (falsy typesets are skipped)
    exact   reject properties the shape doesn't describe; defaults to the
            context's `exact_shapes` option
    ctor    (CLASS_OBJECT only) class the value must be an instance of
"""

from __future__ import annotations

import inspect

from ..context import default_options, derive_context
from ..qualifiers import is_falsy
from ..results import RtvSuccess
from ..types import Type
from ..typeset import is_shape
from ..util import UNDEFINED, own_keys, read_prop
from ..validation.predicates import PREDICATES
from .base import TypeValidator


class ShapeValidator(TypeValidator):
    def _matches(self, value, args) -> bool:
        return PREDICATES[self.type](value)

    def _exact(self, args, context) -> bool:
        if "exact" in args:
            return bool(args["exact"])
        options = context.options if context is not None else default_options()
        return options.exact_shapes

    def _validate(self, value, qualifier, args, context):
        if not self._matches(value, args):
            return self._error(value, qualifier, args)

        shape = args.get("$") if args else None
        if not is_shape(shape):
            # no shape, nothing checked
            return RtvSuccess(mvv={})

        if self._exact(args, context):
            extra = [k for k in own_keys(value) if k not in shape]
            if extra:
                props = ", ".join(f"'{k}'" for k in extra)
                return self._error(
                    value,
                    qualifier,
                    args,
                    ValueError(f"Found unexpected properties in value: {props}"),
                )

        mvv: dict = {}
        for prop, typeset in shape.items():
            if is_falsy(typeset):
                continue

            result = self.impl.check(
                read_prop(value, prop), typeset, derive_context(context, value, prop)
            )
            if not result.valid:
                return result.prepend(str(prop))
            if result.mvv is not UNDEFINED:
                mvv[prop] = result.mvv

        return RtvSuccess(mvv=mvv)


class AnyObjectValidator(ShapeValidator):
    type = Type.ANY_OBJECT


class ObjectValidator(ShapeValidator):
    type = Type.OBJECT


class PlainObjectValidator(ShapeValidator):
    type = Type.PLAIN_OBJECT


class ClassObjectValidator(ShapeValidator):
    type = Type.CLASS_OBJECT

    def _matches(self, value, args) -> bool:
        if not super()._matches(value, args):
            return False
        ctor = args.get("ctor") if args else None
        return not inspect.isclass(ctor) or isinstance(value, ctor)
