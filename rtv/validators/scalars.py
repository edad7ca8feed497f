"""
Validators for types whose check is their predicate alone.
"""

from ..types import Type
from .base import PredicateValidator


class AnyValidator(PredicateValidator):
    type = Type.ANY


class NullValidator(PredicateValidator):
    type = Type.NULL


class BooleanValidator(PredicateValidator):
    type = Type.BOOLEAN


class FunctionValidator(PredicateValidator):
    type = Type.FUNCTION


class RegExpValidator(PredicateValidator):
    type = Type.REGEXP


class DateValidator(PredicateValidator):
    type = Type.DATE


class ErrorValidator(PredicateValidator):
    type = Type.ERROR


class AwaitableValidator(PredicateValidator):
    type = Type.AWAITABLE


class WeakMapValidator(PredicateValidator):
    type = Type.WEAK_MAP


class WeakSetValidator(PredicateValidator):
    type = Type.WEAK_SET


class JsonValidator(PredicateValidator):
    type = Type.JSON
