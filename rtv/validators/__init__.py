"""
Default type validators, one per type.

Usage:
    from rtv.engine import Engine
    from rtv.validators import default_validators

    engine = Engine().configure(default_validators())
"""

from .arrays import ArrayValidator
from .base import PredicateValidator, TypeValidator
from .maps import HashMapValidator, MapValidator
from .numbers import (
    FiniteValidator,
    FloatValidator,
    IntValidator,
    NumberValidator,
    NumericValidator,
    SafeIntValidator,
)
from .objects import (
    AnyObjectValidator,
    ClassObjectValidator,
    ObjectValidator,
    PlainObjectValidator,
    ShapeValidator,
)
from .scalars import (
    AnyValidator,
    AwaitableValidator,
    BooleanValidator,
    DateValidator,
    ErrorValidator,
    FunctionValidator,
    JsonValidator,
    NullValidator,
    RegExpValidator,
    WeakMapValidator,
    WeakSetValidator,
)
from .sets import SetValidator
from .strings import StringValidator

VALIDATOR_CLASSES: tuple[type[TypeValidator], ...] = (
    AnyValidator,
    NullValidator,
    StringValidator,
    BooleanValidator,
    NumberValidator,
    FiniteValidator,
    IntValidator,
    SafeIntValidator,
    FloatValidator,
    FunctionValidator,
    RegExpValidator,
    DateValidator,
    ErrorValidator,
    AwaitableValidator,
    ArrayValidator,
    AnyObjectValidator,
    ObjectValidator,
    PlainObjectValidator,
    ClassObjectValidator,
    HashMapValidator,
    MapValidator,
    WeakMapValidator,
    SetValidator,
    WeakSetValidator,
    JsonValidator,
)


def default_validators() -> list[TypeValidator]:
    """Fresh, unconfigured instances of every default validator."""
    return [cls() for cls in VALIDATOR_CLASSES]


__all__ = [
    "VALIDATOR_CLASSES",
    "default_validators",
    # Bases
    "TypeValidator",
    "PredicateValidator",
    "NumericValidator",
    "ShapeValidator",
    # Validators
    "AnyValidator",
    "NullValidator",
    "StringValidator",
    "BooleanValidator",
    "NumberValidator",
    "FiniteValidator",
    "IntValidator",
    "SafeIntValidator",
    "FloatValidator",
    "FunctionValidator",
    "RegExpValidator",
    "DateValidator",
    "ErrorValidator",
    "AwaitableValidator",
    "ArrayValidator",
    "AnyObjectValidator",
    "ObjectValidator",
    "PlainObjectValidator",
    "ClassObjectValidator",
    "HashMapValidator",
    "MapValidator",
    "WeakMapValidator",
    "SetValidator",
    "WeakSetValidator",
    "JsonValidator",
]
