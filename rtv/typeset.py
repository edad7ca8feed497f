"""
Typeset grammar and normalization.

A typeset is one of:

    Type.STRING                                   # type name
    lambda v: v > 0                               # custom validator, implies ANY
    {"name": Type.STRING}                         # shape, implies OBJECT
    [Qualifier.OPTIONAL, Type.STRING, {"min": 1}, Type.FINITE, validator]

A fully-qualified typeset is always a list: [qualifier, type, args?, ..., validator?].

Usage:
    fully_qualify({"id": Type.FINITE})
    # ['!', 'object', {'$': {'id': 'finite'}}]

    for subtype in iter_types([Type.STRING, Type.FINITE, {"min": 0}]):
        ...  # ['string'], ['finite', {'min': 0}]
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from enum import Enum, auto
from typing import Any

from .qualifiers import (
    DEFAULT_QUALIFIER,
    Qualifier,
    is_falsy,
    is_qualifier,
    verify_qualifier,
)
from .types import (
    DEFAULT_OBJECT_TYPE,
    Type,
    get_def,
    has_args,
    is_known,
    is_object_type,
    verify_type,
)
from .util import print_value

logger = logging.getLogger(__name__)


class TypesetKind(Enum):
    TYPE = auto()
    VALIDATOR = auto()
    SHAPE = auto()
    LIST = auto()


def is_custom_validator(v: Any) -> bool:
    return callable(v) and not isinstance(v, str)


def is_shape(v: Any) -> bool:
    return isinstance(v, Mapping)


def is_type_args(v: Any) -> bool:
    return isinstance(v, Mapping)


def classify(typeset: Any) -> TypesetKind:
    """
    Determine which form a typeset takes.

    Only the outer form is inspected; use is_typeset() to validate the grammar.
    """
    match typeset:
        case str():
            return TypesetKind.TYPE
        case Mapping():
            return TypesetKind.SHAPE
        case list():
            return TypesetKind.LIST
        case _ if is_custom_validator(typeset):
            return TypesetKind.VALIDATOR

    raise ValueError(
        f"Invalid typeset={print_value(typeset, is_typeset=True)}: "
        "must be a type, shape, custom validator, or list"
    )


def _shape_failure(shape: Mapping, fully_qualified: bool) -> str | None:
    for prop, typeset in shape.items():
        if is_falsy(typeset):
            continue  # unspecified property typesets are ignored
        reason = typeset_failure(typeset, deep=True, fully_qualified=fully_qualified)
        if reason:
            return f"Invalid typeset for property={print_value(prop)}: {reason}"
    return None


def _args_failure(type_: Type, args: Mapping, fully_qualified: bool) -> str | None:
    """Deep-verify the nested typesets carried by type args."""
    if is_object_type(type_):
        if "$" not in args:
            return None
        if not is_shape(args["$"]):
            return f'Expecting a valid shape descriptor for type="{type_}"'
        return _shape_failure(args["$"], fully_qualified)

    match type_:
        case Type.ARRAY:
            keys = ("$",)
        case Type.MAP:
            keys = ("$keys", "$values")
        case Type.SET | Type.HASH_MAP:
            keys = ("$values",)
        case _:
            keys = ()

    for key in keys:
        if key in args:
            reason = typeset_failure(
                args[key], deep=True, fully_qualified=fully_qualified
            )
            if reason:
                return f'Invalid typeset in args.{key} for type="{type_}": {reason}'
    return None


def _list_failure(
    typeset: list, deep: bool, fully_qualified: bool
) -> str | None:
    if not typeset:
        return "Expecting a non-empty list"

    has_qualifier = False
    has_validator = False
    cur_type: Type | None = None
    cur_has_args = False

    for i, rule in enumerate(typeset):
        shape_position = i == 0 or (i == 1 and has_qualifier)

        if has_validator:
            return f"Unexpected value at index={i}: Expecting the custom validator to be the last element"

        if i == 0 and is_qualifier(rule):
            has_qualifier = True
            continue

        if isinstance(rule, str):
            if is_qualifier(rule):
                return f"Unexpected qualifier at index={i}: Expecting a qualifier only in the first position"
            if not is_known(rule):
                return f"Unexpected value at index={i}: Unknown type={print_value(rule)}"
            cur_type, cur_has_args = Type(rule), False

        elif is_shape(rule) and shape_position and not fully_qualified:
            cur_type, cur_has_args = DEFAULT_OBJECT_TYPE, True
            if deep:
                reason = _shape_failure(rule, fully_qualified)
                if reason:
                    return f"Unexpected value at index={i}: {reason}"

        elif is_type_args(rule):
            if cur_type is None or not has_args(cur_type) or cur_has_args:
                return f"Unexpected value at index={i}: Expecting object (type args) for a preceding type that accepts args"
            cur_has_args = True
            if deep:
                reason = _args_failure(cur_type, rule, fully_qualified)
                if reason:
                    return f"Unexpected value at index={i}: {reason}"

        elif is_custom_validator(rule):
            if fully_qualified and cur_type is None:
                return f"Unexpected value at index={i}: Expecting a type before the custom validator"
            has_validator = True

        elif isinstance(rule, list):
            if fully_qualified:
                return f"Unexpected value at index={i}: Expecting nested list typesets as {Type.ARRAY} args"
            cur_type, cur_has_args = Type.ARRAY, True
            if deep:
                reason = typeset_failure(rule, deep=True)
                if reason:
                    return f"Unexpected value at index={i}: {reason}"

        else:
            expecting = "shape" if shape_position else "type args"
            return f"Unexpected value at index={i}: Expecting object ({expecting})"

    if fully_qualified and not has_qualifier:
        return "Expecting a qualifier in the first position"
    if cur_type is None and not has_validator:
        return "Expecting at least one type"
    return None


def typeset_failure(
    candidate: Any, *, deep: bool = False, fully_qualified: bool = False
) -> str | None:
    """
    Explain why `candidate` is not a valid typeset.

    Returns:
        None if valid, otherwise a description of the first rule violated
    """
    if isinstance(candidate, list):
        return _list_failure(candidate, deep, fully_qualified)
    if fully_qualified:
        return "Expecting a fully-qualified typeset to be a list"
    if isinstance(candidate, str):
        return None if is_known(candidate) else f"Unknown type={print_value(candidate)}"
    if is_shape(candidate):
        return _shape_failure(candidate, fully_qualified) if deep else None
    if is_custom_validator(candidate):
        return None
    return f"Unexpected value={print_value(candidate)}: Expecting a type, shape, custom validator, or list"


def is_typeset(
    candidate: Any, *, deep: bool = False, fully_qualified: bool = False
) -> bool:
    """
    Validate typeset grammar.

    Args:
        candidate: Value to check
        deep: Also validate nested shapes and typesets carried in type args
        fully_qualified: Require the canonical [qualifier, type, args?, validator?] form
    """
    return typeset_failure(candidate, deep=deep, fully_qualified=fully_qualified) is None


def verify_typeset(candidate: Any, **kwargs: bool) -> None:
    """Raise ValueError if `candidate` is not a valid typeset."""
    reason = typeset_failure(candidate, **kwargs)
    if reason:
        raise ValueError(
            f"Invalid typeset={print_value(candidate, is_typeset=True)}: {reason}"
        )


def get_qualifier(typeset: Any) -> Qualifier:
    """The qualifier at the root of a typeset, REQUIRED when none is given."""
    if isinstance(typeset, list) and typeset and is_qualifier(typeset[0]):
        return Qualifier(typeset[0])
    return DEFAULT_QUALIFIER


def to_typeset(
    type_: Any,
    qualifier: Any = None,
    args: Mapping | None = None,
    fully_qualified: bool = False,
) -> Any:
    """
    Build the simplest typeset for a type, qualifier and args.

    Usage:
        to_typeset(Type.STRING)                          # 'string'
        to_typeset(Type.STRING, args={"min": 1})         # ['string', {'min': 1}]
        to_typeset(Type.STRING, Qualifier.OPTIONAL)      # ['?', 'string']
        to_typeset(Type.STRING, fully_qualified=True)    # ['!', 'string']
    """
    t = verify_type(type_)
    q = DEFAULT_QUALIFIER if qualifier is None else verify_qualifier(qualifier)

    if args is not None:
        if not has_args(t):
            raise ValueError(f"Type={print_value(t)} does not accept args")
        if not is_type_args(args):
            raise ValueError(f"Invalid type args={print_value(args)}")

    tail = [t] if args is None else [t, args]

    if fully_qualified or q is not DEFAULT_QUALIFIER:
        return [q, *tail]
    return t if args is None else tail


def fully_qualify(typeset: Any, qualifier: Any = None) -> list:
    """
    Convert a typeset into its fully-qualified form.

    Shallow and non-mutating: the result is always a new list. Nested shapes and
    typesets (in args) are left as they are.

    Args:
        typeset: Valid typeset
        qualifier: Replaces the typeset's own qualifier when given
    """
    verify_typeset(typeset)
    if qualifier is not None:
        qualifier = verify_qualifier(qualifier)

    kind = classify(typeset)
    if kind is not TypesetKind.LIST:
        q = qualifier or DEFAULT_QUALIFIER
        match kind:
            case TypesetKind.SHAPE:
                return [q, DEFAULT_OBJECT_TYPE, {"$": typeset}]
            case TypesetKind.VALIDATOR:
                return [q, Type.ANY, typeset]
            case _:
                return [q, Type(typeset)]

    fqts: list = []
    has_qualifier = False
    cur_type: Type | None = None

    for i, rule in enumerate(typeset):
        if i == 0:
            if is_qualifier(rule):
                has_qualifier = True
                fqts.append(qualifier or Qualifier(rule))
                continue
            fqts.append(qualifier or DEFAULT_QUALIFIER)

        if isinstance(rule, str):
            cur_type = Type(rule)
            fqts.append(cur_type)
        elif (i == 0 or (i == 1 and has_qualifier)) and is_shape(rule):
            cur_type = DEFAULT_OBJECT_TYPE
            fqts.extend([cur_type, {"$": rule}])
        elif is_type_args(rule):
            fqts.append(rule)
        elif is_custom_validator(rule):
            if cur_type is None:
                cur_type = Type.ANY
                fqts.append(cur_type)
            fqts.append(rule)
        else:
            cur_type = Type.ARRAY
            fqts.extend([cur_type, {"$": rule}])

    return fqts


def extract_next_type(
    typeset: list, qualifier: Any = None, start: int = 0
) -> tuple[list, int]:
    """
    Read the next single-type unit from a list typeset without modifying it.

    Args:
        typeset: Valid list typeset
        qualifier: False to exclude the typeset's own qualifier; a qualifier to
            use when the typeset has none of its own; None to only include the
            typeset's own qualifier
        start: Cursor position, from a previous call's `next_index`

    Returns:
        (subtype, next_index); subtype is [] once the typeset is exhausted
    """
    if qualifier is not None and qualifier is not False:
        qualifier = verify_qualifier(qualifier)
    if not isinstance(typeset, list) or (start == 0 and not is_typeset(typeset)):
        raise ValueError(
            f"Invalid list typeset={print_value(typeset, is_typeset=True)}"
        )
    if start >= len(typeset):
        return [], start

    subtype: list = []
    i = start
    rule = typeset[i]
    i += 1

    if i == 1 and is_qualifier(rule):
        if qualifier is not False:
            subtype.append(Qualifier(rule))
        # a valid typeset always has a type after its qualifier
        rule = typeset[i]
        i += 1
    elif qualifier:
        subtype.append(qualifier)

    if isinstance(rule, str):
        subtype.append(Type(rule))
        if has_args(rule) and i < len(typeset) and is_type_args(typeset[i]):
            subtype.append(typeset[i])
            i += 1
    else:
        # shape (implied OBJECT), nested list (implied ARRAY) or custom validator
        subtype.append(rule)

    return subtype, i


def iter_types(typeset: list, qualifier: Any = None) -> Iterator[list]:
    """Yield each single-type unit of a list typeset, in order."""
    subtype, cursor = extract_next_type(typeset, qualifier)
    while subtype:
        yield subtype
        subtype, cursor = extract_next_type(typeset, start=cursor)


def lint_typeset(typeset: Any) -> list[str]:
    """
    Report type args carrying keys their type does not recognize.

    A shape written after a type is read as that type's args rather than as an
    implied OBJECT; this is the usual source of such keys. Matching is not
    affected, findings are only reported (and logged).
    """
    findings: list[str] = []
    _lint(typeset, [], findings)
    for finding in findings:
        logger.warning(finding)
    return findings


def _lint(typeset: Any, path: list[str], findings: list[str]) -> None:
    if is_falsy(typeset):
        return

    where = ".".join(path) or "<root>"
    cur_type: Type | None = None

    for rule in fully_qualify(typeset)[1:]:
        if isinstance(rule, str):
            cur_type = Type(rule)
            continue
        if not is_type_args(rule) or cur_type is None:
            continue

        unknown = sorted(str(k) for k in rule if k not in get_def(cur_type).arg_names)
        if unknown:
            findings.append(
                f"at {where}: args for type={print_value(cur_type)} have unrecognized "
                f"keys {unknown}; a shape after a type is read as its args, use "
                f"[{print_value(DEFAULT_OBJECT_TYPE)}, {{'$': shape}}] for a nested shape"
            )

        for key in ("$", "$keys", "$values"):
            if key not in rule:
                continue
            nested = rule[key]
            if key == "$" and is_object_type(cur_type):
                if is_shape(nested):
                    for prop, prop_ts in nested.items():
                        _lint(prop_ts, [*path, str(prop)], findings)
            else:
                _lint(nested, [*path, key], findings)
