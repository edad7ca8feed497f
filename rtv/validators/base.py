"""
Base class for type validators.

A validator handles one type: it checks the qualifier, then the type and its
args, and recurses into the engine for nested typesets.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, ClassVar

from ..context import ValidationContext
from ..qualifiers import DEFAULT_QUALIFIER, Qualifier, value_permitted, verify_qualifier
from ..results import RtvError, RtvResult, RtvSuccess
from ..types import Type
from ..validation.predicates import PREDICATES, is_finite

if TYPE_CHECKING:
    from ..engine import Engine

_REGEX_FLAGS = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
    "a": re.ASCII,
}


def regex_flags(letters: Any) -> int:
    """
    Convert flag letters (e.g. "im") to `re` flags.

    Raises:
        ValueError: On an unknown flag letter
    """
    if not isinstance(letters, str):
        return 0
    flags = 0
    for letter in letters:
        if letter not in _REGEX_FLAGS:
            raise ValueError(f"Invalid regular expression flag={letter!r}")
        flags |= _REGEX_FLAGS[letter]
    return flags


def length_arg(n: Any) -> float | None:
    """A size bound from args: finite and non-negative, otherwise None (ignored)."""
    if is_finite(n) and n >= 0:
        return n
    return None


def hashable_or(value: Any, fallback: Any) -> Any:
    """`value` if it can be a dict key or set member, else `fallback`."""
    try:
        hash(value)
    except TypeError:
        return fallback
    return value


class TypeValidator:
    """
    Validator for a single type.

    Subclasses set `type` and implement `_validate()`, which only sees values
    the qualifier did not already permit.
    """

    type: ClassVar[Type]

    def __init__(self) -> None:
        self.impl: Engine | None = None

    def config(self, settings: Mapping[str, Any]) -> None:
        """Receive the engine used to check nested typesets."""
        self.impl = settings["impl"]

    def validate(
        self,
        value: Any,
        qualifier: Qualifier | None = DEFAULT_QUALIFIER,
        args: Mapping | None = None,
        context: ValidationContext | None = None,
    ) -> RtvResult:
        q = DEFAULT_QUALIFIER if qualifier is None else verify_qualifier(qualifier)
        if value_permitted(value, q):
            return RtvSuccess(mvv=value)
        return self._validate(value, q, args, context)

    def _validate(
        self,
        value: Any,
        qualifier: Qualifier,
        args: Mapping | None,
        context: ValidationContext | None,
    ) -> RtvResult:
        raise NotImplementedError

    def _error(
        self,
        value: Any,
        qualifier: Qualifier,
        args: Mapping | None,
        root_cause: BaseException | None = None,
        path: list[str] | None = None,
    ) -> RtvError:
        return RtvError(
            value,
            self.impl.to_typeset(self.type, qualifier, args),
            path or [],
            self.impl.to_typeset(self.type, qualifier, args, fully_qualified=True),
            root_cause,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(type={self.type.value!r})"


class PredicateValidator(TypeValidator):
    """Validator for types without args: the type's predicate is the whole check."""

    def _validate(self, value, qualifier, args, context):
        if PREDICATES[self.type](value):
            return RtvSuccess(mvv=value)
        return self._error(value, qualifier, args)
