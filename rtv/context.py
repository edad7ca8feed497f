"""
Validation context threaded through a check, plus ambient check options.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict

from .validation.predicates import is_primitive


class ContextOptions(BaseModel):
    """Cross-cutting flags for a check."""

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    exact_shapes: bool = False


# Context variable for the default options of checks started without any
_default_options: ContextVar[ContextOptions] = ContextVar(
    "default_options", default=ContextOptions()
)


def default_options() -> ContextOptions:
    """Options used when a check is started without explicit options."""
    return _default_options.get()


@contextmanager
def check_context(*, exact_shapes: bool = False):
    """
    Context manager for ambient check options.

    Args:
        exact_shapes: If True, object shapes reject properties they don't
            describe unless a shape's args set `exact` themselves.

    Example:
        from rtv import check, check_context

        check({"a": 1, "b": 2}, {"a": "finite"})  # RtvSuccess

        with check_context(exact_shapes=True):
            check({"a": 1, "b": 2}, {"a": "finite"})  # RtvError: unexpected 'b'
    """
    token = _default_options.set(ContextOptions(exact_shapes=exact_shapes))
    try:
        yield
    finally:
        _default_options.reset(token)


@dataclass(frozen=True, slots=True)
class ValidationContext:
    """
    Where the value currently being checked lives.

    Attributes:
        original_value: Top-level value of the check, constant across the tree
        parent: Container holding the current value (None at the root)
        parent_key: Index, property or key of the current value in `parent`
            (None at the root, for map keys and for set elements)
        options: Cross-cutting flags
    """

    original_value: Any
    parent: Any = None
    parent_key: Any = None
    options: ContextOptions = field(default_factory=default_options)


_CONTEXT_KEYS = frozenset({"original_value", "parent", "parent_key", "options"})


def _to_options(options: Any) -> ContextOptions:
    if isinstance(options, ContextOptions):
        return options
    if options is None:
        return default_options()
    if isinstance(options, Mapping):
        return ContextOptions(**options)
    raise TypeError("Invalid type validator context options")


def get_context(given: Any, value: Any) -> ValidationContext:
    """
    Resolve the context for a check of `value`.

    Args:
        given: None, a ValidationContext, or a mapping holding either just
            `options` or a full context (`original_value`, `parent`,
            `parent_key`, and optionally `options`)
        value: Value being checked, the original value of a new context

    Raises:
        TypeError: If the context is invalid
        pydantic.ValidationError: If the options hold an unknown key or a badly
            typed value
    """
    if given is None:
        return ValidationContext(original_value=value)

    if isinstance(given, ValidationContext):
        context = given
    elif isinstance(given, Mapping) and set(given) <= _CONTEXT_KEYS:
        options = _to_options(given.get("options"))
        if "original_value" in given:
            context = ValidationContext(
                original_value=given["original_value"],
                parent=given.get("parent"),
                parent_key=given.get("parent_key"),
                options=options,
            )
        else:
            # only options given to start a check
            return ValidationContext(original_value=value, options=options)
    else:
        # don't print the context, it may hold sensitive original values
        raise TypeError("Invalid type validator context")

    if context.parent is not None and is_primitive(context.parent):
        raise TypeError("Invalid type validator context")
    return context


def derive_context(
    context: ValidationContext | None, parent: Any, parent_key: Any
) -> ValidationContext:
    """New context for a child of `parent`; `parent` is the original value if no context."""
    if context is None:
        return ValidationContext(original_value=parent, parent=parent, parent_key=parent_key)
    return dataclasses.replace(context, parent=parent, parent_key=parent_key)
