"""
Public entry points, backed by a default engine with every built-in validator.

Usage:
    from rtv import check, verify, t, q

    check({"name": "x"}, {"name": t.STRING})              # RtvSuccess(mvv={'name': 'x'})
    check(None, [q.OPTIONAL, t.FINITE])                    # RtvSuccess(mvv=None)
    verify([1, "2"], [[t.FINITE]])                         # raises RtvVerificationError
    check({"a": 1, "b": 2}, {"a": t.FINITE}, {"exact_shapes": True})   # RtvError
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict

from .context import ContextOptions
from .engine import Engine
from .qualifiers import Qualifier
from .results import RtvResult, RtvSuccess, RtvVerificationError
from .types import Type
from .validators import default_validators

t = Type
q = Qualifier

impl = Engine().configure(default_validators())


class RtvConfig(BaseModel):
    """Global switches for the facade."""

    model_config = ConfigDict(validate_assignment=True, strict=True)

    # When False, check() and verify() succeed without checking anything
    enabled: bool = True


config = RtvConfig()


def _context(options: ContextOptions | Mapping[str, Any] | None) -> dict | None:
    if options is None:
        return None
    if isinstance(options, (ContextOptions, Mapping)):
        return {"options": options}
    raise TypeError(f"Invalid options type={type(options).__name__}")


def check(
    value: Any,
    typeset: Any,
    options: ContextOptions | Mapping[str, Any] | None = None,
) -> RtvResult:
    """
    Check a value against a typeset.

    Args:
        value: Value to check
        typeset: Typeset in any form
        options: ContextOptions, or a mapping such as {"exact_shapes": True}

    Returns:
        RtvSuccess or RtvError

    Raises:
        ValueError: If the typeset is invalid
        TypeError: If `options` is neither ContextOptions nor a mapping
        pydantic.ValidationError: If `options` holds an unknown key or a badly
            typed value
    """
    if not config.enabled:
        return RtvSuccess(mvv=value)
    return impl.check(value, typeset, _context(options))


def verify(
    value: Any,
    typeset: Any,
    options: ContextOptions | Mapping[str, Any] | None = None,
) -> RtvSuccess:
    """
    Like check(), but raises on failure.

    Raises:
        RtvVerificationError: If the value does not comply with the typeset
    """
    result = check(value, typeset, options)
    if isinstance(result, RtvSuccess):
        return result
    raise RtvVerificationError(result)
