"""
Matching engine: checks values against typesets.

The engine owns the validator registry. Composite validators recurse back into
the engine for their children, so the engine is built first and handed to each
validator through its config() hook:

    engine = Engine().configure(default_validators())
    engine.check([1, 2], [[Type.FINITE]])   # RtvSuccess(mvv=[1, 2])
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace
from typing import Any, Protocol

from .context import ValidationContext, get_context
from .qualifiers import Qualifier
from .results import RtvError, RtvResult, RtvSuccess
from .types import DEFAULT_OBJECT_TYPE, Type, is_known
from .typeset import (
    TypesetKind,
    classify,
    extract_next_type,
    fully_qualify,
    get_qualifier,
    is_custom_validator,
    is_shape,
    is_typeset,
    iter_types,
    to_typeset,
    verify_typeset,
)
from .util import print_value

logger = logging.getLogger(__name__)

VALIDATOR_FAILED = "Verification failed by the custom validator"

ValidateFn = Callable[[Any, Qualifier, Any, ValidationContext | None], RtvResult]


class ValidatorDescriptor(Protocol):
    type: Type

    def config(self, settings: dict[str, Any]) -> None: ...

    def validate(
        self,
        value: Any,
        qualifier: Qualifier = ...,
        args: Any = ...,
        context: ValidationContext | None = ...,
    ) -> RtvResult: ...


@dataclass(frozen=True, slots=True)
class _CheckOptions:
    """Per-call internals: path prefix, typeset already verified, qualifier override."""

    path: tuple[str, ...] = ()
    is_typeset: bool = False
    qualifier: Qualifier | None = None


def _call_with_arity(fn: Callable, *args: Any) -> Any:
    """Call `fn` with as many leading `args` as its signature accepts."""
    try:
        params = inspect.signature(fn).parameters.values()
    except (TypeError, ValueError):
        # builtins without a signature get the value only
        return fn(args[0])

    if any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in params):
        return fn(*args)

    positional = sum(
        1
        for p in params
        if p.kind
        in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
    )
    return fn(*args[:positional])


class Engine:
    """Recursive dispatcher of values against typesets."""

    # normalizer operations, exposed for validators
    to_typeset = staticmethod(to_typeset)
    fully_qualify = staticmethod(fully_qualify)
    is_typeset = staticmethod(is_typeset)
    get_qualifier = staticmethod(get_qualifier)
    extract_next_type = staticmethod(extract_next_type)

    def __init__(self) -> None:
        self._validators: dict[Type, ValidateFn] = {}

    @property
    def registered_types(self) -> list[Type]:
        return list(self._validators)

    def register_type(self, validator: ValidatorDescriptor) -> None:
        """
        Register the validator for a type, replacing any previous one.

        Raises:
            TypeError: If a member of [type, config, validate] is missing or
                `type` is unknown
        """
        vtype = getattr(validator, "type", None)
        if (
            not is_known(vtype)
            or not callable(getattr(validator, "config", None))
            or not callable(getattr(validator, "validate", None))
        ):
            raise TypeError(
                f"Cannot register an invalid validator for type={print_value(vtype)}: "
                "missing at least one required member in [type, config, validate]"
            )
        self._validators[Type(vtype)] = validator.validate
        logger.debug("Registered validator for type=%s", vtype)

    def configure(self, validators: Iterable[ValidatorDescriptor]) -> Engine:
        """Hand this engine to each validator and register it."""
        settings = {"impl": self}
        for validator in validators:
            validator.config(settings)
            self.register_type(validator)
        logger.debug("Engine configured with %d validators", len(self._validators))
        return self

    # Public entry points

    def check(self, value: Any, typeset: Any, context: Any = None) -> RtvResult:
        """
        Check a value against a typeset.

        Args:
            value: Value to check
            typeset: Typeset in any form
            context: ValidationContext, or a mapping (e.g. {"options": {"exact_shapes": True}})

        Returns:
            RtvSuccess or RtvError; never raises for non-compliant values

        Raises:
            ValueError: If the typeset is invalid
            TypeError: If the context is invalid
            pydantic.ValidationError: If the context options hold an unknown
                key or a badly typed value (a ValueError subclass)
        """
        return self._check(value, typeset, get_context(context, value), _CheckOptions())

    def check_with_type(
        self, value: Any, single_type: Any, context: Any = None
    ) -> RtvResult:
        """Check a value against a typeset describing exactly one type."""
        return self._check_with_type(
            value, single_type, get_context(context, value), _CheckOptions()
        )

    def check_with_shape(self, value: Any, shape: Any, context: Any = None) -> RtvResult:
        """Check a value against a shape (implied default object type)."""
        return self._check_with_shape(
            value, shape, get_context(context, value), _CheckOptions()
        )

    def check_with_array(
        self, value: Any, array_ts: Any, context: Any = None
    ) -> RtvResult:
        """Check a value against a list typeset: first matching type wins."""
        return self._check_with_array(
            value, array_ts, get_context(context, value), _CheckOptions()
        )

    # Implementation

    def _check(
        self, value: Any, typeset: Any, context: ValidationContext, opts: _CheckOptions
    ) -> RtvResult:
        if not opts.is_typeset:
            verify_typeset(typeset)
            opts = replace(opts, is_typeset=True)

        match classify(typeset):
            case TypesetKind.TYPE:
                return self._check_with_type(value, typeset, context, opts)
            case TypesetKind.SHAPE:
                return self._check_with_shape(value, typeset, context, opts)
            case TypesetKind.LIST:
                return self._check_with_array(value, typeset, context, opts)
            case TypesetKind.VALIDATOR:
                result = self._check_with_type(value, Type.ANY, context, opts)
                if not result.valid:
                    return result

                # the match is the implied type only, not the validator
                match_ts = fully_qualify(Type.ANY, opts.qualifier)
                failure = self._call_custom_validator(
                    typeset, value, match_ts, typeset, context
                )
                if failure is not None:
                    return RtvError(
                        value,
                        typeset,
                        list(opts.path),
                        fully_qualify(typeset, opts.qualifier),
                        failure,
                    )
                return result

    def _check_with_type(
        self,
        value: Any,
        single_type: Any,
        context: ValidationContext,
        opts: _CheckOptions,
    ) -> RtvResult:
        if not opts.is_typeset:
            verify_typeset(single_type)

        qualifier = opts.qualifier or get_qualifier(single_type)
        args = None

        match classify(single_type):
            case TypesetKind.TYPE:
                type_ = Type(single_type)
            case TypesetKind.SHAPE:
                type_ = DEFAULT_OBJECT_TYPE
                args = {"$": single_type}
            case TypesetKind.LIST:
                fqts = fully_qualify(single_type)  # make implied types concrete
                subtype, cursor = extract_next_type(fqts, False)
                if cursor < len(fqts):
                    raise ValueError(
                        f"Specified single_type={print_value(single_type, is_typeset=True)} "
                        "typeset must represent a single type"
                    )
                type_ = subtype[0]
                args = subtype[1] if len(subtype) > 1 else None
            case _:
                raise ValueError(
                    f"Specified single_type={print_value(single_type, is_typeset=True)} "
                    "must be a type, shape, or list"
                )

        validate = self._validators.get(type_)
        if validate is None:
            raise ValueError(f"Missing validator for type={print_value(type_)}")

        result = validate(value, qualifier, args, context)
        if not result.valid:
            return self._rewrap(result, value, single_type, opts.path)
        return result

    def _check_with_shape(
        self, value: Any, shape: Any, context: ValidationContext, opts: _CheckOptions
    ) -> RtvResult:
        if not is_shape(shape):
            raise ValueError(f"Invalid shape={print_value(shape, is_typeset=True)}")
        # object validators are responsible for checking values against shapes
        return self._check_with_type(value, shape, context, opts)

    def _check_with_array(
        self,
        value: Any,
        array_ts: Any,
        context: ValidationContext,
        opts: _CheckOptions,
    ) -> RtvResult:
        if not isinstance(array_ts, list) or not (
            opts.is_typeset or is_typeset(array_ts)
        ):
            raise ValueError(
                f"Invalid typeset in array={print_value(array_ts, is_typeset=True)}"
            )

        qualifier = opts.qualifier or get_qualifier(array_ts)
        sub_opts = _CheckOptions(is_typeset=True, qualifier=qualifier)
        validator = array_ts[-1] if is_custom_validator(array_ts[-1]) else None

        match_ts: list | None = None
        mvv: Any = None
        err: RtvError | None = None
        candidates = 0

        # short-circuit OR: the first matching type wins
        for subtype in iter_types(array_ts, False):
            if len(subtype) == 1 and is_custom_validator(subtype[0]):
                # reached the trailing validator; on its own it implies ANY
                if candidates == 0:
                    match_ts = fully_qualify(Type.ANY, qualifier)
                    mvv = value
                break

            candidates += 1
            result = self._check_with_type(value, subtype, context, sub_opts)
            if result.valid:
                match_ts = fully_qualify(subtype, qualifier)
                mvv = result.mvv
                break
            err = result

        if match_ts is not None:
            if validator is not None:
                failure = self._call_custom_validator(
                    validator, value, match_ts, array_ts, context
                )
                if failure is not None:
                    return RtvError(
                        value,
                        array_ts,
                        list(opts.path),
                        fully_qualify(array_ts, qualifier),
                        failure,
                    )
            return RtvSuccess(mvv=mvv)

        if candidates == 1 and err is not None:
            # a single type gets its detailed error
            return self._rewrap(err, value, array_ts, opts.path)

        return RtvError(value, array_ts, list(opts.path), fully_qualify(array_ts, qualifier))

    @staticmethod
    def _rewrap(
        error: RtvError, value: Any, typeset: Any, path: tuple[str, ...]
    ) -> RtvError:
        """
        Re-issue an error at this level.

        A failure located deeper in the value keeps its own value and typeset;
        a failure of the value itself reports this level's typeset.
        """
        if error.path:
            return error.prepend(*path)
        return RtvError(value, typeset, list(path), error.mismatch, error.root_cause)

    @staticmethod
    def _call_custom_validator(
        validator: Callable,
        value: Any,
        match_ts: list,
        typeset: Any,
        context: ValidationContext,
    ) -> BaseException | None:
        """
        Invoke a custom validator.

        Returns:
            None if the value passed, otherwise the exception describing the failure
        """
        try:
            result = _call_with_arity(validator, value, match_ts, typeset, context)
            # None means no opinion, which is a pass
            failed = result is not None and not result
        except Exception as e:
            return e

        if failed:
            return ValueError(VALIDATOR_FAILED)
        return None
