"""
Result types for rtv checks.

A check never raises for non-compliant data; it returns one of:
    RtvSuccess(mvv)                                   # minimum viable value
    RtvError(value, typeset, path, mismatch, root_cause)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .typeset import is_typeset
from .util import print_value

Path = list[str]


@dataclass(frozen=True, slots=True)
class RtvSuccess:
    """
    Successful check.

    `mvv` is the Minimum Viable Value: the value itself for scalars, or a fresh
    copy of containers holding only what was actually checked.
    """

    mvv: Any = None

    @property
    def valid(self) -> bool:
        return True

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class RtvError:
    """
    Failed check.

    Attributes:
        value: The value that failed
        typeset: Typeset (as written) that the value was checked against
        path: Segments locating the failure from the root value
        mismatch: Fully-qualified typeset of the type that did not match
        root_cause: Underlying exception, e.g. raised by a custom validator
    """

    value: Any
    typeset: Any
    path: Path = field(default_factory=list)
    mismatch: list = field(default_factory=list)
    root_cause: BaseException | None = None

    def __post_init__(self) -> None:
        if not is_typeset(self.typeset):
            raise ValueError(
                f"Invalid typeset={print_value(self.typeset, is_typeset=True)}"
            )
        if not isinstance(self.path, list) or not all(
            isinstance(p, str) for p in self.path
        ):
            raise ValueError(f"Invalid path={print_value(self.path)}")
        if not is_typeset(self.mismatch, fully_qualified=True):
            raise ValueError(
                f"Invalid cause/mismatch={print_value(self.mismatch, is_typeset=True)}"
            )

    @property
    def valid(self) -> bool:
        return False

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def prepend(self, *segments: str) -> RtvError:
        """New error for the same failure, located one or more levels deeper."""
        return RtvError(
            self.value,
            self.typeset,
            [*segments, *self.path],
            self.mismatch,
            self.root_cause,
        )

    @property
    def message(self) -> str:
        return (
            f"Verification failed: value={print_value(self.value)}, "
            f"path={print_value(self.path)}, "
            f"mismatch={print_value(self.mismatch, is_typeset=True)}"
            + (f", root_cause={self.root_cause!r}" if self.root_cause else "")
        )

    def __str__(self) -> str:
        return self.message


RtvResult = RtvSuccess | RtvError


class RtvVerificationError(ValueError):
    """Raised by verify() when a value does not comply with its typeset."""

    def __init__(self, error: RtvError):
        super().__init__(error.message)
        self.error = error

    @property
    def path(self) -> Path:
        return self.error.path
