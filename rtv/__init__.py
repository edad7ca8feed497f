from .context import ContextOptions, ValidationContext, check_context
from .engine import Engine
from .qualifiers import Qualifier
from .results import RtvError, RtvResult, RtvSuccess, RtvVerificationError
from .rtv import RtvConfig, check, config, impl, q, t, verify
from .types import Type
from .typeset import fully_qualify, is_typeset, lint_typeset, to_typeset
from .util import UNDEFINED

__all__ = [
    "check",
    "verify",
    "check_context",
    "config",
    "impl",
    "t",
    "q",
    "Type",
    "Qualifier",
    "UNDEFINED",
    "Engine",
    "RtvConfig",
    "RtvSuccess",
    "RtvError",
    "RtvResult",
    "RtvVerificationError",
    "ContextOptions",
    "ValidationContext",
    "fully_qualify",
    "is_typeset",
    "lint_typeset",
    "to_typeset",
]
