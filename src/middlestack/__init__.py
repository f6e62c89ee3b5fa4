"""middlestack — one-way middleware chains ordered by an explicit definition.

A :class:`Stack` runs middlewares over an argument list. Which middlewares
may run, and in what order, is decided by a definition rather than by the
order they were added in.
"""

from __future__ import annotations

from .arguments import as_argument_list, is_list_shaped

# ── Definitions ──────────────────────────────────────────────────
from .definitions import (
    ArrayDefinition,
    OpenDefinition,
    PriorityDefinition,
    exact_type_match,
    identity_resolver,
    sort_by,
    subtype_match,
)

# ── Middleware ───────────────────────────────────────────────────
from .middleware import LoggingMiddleware, ValidatorMiddleware

# ── Ports ────────────────────────────────────────────────────────
from .ports import (
    Definition,
    IDefinition,
    IMiddleware,
    IValidator,
    Middleware,
    is_valid_definition,
    is_valid_middleware,
)

# ── Primitives ──────────────────────────────────────────────────
from .primitives import (
    ArgumentValidationError,
    InvalidDefinitionError,
    InvalidMiddlewareError,
    InvalidMiddlewareOutputError,
    MiddlestackError,
    UnpermittedMiddlewareError,
)
from .registry import MiddlewareEntry, MiddlewareRegistry
from .stack import Stack

# ── Validation ──────────────────────────────────────────────────
from .validation import ArgumentError, CompositeValidator, ValidationResult

__all__: list[str] = [
    # Stack
    "Stack",
    "MiddlewareEntry",
    "MiddlewareRegistry",
    "as_argument_list",
    "is_list_shaped",
    # Ports
    "Definition",
    "IDefinition",
    "IMiddleware",
    "IValidator",
    "Middleware",
    "is_valid_definition",
    "is_valid_middleware",
    # Definitions
    "ArrayDefinition",
    "OpenDefinition",
    "PriorityDefinition",
    "exact_type_match",
    "identity_resolver",
    "sort_by",
    "subtype_match",
    # Middleware
    "LoggingMiddleware",
    "ValidatorMiddleware",
    # Validation
    "ArgumentError",
    "CompositeValidator",
    "ValidationResult",
    # Primitives
    "ArgumentValidationError",
    "InvalidDefinitionError",
    "InvalidMiddlewareError",
    "InvalidMiddlewareOutputError",
    "MiddlestackError",
    "UnpermittedMiddlewareError",
]
