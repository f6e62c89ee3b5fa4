"""Primitives: exceptions."""

from __future__ import annotations

from .exceptions import (
    ArgumentValidationError,
    InvalidDefinitionError,
    InvalidMiddlewareError,
    InvalidMiddlewareOutputError,
    MiddlestackError,
    UnpermittedMiddlewareError,
)

__all__ = [
    "ArgumentValidationError",
    "InvalidDefinitionError",
    "InvalidMiddlewareError",
    "InvalidMiddlewareOutputError",
    "MiddlestackError",
    "UnpermittedMiddlewareError",
]
