"""Validation of argument lists: ValidationResult, CompositeValidator, PydanticValidator.

``PydanticValidator`` needs the ``pydantic`` extra and is imported from
:mod:`middlestack.validation.pydantic` directly.
"""

from __future__ import annotations

from .composite import CompositeValidator
from .result import ArgumentError, ValidationResult

__all__ = [
    "ArgumentError",
    "CompositeValidator",
    "ValidationResult",
]
