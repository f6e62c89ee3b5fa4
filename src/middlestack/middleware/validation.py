"""ValidatorMiddleware — validates the argument list before passing it on."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..ports.middleware import Middleware
from ..primitives.exceptions import ArgumentValidationError

if TYPE_CHECKING:
    from ..ports.validation import IValidator


class ValidatorMiddleware(Middleware):
    """Runs ``IValidator.validate()`` over the argument list.

    If validation fails, raises ArgumentValidationError; otherwise the
    arguments are returned unchanged.
    """

    def __init__(self, validator: IValidator) -> None:
        self._validator = validator

    def __call__(self, *args: Any) -> tuple[Any, ...]:
        result = self._validator.validate(*args)
        if not result.is_valid:
            raise ArgumentValidationError(result.errors, args)
        return args
