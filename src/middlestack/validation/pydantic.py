"""PydanticValidator — validates an argument list with a Pydantic TypeAdapter."""

from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .result import ArgumentError, ValidationResult


class PydanticValidator:
    """Validates positional arguments against the given types.

    The argument list is validated as a fixed-length ``tuple`` of *types*, so
    the first element of every Pydantic location is the argument index. A
    wrong number of arguments is reported against the whole list.

    Usage::

        validator = PydanticValidator(int, UserModel)
        validator.validate(3, {"name": "Alice", "age": 30}).is_valid  # True
    """

    def __init__(self, *types: Any) -> None:
        self.types = types
        self._adapter: TypeAdapter[Any] = TypeAdapter(tuple[types])  # type: ignore[valid-type]

    def validate(self, *args: Any) -> ValidationResult:
        try:
            self._adapter.validate_python(args)
        except PydanticValidationError as exc:
            return ValidationResult.failure(
                *(_to_argument_error(error) for error in exc.errors())
            )
        return ValidationResult.success()


def _to_argument_error(error: Any) -> ArgumentError:
    loc = tuple(error.get("loc", ()))
    message = error.get("msg", "validation error")
    if loc and isinstance(loc[0], int):
        return ArgumentError(message, loc[0], loc[1:])
    return ArgumentError(message, None, loc)
