"""IValidator — composable argument-list validation protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..validation.result import ValidationResult


@runtime_checkable
class IValidator(Protocol):
    """Protocol for argument-list validators.

    Validators are composable via
    :class:`~middlestack.validation.composite.CompositeValidator`.
    """

    def validate(self, *args: Any) -> ValidationResult:
        """Validate the argument list and return a
        :class:`~middlestack.validation.result.ValidationResult`.

        Must return :meth:`ValidationResult.success()` or
        :meth:`ValidationResult.failure(errors)`.
        """
        ...
