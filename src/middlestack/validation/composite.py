"""CompositeValidator — chains multiple validators, collects all errors."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .result import ValidationResult

if TYPE_CHECKING:
    from ..ports.validation import IValidator


class CompositeValidator:
    """Runs a list of validators and merges their results.

    Every validator runs, so the result holds **all** errors rather than
    only the first one.

    Usage::

        validator = CompositeValidator([NameValidator(), AgeValidator()])
        result = validator.validate("Alice", 30)
    """

    def __init__(self, validators: list[IValidator] | None = None) -> None:
        self._validators: list[IValidator] = list(validators or [])

    def add(self, validator: IValidator) -> None:
        """Append a validator to the chain."""
        self._validators.append(validator)

    def validate(self, *args: Any) -> ValidationResult:
        combined = ValidationResult.success()
        for validator in self._validators:
            combined = combined.merge(validator.validate(*args))
        return combined
