"""PriorityDefinition — order middlewares by a priority value."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..ports.definition import Definition

if TYPE_CHECKING:
    from collections.abc import Callable


def default_priority(middleware: Any) -> Any:
    """Read ``middleware.priority``, defaulting to ``0``."""
    return getattr(middleware, "priority", 0)


class PriorityDefinition(Definition):
    """Definition that runs middlewares by ascending priority.

    Lower values run first; equal priorities keep insertion order.

    Usage::

        definition = PriorityDefinition(permit=lambda m: isinstance(m, Audited))
    """

    def __init__(
        self,
        *,
        key: Callable[[Any], Any] = default_priority,
        permit: Callable[[Any], bool] | None = None,
    ) -> None:
        self._key = key
        self._permit = permit

    def is_permitted(self, middleware: Any) -> bool:
        if self._permit is None:
            return True
        return bool(self._permit(middleware))

    def sort(self, middlewares: list[Any]) -> list[Any]:
        return sorted(middlewares, key=self._key)
