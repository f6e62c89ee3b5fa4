"""OpenDefinition — permit (almost) everything, keep insertion order."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..ports.definition import Definition

if TYPE_CHECKING:
    from collections.abc import Iterable


class OpenDefinition(Definition):
    """Definition behaving like a classic insertion-ordered pipeline.

    Every middleware is permitted except instances of *excluded* types.
    """

    def __init__(self, excluded: Iterable[type[Any]] = ()) -> None:
        self.excluded: tuple[type[Any], ...] = tuple(excluded)

    def is_permitted(self, middleware: Any) -> bool:
        return not isinstance(middleware, self.excluded)

    def sort(self, middlewares: list[Any]) -> list[Any]:
        return list(middlewares)
