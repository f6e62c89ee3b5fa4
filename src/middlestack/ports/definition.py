"""IDefinition — ordering/permission policy protocol."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IDefinition(Protocol):
    """Protocol for middleware definitions.

    A definition decides which middlewares a :class:`~middlestack.Stack` may
    run and in what order. Unlike insertion-ordered pipelines, the order is
    declared once by the definition, so one middleware can rely on another
    having already run.

    An "open" policy is a definition whose ``is_permitted`` always returns
    ``True`` and whose ``sort`` returns its input unchanged (see
    :class:`~middlestack.definitions.OpenDefinition`).
    """

    def is_permitted(self, middleware: Any) -> bool:
        """Return whether *middleware* may run under this definition."""
        ...

    def sort(self, middlewares: list[Any]) -> list[Any]:
        """Return *middlewares* in execution order."""
        ...


class Definition:
    """Marker base class for definitions.

    Subclassing is optional. The marker implements neither ``is_permitted``
    nor ``sort``, so a bare ``Definition()`` is *not* valid.
    """

    @staticmethod
    def valid(candidate: object) -> bool:
        """Alias of :func:`is_valid_definition`."""
        return is_valid_definition(candidate)


def is_valid_definition(candidate: object) -> bool:
    """Return whether *candidate* exposes both ``is_permitted`` and ``sort``.

    Neither operation is invoked. A definition class is rejected; its
    methods are only usable once bound to an instance.
    """
    if isinstance(candidate, type):
        return False
    return callable(getattr(candidate, "is_permitted", None)) and callable(
        getattr(candidate, "sort", None)
    )
