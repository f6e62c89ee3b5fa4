"""Stack — validate, order and run a chain of middlewares."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .arguments import as_argument_list, is_list_shaped
from .ports.definition import is_valid_definition
from .ports.middleware import is_valid_middleware
from .primitives.exceptions import (
    InvalidDefinitionError,
    InvalidMiddlewareError,
    InvalidMiddlewareOutputError,
    UnpermittedMiddlewareError,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .ports.definition import IDefinition

logger = logging.getLogger("middlestack.stack")


class Stack:
    """A chain of middlewares whose order is decided by a definition.

    Usage::

        definition = ArrayDefinition([Honorific, EmailAddress])
        stack = Stack(definition)
        stack.middlewares += [EmailAddress("mail@test.com"), Honorific()]

        stack.call("Jacob")  # ["mail@test.com <The Honorable Jacob>"]

    ``Honorific`` runs first even though it was added last: the definition,
    not the insertion position, fixes the order.

    :attr:`middlewares` is a plain list and may be edited freely between
    calls. It is validated on every :meth:`call`, never at construction.
    A stack is not safe for concurrent calls or for mutation during a call.
    """

    def __init__(
        self,
        definition: IDefinition,
        middlewares: list[Any] | None = None,
    ) -> None:
        if not is_valid_definition(definition):
            raise InvalidDefinitionError(definition)
        self._definition = definition
        self.middlewares: list[Any] = middlewares if middlewares is not None else []

    @property
    def definition(self) -> IDefinition:
        return self._definition

    def call(self, *args: Any) -> list[Any]:
        """Run every middleware over *args* and return the final argument list.

        All middlewares are validated before any of them runs. If a
        middleware returns something that is not list-shaped, the chain stops
        there; middlewares that already ran are not rolled back.

        Raises
        ------
        InvalidMiddlewareError
            A middleware is not callable.
        UnpermittedMiddlewareError
            A middleware is not permitted by :attr:`definition`.
        InvalidMiddlewareOutputError
            A middleware returned a value that is not an argument list.
        """
        middlewares = list(self.middlewares)
        self._ensure_valid(middlewares)
        self._ensure_permitted(middlewares)

        ordered = self._definition.sort(middlewares)

        current: list[Any] = list(args)
        for middleware in ordered:
            logger.debug("Calling %r with %d argument(s)", middleware, len(current))
            output = middleware(*current)
            if not is_list_shaped(output):
                logger.error("%r returned invalid output %r", middleware, output)
                raise InvalidMiddlewareOutputError(middleware, output)
            current = as_argument_list(output)

        return current

    __call__ = call

    def _ensure_valid(self, middlewares: Iterable[Any]) -> None:
        for middleware in middlewares:
            if not is_valid_middleware(middleware):
                logger.warning("Rejected invalid middleware %r", middleware)
                raise InvalidMiddlewareError(middleware)

    def _ensure_permitted(self, middlewares: Iterable[Any]) -> None:
        for middleware in middlewares:
            if not self._definition.is_permitted(middleware):
                logger.warning("Rejected unpermitted middleware %r", middleware)
                raise UnpermittedMiddlewareError(middleware)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._definition!r}, "
            f"middlewares={self.middlewares!r})"
        )
