"""ArrayDefinition — permit and order middlewares by an explicit list of types."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..ports.definition import Definition
from .matching import exact_type_match
from .resolvers import identity_resolver

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

logger = logging.getLogger("middlestack.definitions")


def describe_identifier(identifier: Any) -> str:
    """Readable name for a permitted-type entry (a class or any other identifier)."""
    return getattr(identifier, "__name__", None) or repr(identifier)


class ArrayDefinition(Definition):
    """Definition that runs middlewares in the order their types are listed.

    Usage::

        definition = ArrayDefinition([MiddlewareOne, MiddlewareTwo, MiddlewareFinal])
        stack = Stack(definition, [MiddlewareFinal(), MiddlewareOne(), MiddlewareTwo()])
        stack.call("hello")  # MiddlewareOne, then MiddlewareTwo, then MiddlewareFinal

    Middlewares matched to the same type are *ties*. They keep the order they
    were added in unless a *resolver* is given. The resolver runs for every
    permitted type, so a resolver that has to tell many types apart is a sign
    that a custom definition would fit better.

    Type matching defaults to exact type equality. Pass
    ``matcher=subtype_match`` (or any ``(middleware, identifier) -> bool``) to
    change it, or override :meth:`matches_type` in a subclass. With a custom
    matcher the entries of *permitted_types* need not be classes::

        ArrayDefinition(["upper", "lower"], matcher=lambda m, kind: m.kind == kind)

    Note: a type listed twice in *permitted_types* is matched twice against
    the full input, so its middlewares appear (and run) twice.
    """

    def __init__(
        self,
        permitted_types: Sequence[Any],
        *,
        resolver: Callable[[list[Any]], Sequence[Any]] | None = None,
        matcher: Callable[[Any, Any], bool] | None = None,
    ) -> None:
        self.permitted_types: list[Any] = list(permitted_types)
        self._resolver = resolver if resolver is not None else identity_resolver
        self._matcher = matcher if matcher is not None else exact_type_match

    @property
    def resolver(self) -> Callable[[list[Any]], Sequence[Any]]:
        return self._resolver

    @property
    def matcher(self) -> Callable[[Any, Any], bool]:
        return self._matcher

    def matches_type(self, middleware: Any, middleware_type: Any) -> bool:
        """Return whether *middleware* counts as an instance of *middleware_type*."""
        return self._matcher(middleware, middleware_type)

    def is_permitted(self, middleware: Any) -> bool:
        return any(self.matches_type(middleware, t) for t in self.permitted_types)

    def sort(self, middlewares: list[Any]) -> list[Any]:
        """Order *middlewares* by their position in :attr:`permitted_types`.

        Middlewares matching no permitted type are dropped.
        """
        ordered: list[Any] = []
        for middleware_type in self.permitted_types:
            ties = [m for m in middlewares if self.matches_type(m, middleware_type)]
            if len(ties) > 1:
                logger.debug(
                    "Resolving %d tied middlewares of type %s",
                    len(ties),
                    describe_identifier(middleware_type),
                )
            ordered.extend(self._resolver(ties))
        return ordered

    def __repr__(self) -> str:
        names = ", ".join(describe_identifier(t) for t in self.permitted_types)
        return f"{type(self).__name__}([{names}])"
