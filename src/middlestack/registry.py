"""MiddlewareRegistry — declarative stack configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .definitions.array import ArrayDefinition
from .stack import Stack

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence


def default_kwargs_factory() -> dict[str, object]:
    return {}


logger = logging.getLogger("middlestack.registry")


@dataclass
class MiddlewareEntry:
    """A registered middleware type.

    Supports **deferred instantiation**: supply *middleware_cls* and
    optional *factory* for lazy construction.
    """

    middleware_cls: type[Any]
    factory: Callable[..., Any] | None = None
    kwargs: dict[str, object] = field(default_factory=default_kwargs_factory)

    def build(self) -> Any:
        """Construct the middleware instance."""
        if self.factory is not None:
            return self.factory(**self.kwargs)
        return self.middleware_cls(**self.kwargs)


class MiddlewareRegistry:
    """Collects middleware types and builds a stack that runs them.

    Registration order is execution order: the registry produces an
    :class:`~middlestack.definitions.ArrayDefinition` over the registered
    types plus one instance per registration.

    Usage::

        registry = MiddlewareRegistry()
        registry.register(Multiplier, factor=10)

        @registry.add
        class Parentheses:
            def __call__(self, value):
                return f"({value})"

        registry.build_stack().call(10)  # ["(100)"]
    """

    def __init__(self) -> None:
        self._entries: list[MiddlewareEntry] = []

    # ── Registration ─────────────────────────────────────────────

    def register(
        self,
        middleware_cls: type[Any],
        *,
        factory: Callable[..., Any] | None = None,
        **kwargs: object,
    ) -> None:
        """Register a middleware type.

        Parameters
        ----------
        middleware_cls:
            The middleware class (its instances must be callable).
        factory:
            Optional custom constructor.
        **kwargs:
            Passed to the constructor or factory.
        """
        self._entries.append(
            MiddlewareEntry(
                middleware_cls=middleware_cls, factory=factory, kwargs=kwargs
            )
        )
        logger.debug("Registered middleware %s", middleware_cls.__name__)

    def add(
        self,
        middleware_cls: type[Any] | None = None,
        *,
        factory: Callable[..., Any] | None = None,
        **kwargs: object,
    ) -> Any:
        """Decorator-style registration.

        Usage::

            @registry.add
            class MyMiddleware: ...

            @registry.add(prefix=">")
            class PrefixMiddleware: ...
        """
        if middleware_cls is None:

            def wrapper(cls: type[Any]) -> type[Any]:
                self.register(cls, factory=factory, **kwargs)
                return cls

            return wrapper

        self.register(middleware_cls, factory=factory, **kwargs)
        return middleware_cls

    # ── Retrieval ────────────────────────────────────────────────

    @property
    def entries(self) -> list[MiddlewareEntry]:
        return list(self._entries)

    def permitted_types(self) -> list[type[Any]]:
        """Registered types in registration order, without repeats."""
        seen: list[type[Any]] = []
        for entry in self._entries:
            if entry.middleware_cls not in seen:
                seen.append(entry.middleware_cls)
        return seen

    def build_middlewares(self) -> list[Any]:
        """Instantiate one middleware per registration."""
        return [entry.build() for entry in self._entries]

    def build_definition(
        self,
        *,
        resolver: Callable[[list[Any]], Sequence[Any]] | None = None,
        matcher: Callable[[Any, Any], bool] | None = None,
    ) -> ArrayDefinition:
        return ArrayDefinition(
            self.permitted_types(), resolver=resolver, matcher=matcher
        )

    def build_stack(
        self,
        *,
        resolver: Callable[[list[Any]], Sequence[Any]] | None = None,
        matcher: Callable[[Any, Any], bool] | None = None,
    ) -> Stack:
        """Build a :class:`~middlestack.Stack` from the registrations."""
        return Stack(
            self.build_definition(resolver=resolver, matcher=matcher),
            self.build_middlewares(),
        )

    # ── Cleanup ──────────────────────────────────────────────────

    def clear(self) -> None:
        """Remove all registrations."""
        self._entries.clear()
