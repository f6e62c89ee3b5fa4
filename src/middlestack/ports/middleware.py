"""IMiddleware — one-way middleware protocol."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IMiddleware(Protocol):
    """Protocol for a single transformation step in a :class:`~middlestack.Stack`.

    A middleware receives the current argument list spread as positional
    arguments and returns the next argument list. A ``list`` or ``tuple`` is
    used as-is; any other single value becomes a one-element list (see
    :func:`middlestack.arguments.as_argument_list`).

    Because the arguments are spread, a middleware can name exactly what it
    expects::

        class EmailMiddleware:
            def __call__(self, first, last, email):
                return f"{email} <{first} {last}>"
    """

    def __call__(self, *args: Any) -> Any:
        """Transform the argument list and return the next one."""
        ...


class Middleware:
    """Marker base class for middlewares.

    Subclassing is optional: any callable is a middleware. The marker itself
    implements nothing, so a bare ``Middleware()`` is *not* valid.
    """

    @staticmethod
    def valid(candidate: object) -> bool:
        """Alias of :func:`is_valid_middleware`."""
        return is_valid_middleware(candidate)


def is_valid_middleware(candidate: object) -> bool:
    """Return whether *candidate* can be used as a middleware.

    This is a capability check, not a type check: functions, lambdas, bound
    methods and instances with ``__call__`` all qualify. Classes do not:
    calling a class builds an instance rather than transforming arguments.
    """
    return callable(candidate) and not isinstance(candidate, type)
