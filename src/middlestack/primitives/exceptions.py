"""Exceptions raised by middlestack."""

from __future__ import annotations

from typing import Any


class MiddlestackError(Exception):
    """Root exception for the entire middlestack package.

    Catch this to handle any middlestack-specific failure::

        try:
            stack.call("input")
        except MiddlestackError:
            ...
    """


class InvalidDefinitionError(MiddlestackError):
    """Raised when an object that is not a valid definition is used like one."""

    def __init__(self, definition: Any) -> None:
        self.definition = definition
        super().__init__(f"The middleware definition {definition!r} is invalid")


class InvalidMiddlewareError(MiddlestackError):
    """Raised when an object that is not a valid middleware is used like one."""

    def __init__(self, middleware: Any) -> None:
        self.middleware = middleware
        super().__init__(f"The middleware {middleware!r} is not a valid middleware")


class UnpermittedMiddlewareError(MiddlestackError):
    """Raised when a middleware is not permitted by the stack's definition."""

    def __init__(self, middleware: Any) -> None:
        self.middleware = middleware
        super().__init__(
            f"The middleware {middleware!r} is not permitted by the definition"
        )


class InvalidMiddlewareOutputError(MiddlestackError):
    """Raised when a middleware returns something that is not an argument list.

    Middlewares that ran before the offending one are not rolled back.
    """

    def __init__(self, middleware: Any, output: Any) -> None:
        self.middleware = middleware
        self.output = output
        super().__init__(
            f"The middleware {middleware!r} returned {output!r}, "
            "which is not an argument list"
        )


class ArgumentValidationError(MiddlestackError):
    """Raised when an argument list fails validation.

    *errors* maps a location inside the argument list (``"0"``, ``"1.name"``,
    ``"args"`` for the list itself) to its messages.
    """

    def __init__(
        self, errors: dict[str, list[str]], args: tuple[Any, ...] = ()
    ) -> None:
        self.errors = errors
        self.arguments = args
        details = "; ".join(
            f"{location}: {', '.join(messages)}"
            for location, messages in errors.items()
        )
        super().__init__(f"Invalid arguments: {details}")
