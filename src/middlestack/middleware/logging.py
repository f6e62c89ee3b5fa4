"""LoggingMiddleware — logs the argument list flowing through a stack."""

from __future__ import annotations

import logging
from typing import Any

from ..ports.middleware import Middleware

logger = logging.getLogger("middlestack.middleware")


class LoggingMiddleware(Middleware):
    """Pass-through middleware that logs the arguments it receives.

    Place it in a definition wherever the intermediate argument list is of
    interest; it returns its input unchanged.
    """

    def __init__(self, level: int = logging.DEBUG, name: str | None = None) -> None:
        self.level = level
        self.name = name or type(self).__name__

    def __call__(self, *args: Any) -> tuple[Any, ...]:
        logger.log(
            self.level, "%s received %d argument(s): %r", self.name, len(args), args
        )
        return args
