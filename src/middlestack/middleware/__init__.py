"""Ready-made middlewares."""

from .logging import LoggingMiddleware
from .validation import ValidatorMiddleware

__all__ = [
    "LoggingMiddleware",
    "ValidatorMiddleware",
]
