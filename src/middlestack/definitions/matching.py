"""Type-matching strategies for :class:`~middlestack.definitions.ArrayDefinition`."""

from __future__ import annotations

from typing import Any


def exact_type_match(middleware: Any, middleware_type: Any) -> bool:
    """Match only instances whose concrete type is *middleware_type*."""
    return type(middleware) is middleware_type


def subtype_match(middleware: Any, middleware_type: Any) -> bool:
    """Match instances of *middleware_type* or any of its subclasses."""
    return isinstance(middleware, middleware_type)
