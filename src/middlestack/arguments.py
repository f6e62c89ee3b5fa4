"""Argument-list normalisation between chained middlewares.

Every middleware returns the *next* argument list. Returning a ``list`` or
``tuple`` passes its items on as positional arguments; returning any other
single value passes it on as the only argument. Only a narrow class of
outputs is rejected:

* ``None``, usually a middleware that forgot to ``return``;
* unordered containers (sets, mappings), whose spread order is undefined;
* iterators and generators, which can only be consumed once.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Set
from typing import Any


def is_list_shaped(value: Any) -> bool:
    """Return whether *value* can be used as the next argument list."""
    if isinstance(value, (list, tuple)):
        return True
    if value is None:
        return False
    return not isinstance(value, (Set, Mapping, Iterator))


def as_argument_list(value: Any) -> list[Any]:
    """Coerce a middleware output into an argument list.

    Raises ``TypeError`` when *value* is not list-shaped.
    """
    if isinstance(value, (list, tuple)):
        return list(value)
    if not is_list_shaped(value):
        raise TypeError(f"{value!r} cannot be used as an argument list")
    return [value]
