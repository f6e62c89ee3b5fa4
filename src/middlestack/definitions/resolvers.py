"""Tie resolvers for :class:`~middlestack.definitions.ArrayDefinition`.

A resolver receives every middleware matched to one permitted type (in input
order) and returns them in the order they should run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence


def identity_resolver(ties: Sequence[Any]) -> Sequence[Any]:
    """Keep tied middlewares in the order they were added."""
    return ties


def sort_by(
    key: Callable[[Any], Any], *, reverse: bool = False
) -> Callable[[Sequence[Any]], list[Any]]:
    """Build a resolver that stably sorts ties by *key*.

    Usage::

        definition = ArrayDefinition(
            [Multiplier, Parentheses],
            resolver=sort_by(lambda m: m.priority),
        )
    """

    def resolver(ties: Sequence[Any]) -> list[Any]:
        return sorted(ties, key=key, reverse=reverse)

    return resolver
