"""Definition implementations."""

from __future__ import annotations

from .array import ArrayDefinition
from .matching import exact_type_match, subtype_match
from .open import OpenDefinition
from .priority import PriorityDefinition
from .resolvers import identity_resolver, sort_by

__all__ = [
    "ArrayDefinition",
    "OpenDefinition",
    "PriorityDefinition",
    "exact_type_match",
    "identity_resolver",
    "sort_by",
    "subtype_match",
]
