from middlestack.ports.definition import Definition, IDefinition, is_valid_definition
from middlestack.ports.middleware import IMiddleware, Middleware, is_valid_middleware
from middlestack.ports.validation import IValidator

__all__ = [
    "Definition",
    "IDefinition",
    "IMiddleware",
    "IValidator",
    "Middleware",
    "is_valid_definition",
    "is_valid_middleware",
]
