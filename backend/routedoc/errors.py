"""Exception types raised while building an OpenAPI document.

Duplicate registrations are programming errors: callers are expected to let
`OperationConflictError` abort application startup. Schema generation errors
are recoverable and carry the type that could not be described.
"""
from typing import Any


class RouteDocError(Exception):
    """Base class for all routedoc errors."""


class OperationConflictError(RouteDocError):
    def __init__(self, method: Any, path: str):
        self.method = method
        self.path = path
        super().__init__(f"An OpenAPI operation has already been added for {method} {path}")


class SchemaGenerationError(RouteDocError):
    def __init__(self, type_: Any, reason: Any = None):
        self.type_ = type_
        self.reason = reason
        name = getattr(type_, '__name__', None) or repr(type_)
        detail = f": {reason}" if reason else ''
        super().__init__(f"Unable to generate a JSON schema for {name}{detail}")


class GeneratorConsumedError(RouteDocError):
    """Raised when a registry, resolver or generator is used after assembly consumed it."""


__all__ = [
    "RouteDocError",
    "OperationConflictError",
    "SchemaGenerationError",
    "GeneratorConsumedError",
]
