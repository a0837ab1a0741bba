"""Assemble an OpenAPI 3.0 document from registered operations.

Public import surface; implementation lives in the submodules.
"""
from .assembler import assemble, set_operation  # noqa: F401
from .errors import (  # noqa: F401
    GeneratorConsumedError,
    OperationConflictError,
    RouteDocError,
    SchemaGenerationError,
)
from .generator import OpenApiGenerator  # noqa: F401
from .models import (  # noqa: F401
    Components,
    HttpMethod,
    Info,
    OpenApi,
    Operation,
    OperationInfo,
    PathItem,
)
from .registry import OperationRegistry  # noqa: F401
from .resolver import SchemaResolver  # noqa: F401
from .settings import OpenApiSettings, SchemaSettings  # noqa: F401

__all__ = [
    "assemble",
    "set_operation",
    "GeneratorConsumedError",
    "OperationConflictError",
    "RouteDocError",
    "SchemaGenerationError",
    "OpenApiGenerator",
    "Components",
    "HttpMethod",
    "Info",
    "OpenApi",
    "Operation",
    "OperationInfo",
    "PathItem",
    "OperationRegistry",
    "SchemaResolver",
    "OpenApiSettings",
    "SchemaSettings",
]
