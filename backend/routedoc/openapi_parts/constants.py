"""Centralized constants for the OpenAPI document builder.

The method-to-slot table is the only place that decides where an operation
lands inside a path item. Every `HttpMethod` member must appear here.
"""
from typing import Dict, Optional

from ..models import HttpMethod

OPENAPI_VERSION = "3.0.0"

# Conventional serving path for the assembled document
DEFAULT_JSON_PATH = "/swagger/swagger.json"

# Named definitions are emitted under components.schemas
REF_TEMPLATE = "#/components/schemas/{model}"

SCHEMA_MODES = ("validation", "serialization")

METHOD_SLOTS: Dict[HttpMethod, Optional[str]] = {
    HttpMethod.GET: "get",
    HttpMethod.PUT: "put",
    HttpMethod.POST: "post",
    HttpMethod.DELETE: "delete",
    HttpMethod.OPTIONS: "options",
    HttpMethod.HEAD: "head",
    HttpMethod.PATCH: "patch",
    HttpMethod.TRACE: "trace",
    # OpenAPI 3.0 path items have no connect field
    HttpMethod.CONNECT: None,
}

__all__ = [
    "OPENAPI_VERSION",
    "DEFAULT_JSON_PATH",
    "REF_TEMPLATE",
    "SCHEMA_MODES",
    "METHOD_SLOTS",
]
