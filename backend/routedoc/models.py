"""Typed OpenAPI 3.0 object model.

Only the parts of the document this package assembles are modelled; anything
else a caller puts on an operation (`x-*` extensions, `callbacks`, ...) is
kept as an extra field and serialized untouched.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class HttpMethod(str, Enum):
    GET = "GET"
    PUT = "PUT"
    POST = "POST"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"
    HEAD = "HEAD"
    PATCH = "PATCH"
    TRACE = "TRACE"
    CONNECT = "CONNECT"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Any) -> "HttpMethod":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            raise ValueError(f"Unknown HTTP method {value!r}") from None


class Operation(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    summary: Optional[str] = None
    description: Optional[str] = None
    operation_id: Optional[str] = Field(default=None, alias="operationId")
    tags: Optional[List[str]] = None
    parameters: Optional[List[Dict[str, Any]]] = None
    request_body: Optional[Dict[str, Any]] = Field(default=None, alias="requestBody")
    responses: Dict[str, Any] = Field(default_factory=dict)
    deprecated: Optional[bool] = None


class OperationInfo(BaseModel):
    """One endpoint as handed over by the route extraction layer."""

    path: str
    method: HttpMethod
    operation: Operation

    @classmethod
    def of(cls, path: str, method: Any, **operation: Any) -> "OperationInfo":
        return cls(path=path, method=HttpMethod.parse(method), operation=Operation(**operation))


class PathItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    get: Optional[Operation] = None
    put: Optional[Operation] = None
    post: Optional[Operation] = None
    delete: Optional[Operation] = None
    options: Optional[Operation] = None
    head: Optional[Operation] = None
    patch: Optional[Operation] = None
    trace: Optional[Operation] = None


class Info(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = ""
    version: str = ""
    description: Optional[str] = None


class Components(BaseModel):
    model_config = ConfigDict(frozen=True)

    schemas: Dict[str, Dict[str, Any]] = Field(default_factory=dict)


class OpenApi(BaseModel):
    model_config = ConfigDict(frozen=True)

    openapi: str
    info: Info = Field(default_factory=Info)
    paths: Dict[str, PathItem] = Field(default_factory=dict)
    components: Components = Field(default_factory=Components)

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-ready document (camelCase keys, unset fields omitted)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


__all__ = [
    "HttpMethod",
    "Operation",
    "OperationInfo",
    "PathItem",
    "Info",
    "Components",
    "OpenApi",
]
