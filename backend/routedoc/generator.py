"""Build-phase owner of the registry and the schema resolver.

Typical use during application startup:

    gen = OpenApiGenerator()
    item_ref = gen.json_schema(Item)
    gen.add_operation(OperationInfo.of("/items", "GET", summary="List items",
                                       responses={"200": {"description": "OK"}}))
    document = gen.into_openapi()

`into_openapi()` consumes the generator; it cannot be reused afterwards.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from .assembler import assemble
from .models import Info, OpenApi, OperationInfo
from .openapi_parts.helpers import RawSchema
from .registry import OperationRegistry
from .resolver import SchemaResolver
from .settings import OpenApiSettings


class OpenApiGenerator:
    def __init__(self, settings: Optional[OpenApiSettings] = None):
        self._settings = settings or OpenApiSettings()
        self._registry = OperationRegistry()
        self._resolver = SchemaResolver(self._settings.schema_settings)

    @property
    def settings(self) -> OpenApiSettings:
        return self._settings

    def add_operation(self, info: OperationInfo) -> None:
        self._registry.register(info)

    def json_schema(self, tp: Any) -> Dict[str, Any]:
        return self._resolver.schema_for(tp)

    @property
    def schema_definitions(self) -> Dict[str, RawSchema]:
        return self._resolver.definitions

    def into_openapi(self, info: Optional[Info] = None) -> OpenApi:
        return assemble(self._registry, self._resolver, info)


__all__ = ["OpenApiGenerator"]
