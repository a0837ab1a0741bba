"""Settings threaded into schema generation and document serving.

Defaults target OpenAPI 3.0: named schemas live under
`#/components/schemas/` and the document is served at
`/swagger/swagger.json`.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Type

from pydantic.json_schema import GenerateJsonSchema

from .openapi_parts.constants import DEFAULT_JSON_PATH, REF_TEMPLATE, SCHEMA_MODES
from .openapi_parts.dialect import OpenApi30GenerateJsonSchema


@dataclass(frozen=True)
class SchemaSettings:
    ref_template: str = REF_TEMPLATE
    mode: str = "validation"
    by_alias: bool = True
    generator_class: Type[GenerateJsonSchema] = OpenApi30GenerateJsonSchema

    def __post_init__(self):
        if self.mode not in SCHEMA_MODES:
            raise ValueError(f"schema mode must be one of {', '.join(SCHEMA_MODES)}")
        if "{model}" not in self.ref_template:
            raise ValueError("ref_template must contain a {model} placeholder")

    @classmethod
    def openapi3(cls) -> "SchemaSettings":
        return cls()

    @classmethod
    def draft2020_12(cls) -> "SchemaSettings":
        """pydantic's native dialect, still rooted at components.schemas."""
        return cls(generator_class=GenerateJsonSchema)

    def with_mode(self, mode: str) -> "SchemaSettings":
        return replace(self, mode=mode)


@dataclass(frozen=True)
class OpenApiSettings:
    schema_settings: SchemaSettings = field(default_factory=SchemaSettings.openapi3)
    json_path: str = DEFAULT_JSON_PATH

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> "OpenApiSettings":
        """Build settings from a Flask-style config mapping.

        Recognised keys: OPENAPI_JSON_PATH, OPENAPI_SCHEMA_MODE. Missing keys
        keep their defaults.
        """
        json_path = config.get("OPENAPI_JSON_PATH") or DEFAULT_JSON_PATH
        if not json_path.startswith("/"):
            raise ValueError("OPENAPI_JSON_PATH must start with '/'")
        schema_settings = SchemaSettings.openapi3()
        mode = config.get("OPENAPI_SCHEMA_MODE")
        if mode:
            schema_settings = schema_settings.with_mode(mode)
        return cls(schema_settings=schema_settings, json_path=json_path)


__all__ = ["SchemaSettings", "OpenApiSettings"]
