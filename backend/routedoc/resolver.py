"""Schema reference resolver backed by pydantic.

Models, dataclasses, enums and TypedDicts come back as `$ref` objects and
their definitions are collected for `components.schemas`; everything else is
returned inline.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

from pydantic import PydanticUndefinedAnnotation, PydanticUserError, TypeAdapter

from .errors import GeneratorConsumedError, SchemaGenerationError
from .openapi_parts.helpers import RawSchema, to_schema_object
from .settings import SchemaSettings

logger = logging.getLogger(__name__)

_KEY = "schema"


class SchemaResolver:
    def __init__(self, schema_settings: Optional[SchemaSettings] = None):
        self._settings = schema_settings or SchemaSettings.openapi3()
        self._definitions: Dict[str, RawSchema] = {}
        self._consumed = False

    @property
    def settings(self) -> SchemaSettings:
        return self._settings

    @property
    def definitions(self) -> Dict[str, RawSchema]:
        """Snapshot of the named definitions discovered so far."""
        return dict(self._definitions)

    def schema_for(self, tp: Any) -> Dict[str, Any]:
        """Return a `$ref` or inline schema object describing `tp`.

        Raises SchemaGenerationError when pydantic cannot describe the type
        or when one of its definition names is already bound to a different
        schema; nothing is recorded in either case.
        """
        self._check_open()
        raw, definitions = self._generate(tp)
        for name, schema in definitions.items():
            if name not in self._definitions:
                logger.debug("new schema definition %s", name)
            elif self._definitions[name] != schema:
                # an earlier $ref already points at the stored schema
                raise SchemaGenerationError(tp, f"definition {name!r} is already taken by a different schema")
        self._definitions.update(definitions)
        return to_schema_object(raw)

    def into_definitions(self) -> Dict[str, Dict[str, Any]]:
        """Drain the definitions table, converting boolean schemas to objects."""
        self._check_open()
        self._consumed = True
        definitions, self._definitions = self._definitions, {}
        return {name: to_schema_object(raw) for name, raw in definitions.items()}

    def _generate(self, tp: Any) -> Tuple[RawSchema, Dict[str, RawSchema]]:
        s = self._settings
        try:
            adapter = TypeAdapter(tp)
            schemas, top = TypeAdapter.json_schemas(
                [(_KEY, s.mode, adapter)],
                by_alias=s.by_alias,
                ref_template=s.ref_template,
                schema_generator=s.generator_class,
            )
        except (PydanticUserError, PydanticUndefinedAnnotation) as exc:
            raise SchemaGenerationError(tp, exc) from exc
        return schemas[(_KEY, s.mode)], top.get("$defs", {})

    def _check_open(self):
        if self._consumed:
            raise GeneratorConsumedError("schema resolver was already consumed")


__all__ = ["SchemaResolver"]
