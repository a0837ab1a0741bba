"""JSON Schema dialect used for OpenAPI 3.0 documents.

pydantic emits draft 2020-12 schemas. OpenAPI 3.0 predates that draft, so
nullability is expressed with `nullable: true` and single-value literals with
`enum` instead of `const`.
"""
from pydantic.json_schema import GenerateJsonSchema, JsonSchemaValue
from pydantic_core import core_schema

NULL_SCHEMA = {"type": "null"}


class OpenApi30GenerateJsonSchema(GenerateJsonSchema):
    def nullable_schema(self, schema: core_schema.NullableSchema) -> JsonSchemaValue:
        inner = self.generate_inner(schema["schema"])
        if inner == NULL_SCHEMA:
            return {"nullable": True}
        if "$ref" in inner:
            # siblings of $ref are ignored in 3.0
            return {"allOf": [inner], "nullable": True}
        return {**inner, "nullable": True}

    def literal_schema(self, schema: core_schema.LiteralSchema) -> JsonSchemaValue:
        json_schema = super().literal_schema(schema)
        if "const" in json_schema:
            value = json_schema.pop("const")
            json_schema.setdefault("enum", [value])
        return json_schema


__all__ = ["OpenApi30GenerateJsonSchema"]
