"""Helper functions shared by the registry and the schema resolver."""
from typing import Any, Dict, Mapping, Union

RawSchema = Union[bool, Mapping[str, Any]]


def normalize_operation_id(op_id: str) -> str:
    """Strip leading separators and join namespace segments with `_`.

    `::items::list` and `items.list` both become `items_list`.
    """
    return op_id.lstrip(":.").replace("::", "_").replace(".", "_")


def to_schema_object(raw: RawSchema) -> Dict[str, Any]:
    """Map a generated schema onto the inline-object-or-reference form.

    OpenAPI 3.0 has no boolean schemas: `true` becomes the unconstrained
    object and `false` becomes its negation.
    """
    if raw is True:
        return {}
    if raw is False:
        return {"not": {}}
    if isinstance(raw, Mapping):
        return dict(raw)
    raise TypeError(f"Unsupported schema value {raw!r}")


__all__ = ["RawSchema", "normalize_operation_id", "to_schema_object"]
