"""Document assembler: registry + resolver -> OpenApi.

Single pass, not restartable. Each path is independent, so the order in
which operations come out of the registry does not matter.
"""
from __future__ import annotations

import logging
from typing import Dict, Optional

from .errors import OperationConflictError
from .models import Components, HttpMethod, Info, OpenApi, Operation, PathItem
from .openapi_parts.constants import METHOD_SLOTS, OPENAPI_VERSION
from .registry import OperationRegistry
from .resolver import SchemaResolver

logger = logging.getLogger(__name__)


def set_operation(path_item: PathItem, method: HttpMethod, op: Operation, path: str = "") -> Optional[PathItem]:
    """Return a copy of `path_item` with `op` in the slot for `method`.

    Returns None when the method has no slot (CONNECT). A filled slot is
    never overwritten; path items are frozen, so the input is left as is.
    """
    slot = METHOD_SLOTS[method]
    if slot is None:
        logger.debug("dropping %s %s: no OpenAPI 3.0 slot", method, path)
        return None
    if getattr(path_item, slot) is not None:
        raise OperationConflictError(method, path)
    return path_item.model_copy(update={slot: op})


def assemble(registry: OperationRegistry, resolver: SchemaResolver, info: Optional[Info] = None) -> OpenApi:
    """Consume `registry` and `resolver` into a frozen document.

    A path is only created once one of its operations lands in a slot, so a
    path registered solely with CONNECT does not appear at all. This departs
    on purpose from emitting an empty path item for it.
    """
    paths: Dict[str, PathItem] = {}
    placed = 0
    for path, method, op in registry.drain():
        updated = set_operation(paths.get(path, PathItem()), method, op, path)
        if updated is not None:
            paths[path] = updated
            placed += 1
    schemas = resolver.into_definitions()
    logger.debug("assembled %d operations over %d paths, %d schemas", placed, len(paths), len(schemas))
    return OpenApi(
        openapi=OPENAPI_VERSION,
        info=info or Info(),
        paths=paths,
        components=Components(schemas=schemas),
    )


__all__ = ["set_operation", "assemble"]
