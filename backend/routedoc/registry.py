"""Operation registry keyed by (route path, HTTP method)."""
from __future__ import annotations

import logging
from typing import Dict, List, Tuple

from .errors import GeneratorConsumedError, OperationConflictError
from .models import HttpMethod, Operation, OperationInfo
from .openapi_parts.helpers import normalize_operation_id

logger = logging.getLogger(__name__)

RouteKey = Tuple[str, HttpMethod]


class OperationRegistry:
    """Collects one operation per route.

    Owned by the build phase and fed explicitly by each registration call;
    no locking, callers registering from several threads must serialize.
    """

    def __init__(self):
        self._operations: Dict[RouteKey, Operation] = {}
        self._consumed = False

    def __len__(self) -> int:
        return len(self._operations)

    def __contains__(self, key) -> bool:
        path, method = key
        return (path, HttpMethod.parse(method)) in self._operations

    def register(self, info: OperationInfo) -> None:
        self._check_open()
        op = info.operation
        if op.operation_id:
            op = op.model_copy(update={"operation_id": normalize_operation_id(op.operation_id)})
        key = (info.path, info.method)
        if key in self._operations:
            raise OperationConflictError(info.method, info.path)
        self._operations[key] = op
        logger.debug("registered %s %s (operationId=%s)", info.method, info.path, op.operation_id)

    def drain(self) -> List[Tuple[str, HttpMethod, Operation]]:
        """Hand every registered operation over exactly once."""
        self._check_open()
        self._consumed = True
        operations, self._operations = self._operations, {}
        return [(path, method, op) for (path, method), op in operations.items()]

    def _check_open(self):
        if self._consumed:
            raise GeneratorConsumedError("operation registry was already consumed")


__all__ = ["OperationRegistry", "RouteKey"]
