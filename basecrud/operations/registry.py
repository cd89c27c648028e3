"""Operation handler registry.

Each operation tag (``create``, ``get``, ``getAll``, ``update``, ``delete``)
maps to exactly one handler. Handlers register themselves on import:

    @register_operation("get")
    def get_record(operation, connector, context):
        ...
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from basecrud.core.exceptions import ParameterError

if TYPE_CHECKING:
    from basecrud.connectors.base import RecordConnector
    from basecrud.core.context import ExecutionContext

OperationHandler = Callable[[Any, "RecordConnector", "ExecutionContext"], dict]

_operation_registry: dict[str, OperationHandler] = {}


def register_operation(
    operation_type: str,
) -> Callable[[OperationHandler], OperationHandler]:
    """Register a handler for an operation tag (decorator).

    Raises:
        ValueError: If a handler for the tag is already registered.
    """

    def _register(handler: OperationHandler) -> OperationHandler:
        if operation_type in _operation_registry:
            raise ValueError(f"Operation '{operation_type}' is already registered")
        _operation_registry[operation_type] = handler
        return handler

    return _register


def get_handler(operation_type: str) -> OperationHandler:
    """Return the handler for an operation tag.

    Raises:
        ParameterError: If no handler is registered for the tag.
    """
    handler = _operation_registry.get(operation_type)
    if handler is None:
        available = ", ".join(sorted(_operation_registry.keys())) or "(none)"
        raise ParameterError(
            f"Unknown operation: '{operation_type}'",
            context={"operation": operation_type, "available": available},
        )
    return handler


def list_operation_types() -> list[str]:
    """Return all registered operation tags."""
    return sorted(_operation_registry.keys())
