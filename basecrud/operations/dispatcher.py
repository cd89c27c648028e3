"""Dispatch of resolved operations to the connector."""

import logging
from typing import Any

from basecrud.connectors.base import RecordConnector
from basecrud.core.context import ExecutionContext
from basecrud.core.exceptions import OperationError
from basecrud.operations.models import (
    CreateRecord,
    DeleteRecord,
    GetRecord,
    ListRecords,
    Operation,
    UpdateRecord,
)
from basecrud.operations.pagination import collect_items, iter_pages
from basecrud.operations.registry import get_handler, register_operation

logger = logging.getLogger(__name__)


def ensure_success(response: dict[str, Any], context: ExecutionContext) -> dict[str, Any]:
    """Raise OperationError unless the service reported ``code == 0``.

    The HTTP layer may have succeeded; a non-zero ``code`` still means the
    operation was rejected. A body that is not a JSON object, or whose
    ``data`` is not an object, is rejected the same way.
    """
    if not isinstance(response, dict):
        raise OperationError(
            f"unexpected response of type '{type(response).__name__}'",
            context={"item_index": context.item_index},
        )
    code = response.get("code")
    if code != 0:
        raise OperationError(
            response.get("msg"),
            code=code,
            context={"item_index": context.item_index},
        )
    data = response.get("data")
    if data is not None and not isinstance(data, dict):
        raise OperationError(
            f"unexpected response data of type '{type(data).__name__}'",
            code=code,
            context={"item_index": context.item_index},
        )
    return response


def dispatch(
    operation: Operation,
    connector: RecordConnector,
    context: ExecutionContext,
) -> dict[str, Any]:
    """Run one resolved operation and return the validated service response.

    Raises:
        OperationError: If the service rejects the request.
        requests.RequestException: On transport failure.
    """
    handler = get_handler(operation.operation)
    logger.debug(
        f"Dispatching {operation.operation} on table {operation.table.table_id}",
        extra=context.log_extra(),
    )
    return handler(operation, connector, context)


@register_operation("create")
def create_record(
    operation: CreateRecord, connector: RecordConnector, context: ExecutionContext
) -> dict[str, Any]:
    return ensure_success(
        connector.create_record(operation.table, operation.fields), context
    )


@register_operation("get")
def get_record(
    operation: GetRecord, connector: RecordConnector, context: ExecutionContext
) -> dict[str, Any]:
    return ensure_success(
        connector.get_record(operation.table, operation.record_id), context
    )


@register_operation("getAll")
def list_records(
    operation: ListRecords, connector: RecordConnector, context: ExecutionContext
) -> dict[str, Any]:
    """List one page, or every page when ``return_all`` is set.

    For return-all the page size is left to the service and the first
    response is returned with ``data.items`` replaced by all records.
    """
    if not operation.return_all:
        return ensure_success(
            connector.list_records(operation.table, page_size=operation.limit),
            context,
        )

    def fetch_page(page_token: str | None) -> dict[str, Any]:
        return ensure_success(
            connector.list_records(operation.table, page_token=page_token), context
        )

    pages = list(iter_pages(fetch_page))
    response = pages[0]
    if len(pages) > 1:
        response.setdefault("data", {})["items"] = collect_items(pages)
        logger.info(
            f"Fetched {len(pages)} pages",
            extra=context.log_extra(),
        )
    return response


@register_operation("update")
def update_record(
    operation: UpdateRecord, connector: RecordConnector, context: ExecutionContext
) -> dict[str, Any]:
    return ensure_success(
        connector.update_record(
            operation.table, operation.record_id, operation.fields
        ),
        context,
    )


@register_operation("delete")
def delete_record(
    operation: DeleteRecord, connector: RecordConnector, context: ExecutionContext
) -> dict[str, Any]:
    return ensure_success(
        connector.delete_record(operation.table, operation.record_id), context
    )
