"""Resolve job parameters into one operation variant per input item."""

from typing import Any, Callable, Mapping

from pydantic import ValidationError

from basecrud.core.context import ExecutionContext
from basecrud.core.exceptions import JobError, ParameterError
from basecrud.models.templates import render_item_templates
from basecrud.operations.models import (
    CreateRecord,
    DeleteRecord,
    GetRecord,
    ListRecords,
    Operation,
    OperationParameters,
    OperationType,
    TableRef,
    UpdateRecord,
)
from basecrud.operations.payload import PayloadStrategy, build_payload, select_strategy

_COMMON_FIELDS = ("operation", "app_token", "table_id")
_PAYLOAD_FIELDS = ("kind", "mapping_mode", "values_to_send")
# Typed at load time, so they never hold item templates
_UNTEMPLATED_FIELDS = ("operation", "return_all", "limit")

# Parameters each operation reads; the rest are not rendered for the item
_OPERATION_FIELDS: dict[OperationType, tuple[str, ...]] = {
    OperationType.CREATE: _PAYLOAD_FIELDS,
    OperationType.GET: ("record_id",),
    OperationType.GET_ALL: ("return_all", "limit"),
    OperationType.UPDATE: ("record_id",) + _PAYLOAD_FIELDS,
    OperationType.DELETE: ("record_id",),
}


def _require_record_id(params: OperationParameters, context: ExecutionContext) -> str:
    if not params.record_id:
        raise ParameterError(
            f"Missing required parameter 'record_id' for operation '{params.operation.value}'",
            context={"item_index": context.item_index},
        )
    return params.record_id


def _payload(params: OperationParameters, item: Mapping[str, Any]) -> dict[str, Any]:
    return build_payload(params.kind, params.mapping_mode, params.values_to_send, item)


def _build_create(params, table, item, context) -> CreateRecord:
    return CreateRecord(table=table, fields=_payload(params, item))


def _build_get(params, table, item, context) -> GetRecord:
    return GetRecord(table=table, record_id=_require_record_id(params, context))


def _build_list(params, table, item, context) -> ListRecords:
    return ListRecords(table=table, return_all=params.return_all, limit=params.limit)


def _build_update(params, table, item, context) -> UpdateRecord:
    record_id = _require_record_id(params, context)
    return UpdateRecord(table=table, record_id=record_id, fields=_payload(params, item))


def _build_delete(params, table, item, context) -> DeleteRecord:
    return DeleteRecord(table=table, record_id=_require_record_id(params, context))


_BUILDERS: dict[OperationType, Callable[..., Operation]] = {
    OperationType.CREATE: _build_create,
    OperationType.GET: _build_get,
    OperationType.GET_ALL: _build_list,
    OperationType.UPDATE: _build_update,
    OperationType.DELETE: _build_delete,
}


def render_parameters(
    parameters: OperationParameters,
    item: Mapping[str, Any],
    context: ExecutionContext,
) -> OperationParameters:
    """Render per-item templates in the parameters and re-validate them.

    Raises:
        ParameterError: If a template cannot be resolved against the item or
            the rendered parameters are invalid.
    """
    fields = _COMMON_FIELDS + _OPERATION_FIELDS[parameters.operation]
    if select_strategy(parameters.kind, parameters.mapping_mode) is not PayloadStrategy.MANUAL:
        fields = tuple(f for f in fields if f != "values_to_send")
    raw = parameters.model_dump(mode="json", include=set(fields))
    fixed = {k: raw.pop(k) for k in _UNTEMPLATED_FIELDS if k in raw}
    try:
        rendered = render_item_templates(raw, dict(item), context.item_index)
        return OperationParameters.model_validate({**rendered, **fixed})
    except JobError as e:
        raise ParameterError(
            e.message, context={**e.context, "item_index": context.item_index}
        ) from e
    except ValidationError as e:
        raise ParameterError(
            f"Invalid parameters: {e}", context={"item_index": context.item_index}
        ) from e


def resolve_operation(
    parameters: OperationParameters,
    item: Mapping[str, Any],
    context: ExecutionContext,
) -> Operation:
    """Turn job parameters and one input item into an operation variant.

    No request is made here, so every ParameterError surfaces before the
    network is touched.

    Raises:
        ParameterError: If a required parameter is missing or invalid.
    """
    params = render_parameters(parameters, item, context)

    try:
        table = TableRef(app_token=params.app_token, table_id=params.table_id)
    except ValidationError as e:
        raise ParameterError(
            "Missing required parameter 'app_token' or 'table_id'",
            context={"item_index": context.item_index},
        ) from e

    builder = _BUILDERS[params.operation]
    try:
        return builder(params, table, item, context)
    except ValidationError as e:
        raise ParameterError(
            f"Invalid parameters for operation '{params.operation.value}': {e}",
            context={"item_index": context.item_index},
        ) from e
