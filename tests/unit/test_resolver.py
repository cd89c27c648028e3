"""Tests for resolving job parameters into operation variants."""

import pytest
from pydantic import ValidationError

from basecrud.core.context import ExecutionContext
from basecrud.core.exceptions import ParameterError
from basecrud.operations.models import (
    CreateRecord,
    DeleteRecord,
    GetRecord,
    ListRecords,
    MAX_PAGE_SIZE,
    OperationParameters,
    UpdateRecord,
)
from basecrud.operations.resolver import render_parameters, resolve_operation


def params(**overrides) -> OperationParameters:
    return OperationParameters(
        **{"app_token": "bascnApp", "table_id": "tblTable", **overrides}
    )


class TestOperationParameters:
    """Tests for OperationParameters validation."""

    def test_defaults(self):
        p = params()
        assert p.operation.value == "create"
        assert p.kind.value == "mapEachColumns"
        assert p.mapping_mode.value == "mapEachColumnManually"
        assert p.values_to_send == []
        assert p.return_all is False
        assert p.limit == 50

    @pytest.mark.parametrize("limit", [0, -1, MAX_PAGE_SIZE + 1])
    def test_limit_out_of_range_rejected(self, limit):
        with pytest.raises(ValidationError):
            params(operation="getAll", limit=limit)

    def test_unknown_operation_rejected(self):
        with pytest.raises(ValidationError):
            params(operation="upsert")

    def test_limit_cannot_be_templated(self):
        with pytest.raises(ValidationError):
            params(operation="getAll", limit="{{ item.limit }}")


class TestResolveOperation:
    """Tests for resolve_operation."""

    def test_create_manual(self, context):
        op = resolve_operation(
            params(values_to_send=[{"field_id": "name", "field_value": "Bob"}]),
            {"name": "Alice"},
            context,
        )
        assert isinstance(op, CreateRecord)
        assert op.fields == {"name": "Bob"}
        assert op.table.app_token == "bascnApp"
        assert op.table.table_id == "tblTable"

    def test_create_auto_map(self, context):
        item = {"name": "Alice", "age": 30}
        op = resolve_operation(
            params(mapping_mode="autoMapByColumnNames"), item, context
        )
        assert op.fields == item

    def test_update_raw(self, context):
        item = {"Status": "done"}
        op = resolve_operation(
            params(operation="update", kind="sendRawData", record_id="rec1"),
            item,
            context,
        )
        assert isinstance(op, UpdateRecord)
        assert op.record_id == "rec1"
        assert op.fields == item

    def test_get(self, context):
        op = resolve_operation(params(operation="get", record_id="rec1"), {}, context)
        assert isinstance(op, GetRecord)

    def test_get_all(self, context):
        op = resolve_operation(
            params(operation="getAll", return_all=True, limit=10), {}, context
        )
        assert isinstance(op, ListRecords)
        assert op.return_all is True
        assert op.limit == 10

    @pytest.mark.parametrize("operation", ["get", "update", "delete"])
    @pytest.mark.parametrize("record_id", [None, ""])
    def test_missing_record_id(self, operation, record_id):
        context = ExecutionContext(job_name="j", item_index=2)

        with pytest.raises(ParameterError) as exc_info:
            resolve_operation(params(operation=operation, record_id=record_id), {}, context)

        assert "record_id" in exc_info.value.message
        assert exc_info.value.context["item_index"] == 2

    def test_empty_table_ref(self, context):
        with pytest.raises(ParameterError, match="table_id"):
            resolve_operation(
                params(operation="delete", record_id="r", table_id=""), {}, context
            )


class TestItemTemplates:
    """Tests for per-item parameter rendering."""

    def test_record_id_from_item(self, context):
        op = resolve_operation(
            params(operation="delete", record_id="{{ item.record_id }}"),
            {"record_id": "recXYZ"},
            context,
        )
        assert isinstance(op, DeleteRecord)
        assert op.record_id == "recXYZ"

    def test_field_value_from_nested_item(self, context):
        op = resolve_operation(
            params(
                values_to_send=[
                    {"field_id": "Email", "field_value": "{{ item.contact.email }}"},
                    {"field_id": "Row", "field_value": "row-{{ item_index }}"},
                ]
            ),
            {"contact": {"email": "a@example.com"}},
            ExecutionContext(job_name="j", item_index=7),
        )
        assert op.fields == {"Email": "a@example.com", "Row": "row-7"}

    def test_table_from_item(self, context):
        op = resolve_operation(
            params(operation="getAll", table_id="{{ item.table }}"),
            {"table": "tblOther"},
            context,
        )
        assert op.table.table_id == "tblOther"

    def test_missing_item_key(self):
        context = ExecutionContext(job_name="j", item_index=1)

        with pytest.raises(ParameterError) as exc_info:
            resolve_operation(
                params(operation="get", record_id="{{ item.record_id }}"), {}, context
            )
        assert exc_info.value.context["item_index"] == 1

    def test_unused_parameters_not_rendered(self, context):
        op = resolve_operation(
            params(
                operation="create",
                record_id="{{ item.record_id }}",
                values_to_send=[{"field_id": "name", "field_value": "{{ item.name }}"}],
            ),
            {"name": "Alice"},
            context,
        )
        assert op.fields == {"name": "Alice"}

    def test_manual_values_not_rendered_for_raw_data(self, context):
        op = resolve_operation(
            params(
                kind="sendRawData",
                values_to_send=[{"field_id": "x", "field_value": "{{ item.missing }}"}],
            ),
            {"name": "Alice"},
            context,
        )
        assert op.fields == {"name": "Alice"}

    def test_parameters_not_mutated(self, context):
        p = params(operation="delete", record_id="{{ item.id }}")
        resolve_operation(p, {"id": "r1"}, context)
        assert p.record_id == "{{ item.id }}"

    def test_typed_list_fields_carried_through(self, context):
        rendered = render_parameters(
            params(operation="getAll", table_id="{{ item.table }}", return_all=True, limit=7),
            {"table": "tblOther"},
            context,
        )
        assert rendered.table_id == "tblOther"
        assert rendered.return_all is True
        assert rendered.limit == 7
