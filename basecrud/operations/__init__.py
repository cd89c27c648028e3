"""Record operations: variants, payload assembly, pagination and dispatch."""

from basecrud.operations.models import (
    CreateRecord,
    DeleteRecord,
    FieldAssignment,
    GetRecord,
    ListRecords,
    MappingMode,
    Operation,
    OperationParameters,
    OperationType,
    RecordKind,
    TableRef,
    UpdateRecord,
)
from basecrud.operations.pagination import collect_items, fetch_all, iter_pages
from basecrud.operations.payload import build_payload

__all__ = [
    "CreateRecord",
    "DeleteRecord",
    "FieldAssignment",
    "GetRecord",
    "ListRecords",
    "MappingMode",
    "Operation",
    "OperationParameters",
    "OperationType",
    "RecordKind",
    "TableRef",
    "UpdateRecord",
    "build_payload",
    "collect_items",
    "fetch_all",
    "iter_pages",
]
