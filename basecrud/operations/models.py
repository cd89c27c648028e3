"""Operation variants and the parameters they are resolved from.

Each CRUD operation is a tagged variant carrying only the fields it needs.
``OperationParameters`` is the job-level (user-facing) description that the
resolver turns into one variant per item.
"""

from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Field

MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 500
DEFAULT_PAGE_SIZE = 50


class OperationType(str, Enum):
    """Supported record operations."""

    CREATE = "create"
    GET = "get"
    GET_ALL = "getAll"
    UPDATE = "update"
    DELETE = "delete"


class RecordKind(str, Enum):
    """How the record payload for create/update is produced."""

    MAP_EACH_COLUMNS = "mapEachColumns"
    SEND_RAW_DATA = "sendRawData"


class MappingMode(str, Enum):
    """Column mapping mode, only consulted for ``mapEachColumns``."""

    MANUAL = "mapEachColumnManually"
    AUTO = "autoMapByColumnNames"


class FieldAssignment(BaseModel):
    """A single (field id, field value) pair set explicitly by the caller."""

    field_id: str = Field(description="Name or ID of the field")
    field_value: str = Field(default="", description="Value to set for the field")


class TableRef(BaseModel):
    """Locates one table inside a Base app."""

    app_token: str = Field(min_length=1, description="App token of the Base")
    table_id: str = Field(min_length=1, description="Table ID inside the Base")


class OperationParameters(BaseModel):
    """User-facing operation parameters of a job.

    String fields may contain ``{{ item.<key> }}`` templates that are
    rendered against each input item before the operation is resolved.
    """

    operation: OperationType = Field(
        default=OperationType.CREATE, description="Record operation to run"
    )
    app_token: str = Field(description="App token of the Base (supports templates)")
    table_id: str = Field(description="Table ID (supports templates)")

    # create / update
    kind: RecordKind = Field(
        default=RecordKind.MAP_EACH_COLUMNS, description="Payload source"
    )
    mapping_mode: MappingMode = Field(
        default=MappingMode.MANUAL, description="Column mapping mode"
    )
    values_to_send: list[FieldAssignment] = Field(
        default_factory=list, description="Explicit field assignments, in order"
    )

    # get / update / delete
    record_id: Optional[str] = Field(
        default=None, description="Record ID (supports templates)"
    )

    # getAll
    return_all: bool = Field(
        default=False, description="Follow page cursors until exhausted"
    )
    limit: int = Field(
        default=DEFAULT_PAGE_SIZE,
        ge=MIN_PAGE_SIZE,
        le=MAX_PAGE_SIZE,
        description="Page size when return_all is false",
    )


class CreateRecord(BaseModel):
    operation: Literal["create"] = "create"
    table: TableRef
    fields: dict[str, Any]


class GetRecord(BaseModel):
    operation: Literal["get"] = "get"
    table: TableRef
    record_id: str = Field(min_length=1)


class ListRecords(BaseModel):
    operation: Literal["getAll"] = "getAll"
    table: TableRef
    return_all: bool = False
    limit: int = Field(default=DEFAULT_PAGE_SIZE, ge=MIN_PAGE_SIZE, le=MAX_PAGE_SIZE)


class UpdateRecord(BaseModel):
    operation: Literal["update"] = "update"
    table: TableRef
    record_id: str = Field(min_length=1)
    fields: dict[str, Any]


class DeleteRecord(BaseModel):
    operation: Literal["delete"] = "delete"
    table: TableRef
    record_id: str = Field(min_length=1)


Operation = Annotated[
    Union[CreateRecord, GetRecord, ListRecords, UpdateRecord, DeleteRecord],
    Field(discriminator="operation"),
]
