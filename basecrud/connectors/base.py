"""Protocol for record connectors.

The dispatcher only depends on this protocol, so any object with these five
methods (a real HTTP connector or a test double) can execute operations.
"""

from typing import Any, Protocol, runtime_checkable

from basecrud.operations.models import TableRef


@runtime_checkable
class RecordConnector(Protocol):
    """One method per record operation; each performs exactly one request."""

    def create_record(self, table: TableRef, fields: dict[str, Any]) -> dict[str, Any]:
        ...

    def get_record(self, table: TableRef, record_id: str) -> dict[str, Any]:
        ...

    def list_records(
        self,
        table: TableRef,
        page_size: int | None = None,
        page_token: str | None = None,
    ) -> dict[str, Any]:
        """Fetch one page of records."""
        ...

    def update_record(
        self, table: TableRef, record_id: str, fields: dict[str, Any]
    ) -> dict[str, Any]:
        ...

    def delete_record(self, table: TableRef, record_id: str) -> dict[str, Any]:
        ...
