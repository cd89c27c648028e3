"""Bitable connector for record CRUD over the Base REST API."""

import logging
from typing import Any, Optional
from urllib.parse import quote

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from basecrud.core.exceptions import ConnectorError
from basecrud.operations.models import TableRef

from .config import BitableConnectorConfig

logger = logging.getLogger(__name__)


class BitableConnector:
    """Issues one HTTP request per call against a Bitable table.

    Responses are returned as decoded JSON without interpreting the service
    ``code``; status validation belongs to the operation handlers. Transport
    failures (connection errors, timeouts, non-2xx statuses) propagate as
    ``requests`` exceptions.
    """

    def __init__(
        self,
        config: BitableConnectorConfig,
        session: Optional[requests.Session] = None,
    ):
        """Initialize BitableConnector.

        Args:
            config: Connector configuration.
            session: Optional pre-built session (mainly for tests).

        Raises:
            ConnectorError: If config is not a BitableConnectorConfig.
        """
        if not isinstance(config, BitableConnectorConfig):
            raise ConnectorError(
                "BitableConnector requires a BitableConnectorConfig",
                context={"config_type": type(config).__name__},
            )

        self._config = config
        self._base_url = config.base_url.rstrip("/")
        self._timeout = config.timeout

        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Authorization": f"Bearer {config.access_token.get_secret_value()}",
                "Content-Type": "application/json",
            }
        )
        if config.headers:
            self._session.headers.update(config.headers)

        # POST is left out so a create is never sent twice
        if config.max_retries > 0:
            retry_strategy = Retry(
                total=config.max_retries,
                backoff_factor=config.retry_delay,
                status_forcelist=[429, 500, 502, 503, 504],
                allowed_methods=["GET", "PUT", "DELETE"],
                raise_on_status=False,
            )
            adapter = HTTPAdapter(max_retries=retry_strategy)
            self._session.mount("http://", adapter)
            self._session.mount("https://", adapter)

    def _records_path(self, table: TableRef, record_id: str | None = None) -> str:
        path = (
            f"/apps/{quote(table.app_token, safe='')}"
            f"/tables/{quote(table.table_id, safe='')}/records"
        )
        if record_id is not None:
            path = f"{path}/{quote(record_id, safe='')}"
        return path

    def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Send one request and return the decoded JSON response.

        Raises:
            requests.RequestException: On transport failure or non-2xx status.
        """
        url = f"{self._base_url}{path}"
        query = {k: v for k, v in (params or {}).items() if v is not None}

        logger.debug(f"{method} {path}", extra={"context": query})

        response = self._session.request(
            method,
            url,
            params=query or None,
            json=body,
            timeout=self._timeout,
        )
        response.raise_for_status()
        return response.json()

    def create_record(self, table: TableRef, fields: dict[str, Any]) -> dict[str, Any]:
        return self._request("POST", self._records_path(table), body={"fields": fields})

    def get_record(self, table: TableRef, record_id: str) -> dict[str, Any]:
        return self._request("GET", self._records_path(table, record_id))

    def list_records(
        self,
        table: TableRef,
        page_size: int | None = None,
        page_token: str | None = None,
    ) -> dict[str, Any]:
        """Fetch a single page of records.

        Args:
            table: Table to list.
            page_size: Page size; omitted to let the service choose.
            page_token: Continuation cursor from a previous page.
        """
        return self._request(
            "GET",
            self._records_path(table),
            params={"page_size": page_size, "page_token": page_token},
        )

    def update_record(
        self, table: TableRef, record_id: str, fields: dict[str, Any]
    ) -> dict[str, Any]:
        return self._request(
            "PUT", self._records_path(table, record_id), body={"fields": fields}
        )

    def delete_record(self, table: TableRef, record_id: str) -> dict[str, Any]:
        return self._request("DELETE", self._records_path(table, record_id))

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()
