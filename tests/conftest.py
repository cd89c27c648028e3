"""Pytest configuration and shared fixtures."""

import tempfile
from pathlib import Path
from unittest.mock import Mock

import pytest

from basecrud.connectors.bitable.config import BitableConnectorConfig
from basecrud.core.context import ExecutionContext
from basecrud.models.job import Job
from basecrud.models.runtime_config import RuntimeConfig
from basecrud.operations.models import OperationParameters, TableRef


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def job_dir(temp_dir):
    """Create a jobs subdirectory in temp_dir."""
    jobs_dir = temp_dir / "jobs"
    jobs_dir.mkdir()
    return jobs_dir


@pytest.fixture
def connection_config() -> BitableConnectorConfig:
    """Connection config with retries disabled."""
    return BitableConnectorConfig(
        base_url="https://base.example.com/bitable/v1",
        access_token="t-test-token",
        max_retries=0,
    )


@pytest.fixture
def table() -> TableRef:
    return TableRef(app_token="bascnApp", table_id="tblTable")


@pytest.fixture
def context() -> ExecutionContext:
    return ExecutionContext(job_name="test_job", item_index=0)


@pytest.fixture
def make_job(connection_config):
    """Factory building a Job from parameter overrides."""

    def _make_job(continue_on_fail: bool = False, **params) -> Job:
        parameters = {"app_token": "bascnApp", "table_id": "tblTable", **params}
        return Job(
            name="test_job",
            connection=connection_config,
            parameters=OperationParameters(**parameters),
            runtime=RuntimeConfig(continue_on_fail=continue_on_fail),
        )

    return _make_job


@pytest.fixture
def mock_connector():
    """Connector double whose methods all succeed with an empty record."""
    connector = Mock()
    ok = {"code": 0, "msg": "success", "data": {}}
    connector.create_record.return_value = ok
    connector.get_record.return_value = ok
    connector.list_records.return_value = ok
    connector.update_record.return_value = ok
    connector.delete_record.return_value = ok
    return connector


def page(items, has_more=False, page_token=None, code=0):
    """Build a list response page."""
    data = {"items": items, "has_more": has_more}
    if page_token is not None:
        data["page_token"] = page_token
    return {"code": code, "msg": "success", "data": data}


@pytest.fixture
def make_page():
    return page
