"""Tests for job loader."""

import pytest

from basecrud.core.exceptions import JobError
from basecrud.models.loader import load_job
from basecrud.operations.models import MappingMode, OperationType, RecordKind

JOB_YAML = """
name: add_customers
connection:
  base_url: https://base.example.com/bitable/v1
  access_token: "{{ env_var('BASE_ACCESS_TOKEN') }}"
parameters:
  operation: update
  app_token: "{{ var('app_token') }}"
  table_id: tblCustomers
  record_id: "{{ item.record_id }}"
  values_to_send:
    - field_id: Name
      field_value: "{{ item.name }}"
    - field_id: Source
      field_value: "{{ job.name }}"
runtime:
  continue_on_fail: true
"""


class TestJobLoader:
    """Tests for job loading functionality."""

    def test_load_job(self, job_dir, monkeypatch):
        """Test loading a job with load-time and per-item templates."""
        monkeypatch.setenv("BASE_ACCESS_TOKEN", "t-secret")
        job_file = job_dir / "job.yaml"
        job_file.write_text(JOB_YAML)

        job = load_job(str(job_file), {"app_token": "bascnApp"})

        assert job.name == "add_customers"
        assert job.connection.access_token.get_secret_value() == "t-secret"
        assert job.connection.base_url == "https://base.example.com/bitable/v1"
        assert job.parameters.operation is OperationType.UPDATE
        assert job.parameters.app_token == "bascnApp"
        assert job.parameters.record_id == "{{ item.record_id }}"
        assert job.parameters.values_to_send[0].field_value == "{{ item.name }}"
        assert job.parameters.values_to_send[1].field_value == "add_customers"
        assert job.runtime.continue_on_fail is True

    def test_defaults(self, job_dir):
        job_file = job_dir / "job.yaml"
        job_file.write_text(
            """
name: minimal
connection:
  access_token: t-token
parameters:
  app_token: bascnApp
  table_id: tblTable
"""
        )
        job = load_job(str(job_file))

        assert job.connection.base_url == "https://open.feishu.cn/open-apis/bitable/v1"
        assert job.connection.timeout == 30
        assert job.connection.max_retries == 3
        assert job.parameters.operation is OperationType.CREATE
        assert job.parameters.kind is RecordKind.MAP_EACH_COLUMNS
        assert job.parameters.mapping_mode is MappingMode.MANUAL
        assert job.runtime.continue_on_fail is False

    def test_token_not_in_repr(self, job_dir):
        job_file = job_dir / "job.yaml"
        job_file.write_text(
            """
name: secret
connection:
  access_token: t-very-secret
parameters:
  app_token: a
  table_id: t
"""
        )
        job = load_job(str(job_file))
        assert "t-very-secret" not in repr(job)

    def test_file_not_found(self, temp_dir):
        with pytest.raises(JobError, match="Job file not found"):
            load_job(str(temp_dir / "missing.yaml"))

    def test_invalid_yaml(self, job_dir):
        job_file = job_dir / "bad.yaml"
        job_file.write_text("name: [unclosed\n")
        with pytest.raises(JobError, match="Invalid YAML"):
            load_job(str(job_file))

    def test_not_a_dictionary(self, job_dir):
        job_file = job_dir / "list.yaml"
        job_file.write_text("- a\n- b\n")
        with pytest.raises(JobError, match="YAML dictionary"):
            load_job(str(job_file))

    def test_missing_cli_var(self, job_dir, monkeypatch):
        monkeypatch.setenv("BASE_ACCESS_TOKEN", "t-secret")
        job_file = job_dir / "job.yaml"
        job_file.write_text(JOB_YAML)
        with pytest.raises(JobError, match="app_token"):
            load_job(str(job_file))

    @pytest.mark.parametrize(
        "override",
        [
            "  limit: 0",
            "  limit: 501",
            "  operation: upsert",
            "  kind: spreadsheet",
        ],
    )
    def test_invalid_parameters(self, job_dir, override):
        job_file = job_dir / "job.yaml"
        job_file.write_text(
            f"""
name: invalid
connection:
  access_token: t-token
parameters:
  app_token: a
  table_id: t
{override}
"""
        )
        with pytest.raises(JobError, match="Job validation failed"):
            load_job(str(job_file))

    def test_empty_token_rejected(self, job_dir):
        job_file = job_dir / "job.yaml"
        job_file.write_text(
            """
name: no_token
connection:
  access_token: ""
parameters:
  app_token: a
  table_id: t
"""
        )
        with pytest.raises(JobError):
            load_job(str(job_file))

    def test_item_template_in_connection_rejected(self, job_dir):
        """Per-item templates only render under parameters."""
        job_file = job_dir / "job.yaml"
        job_file.write_text(
            """
name: per_item_token
connection:
  access_token: "{{ item.token }}"
parameters:
  app_token: a
  table_id: t
"""
        )
        with pytest.raises(JobError, match="item.token"):
            load_job(str(job_file))
