"""Job model combining connection, operation parameters and runtime options."""

from pydantic import BaseModel, Field

from basecrud.connectors.bitable.config import BitableConnectorConfig
from basecrud.models.runtime_config import RuntimeConfig
from basecrud.operations.models import OperationParameters


class Job(BaseModel):
    """Complete job definition: one operation applied to every input item."""

    name: str = Field(description="Job name (required)")
    connection: BitableConnectorConfig = Field(description="Connection configuration")
    parameters: OperationParameters = Field(description="Operation parameters")
    runtime: RuntimeConfig = Field(
        default_factory=RuntimeConfig, description="Runtime configuration"
    )

    @classmethod
    def from_dict(cls, data: dict) -> "Job":
        """Create Job from dictionary (after template rendering)."""
        return cls(**data)

    @classmethod
    def from_yaml(cls, path: str, cli_vars: dict[str, str] | None = None) -> "Job":
        """
        Load job from YAML file.

        Args:
            path: Path to job YAML file
            cli_vars: Variables passed via CLI (e.g., --vars key=value)

        Returns:
            Validated Job instance
        """
        from basecrud.models.loader import load_job

        return load_job(path, cli_vars)
