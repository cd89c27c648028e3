"""Runtime configuration model for job definitions."""

from pydantic import BaseModel, Field


class RuntimeConfig(BaseModel):
    """Configuration for runtime behavior."""

    continue_on_fail: bool = Field(
        default=False,
        description="Emit an error item for a failed item and keep going instead of aborting the run",
    )
