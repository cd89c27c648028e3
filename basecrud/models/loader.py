"""Job loader with YAML parsing and template rendering."""

from pathlib import Path
from typing import Dict

import yaml
from pydantic import ValidationError

from basecrud.core.exceptions import JobError
from basecrud.models.job import Job
from basecrud.models.templates import render_templates


def load_job(path: str, cli_vars: Dict[str, str] | None = None) -> Job:
    """
    Load job from YAML file.

    Args:
        path: Path to job YAML file
        cli_vars: Variables passed via CLI (e.g., --vars key=value)

    Returns:
        Validated Job instance

    Raises:
        JobError: If file not found, invalid YAML, or validation fails
    """
    job_path = Path(path)
    if not job_path.exists():
        raise JobError(f"Job file not found: {path}")

    try:
        with open(job_path, "r", encoding="utf-8") as f:
            job_dict = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise JobError(
            f"Invalid YAML in job file: {e}", context={"path": str(path)}
        ) from e

    if not isinstance(job_dict, dict):
        raise JobError(
            "Job file must contain a YAML dictionary",
            context={"path": str(path)},
        )

    job_dict = render_templates(job_dict, cli_vars)

    try:
        return Job.from_dict(job_dict)
    except ValidationError as e:
        raise JobError(
            f"Job validation failed: {e}", context={"path": str(path)}
        ) from e


def from_yaml(path: str, cli_vars: Dict[str, str] | None = None) -> Job:
    """Alias for load_job."""
    return load_job(path, cli_vars)
