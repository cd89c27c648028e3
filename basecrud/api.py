"""Public Python API for basecrud package.

This module provides the main entry points for loading and executing jobs.
"""

from typing import Iterable, Optional

from basecrud.connectors.base import RecordConnector
from basecrud.core.engine import execute
from basecrud.core.items import Item, OutputItem
from basecrud.models.job import Job
from basecrud.models.loader import load_job


def from_yaml(path: str) -> Job:
    """Load job from YAML file, rendering load-time templates.

    Args:
        path: Path to job YAML file

    Returns:
        Validated Job instance

    Raises:
        JobError: If file not found, invalid YAML, or validation fails

    Example:
        >>> job = from_yaml("jobs/add_customers.yaml")
        >>> print(job.name)
        add_customers
    """
    return load_job(path, cli_vars=None)


def run_job(
    job: Job,
    items: Iterable[Item],
    connector: Optional[RecordConnector] = None,
) -> list[OutputItem]:
    """Execute a job over input items.

    Every item is resolved into one operation (create, get, getAll, update
    or delete), sent to the Base API, and turned into one output item.

    Args:
        job: Job instance to execute.
        items: Input items (JSON mappings), processed in order.
        connector: Optional connector; defaults to a BitableConnector built
            from ``job.connection``.

    Returns:
        Output items in input order.

    Raises:
        ParameterError: If a required parameter is missing (abort mode only)
        OperationError: If the service rejects a request (abort mode only)
        requests.RequestException: On transport failure (abort mode only)

    Example:
        >>> from basecrud import from_yaml, run_job
        >>> job = from_yaml("jobs/add_customers.yaml")
        >>> results = run_job(job, [{"name": "Alice"}])
    """
    return execute(job, items, connector)


def run_job_from_yaml(
    job_path: str,
    items: Iterable[Item],
    cli_vars: dict[str, str] | None = None,
) -> list[OutputItem]:
    """Load and execute job from YAML file.

    Convenience function that combines `load_job()` and `run_job()`.
    """
    job = load_job(job_path, cli_vars)
    return run_job(job, items)
