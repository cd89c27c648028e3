"""basecrud - Record CRUD connector for the Base (Bitable) REST API.

Turns batches of workflow items into create/get/list/update/delete requests
and the responses back into items.
"""

__version__ = "0.1.0"

# Public API
from basecrud.api import from_yaml, run_job, run_job_from_yaml

# Core classes
from basecrud.core.context import ExecutionContext
from basecrud.core.items import OutputItem

# Exceptions
from basecrud.core.exceptions import (
    BaseCrudError,
    ConnectorError,
    JobError,
    OperationError,
    ParameterError,
)

# Job model
from basecrud.models.job import Job

__all__ = [
    # Version
    "__version__",
    # Public API
    "from_yaml",
    "run_job",
    "run_job_from_yaml",
    # Core classes
    "Job",
    "ExecutionContext",
    "OutputItem",
    # Exceptions
    "BaseCrudError",
    "JobError",
    "ConnectorError",
    "ParameterError",
    "OperationError",
]
