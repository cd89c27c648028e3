"""Models module for job definitions."""

from basecrud.models.job import Job
from basecrud.models.loader import from_yaml, load_job
from basecrud.models.runtime_config import RuntimeConfig

__all__ = [
    "Job",
    "RuntimeConfig",
    "load_job",
    "from_yaml",
]
