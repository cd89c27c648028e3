"""Core module for basecrud package."""

from basecrud.core.context import ExecutionContext
from basecrud.core.exceptions import (
    BaseCrudError,
    ConnectorError,
    JobError,
    OperationError,
    ParameterError,
)
from basecrud.core.items import Item, OutputItem
from basecrud.core.metrics import MetricsCollector

__all__ = [
    "ExecutionContext",
    "Item",
    "OutputItem",
    "MetricsCollector",
    "BaseCrudError",
    "JobError",
    "ConnectorError",
    "ParameterError",
    "OperationError",
]
