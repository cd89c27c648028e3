"""Core execution engine: one operation per input item, in order."""

import logging
import time
from typing import Iterable, Optional

import requests

from basecrud.connectors.base import RecordConnector
from basecrud.connectors.bitable import BitableConnector
from basecrud.core.context import ExecutionContext
from basecrud.core.exceptions import BaseCrudError
from basecrud.core.items import Item, OutputItem
from basecrud.core.metrics import MetricsCollector
from basecrud.models.job import Job
from basecrud.operations.dispatcher import dispatch
from basecrud.operations.resolver import resolve_operation

logger = logging.getLogger(__name__)

# Failures handled at the per-item boundary
ITEM_ERRORS = (BaseCrudError, requests.RequestException)


def execute(
    job: Job,
    items: Iterable[Item],
    connector: Optional[RecordConnector] = None,
) -> list[OutputItem]:
    """Execute a job against a sequence of input items.

    Items are processed one at a time; the next item starts only after the
    current one (including any pagination) has finished.

    Args:
        job: Job with connection, operation parameters and runtime options.
        items: Input items (JSON mappings), in order.
        connector: Connector to use. When omitted a BitableConnector is built
            from ``job.connection`` and closed at the end of the run.

    Returns:
        One output item per input item, in input order.

    Raises:
        ParameterError, OperationError, requests.RequestException: The first
            item failure, unchanged, when ``continue_on_fail`` is disabled.
    """
    metrics = MetricsCollector(job.name)
    owns_connector = connector is None
    if connector is None:
        connector = BitableConnector(job.connection)

    logger.info(
        f"Starting job: {job.parameters.operation.value} on table {job.parameters.table_id}",
        extra={"job_name": job.name},
    )

    results: list[OutputItem] = []
    try:
        for index, item in enumerate(items):
            context = ExecutionContext(
                job_name=job.name,
                item_index=index,
                continue_on_fail=job.runtime.continue_on_fail,
            )
            item_start = time.time()
            try:
                operation = resolve_operation(job.parameters, item, context)
                response = dispatch(operation, connector, context)
            except ITEM_ERRORS as e:
                metrics.record_error(e, {"item_index": index})
                if not context.continue_on_fail:
                    logger.error(
                        f"Item failed, aborting run: {e}", extra=context.log_extra()
                    )
                    raise
                logger.warning(f"Item failed: {e}", extra=context.log_extra())
                results.append(OutputItem.from_error(e, index))
                continue

            metrics.record_item(time.time() - item_start)
            results.append(OutputItem(json=response, paired_item=index))
    finally:
        if owns_connector:
            connector.close()
        metrics.finish()
        logger.info(
            f"Finished job: {metrics.get_summary()}", extra={"job_name": job.name}
        )

    return results
