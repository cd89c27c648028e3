"""Metrics collection for job execution."""

import time
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class MetricsCollector:
    """Collects metrics during job execution."""

    job_name: str
    start_time: float = field(default_factory=time.time)
    end_time: Optional[float] = None

    items_processed: int = 0
    items_failed: int = 0
    execution_time: float = 0.0

    item_times: list[float] = field(default_factory=list)
    error_details: list[dict[str, Any]] = field(default_factory=list)

    def record_item(self, item_time: float) -> None:
        """Record a successfully processed item.

        Args:
            item_time: Time taken to process the item in seconds
        """
        self.items_processed += 1
        self.item_times.append(item_time)

    def record_error(self, error: Exception, context: dict[str, Any] | None = None) -> None:
        """Record a failed item.

        Args:
            error: The exception that occurred
            context: Additional context about the error
        """
        self.items_failed += 1
        error_detail = {
            "error_type": type(error).__name__,
            "error_message": str(error),
        }
        if context:
            error_detail["context"] = context
        self.error_details.append(error_detail)

    def finish(self) -> None:
        """Mark execution as finished and calculate final metrics."""
        self.end_time = time.time()
        self.execution_time = self.end_time - self.start_time

    def to_dict(self) -> dict[str, Any]:
        """Export metrics as dictionary."""
        avg_item_time = (
            sum(self.item_times) / len(self.item_times) if self.item_times else 0.0
        )
        return {
            "job_name": self.job_name,
            "execution_time": self.execution_time,
            "items_processed": self.items_processed,
            "items_failed": self.items_failed,
            "avg_item_time": avg_item_time,
            "error_details": self.error_details,
        }

    def get_summary(self) -> str:
        """Get human-readable summary of metrics."""
        if not self.end_time:
            self.finish()

        metrics = self.to_dict()
        summary_parts = [
            f"Job: {metrics['job_name']}",
            f"Items: {metrics['items_processed']}",
            f"Time: {metrics['execution_time']:.2f}s",
        ]

        if metrics["items_failed"] > 0:
            summary_parts.append(f"Errors: {metrics['items_failed']}")

        return " | ".join(summary_parts)
