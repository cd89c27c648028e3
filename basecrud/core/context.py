"""Per-item execution context."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ExecutionContext:
    """Values that describe the item currently being processed.

    Passed explicitly to the resolver, the dispatcher and every operation
    handler so errors can be attributed to their source item.
    """

    job_name: str
    item_index: int
    continue_on_fail: bool = False

    def log_extra(self) -> dict:
        return {"job_name": self.job_name, "item_index": self.item_index}
