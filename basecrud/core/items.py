"""Input and output items exchanged with the workflow host."""

from dataclasses import dataclass, field
from typing import Any

Item = dict[str, Any]


@dataclass
class OutputItem:
    """One output item, paired with the index of the input item it came from."""

    json: dict[str, Any]
    paired_item: int
    error: bool = field(default=False, repr=False)

    @classmethod
    def from_error(cls, error: Exception, item_index: int) -> "OutputItem":
        """Build the error marker emitted in error-tolerant mode."""
        message = getattr(error, "message", None) or str(error)
        return cls(json={"error": message}, paired_item=item_index, error=True)

    def to_dict(self) -> dict[str, Any]:
        return {"json": self.json, "paired_item": self.paired_item}
