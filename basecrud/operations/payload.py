"""Record payload assembly for create and update.

Three strategies produce the ``fields`` mapping of a record:

- manual mapping: the caller's ordered field assignments, last write wins
- auto mapping by column names: the input item as-is
- raw data: the input item as-is, regardless of the mapping mode

No field ids or value types are checked here; the service is the judge.
"""

from enum import Enum
from typing import Any, Callable, Iterable, Mapping, Optional

from basecrud.operations.models import FieldAssignment, MappingMode, RecordKind


class PayloadStrategy(str, Enum):
    MANUAL = "manual"
    AUTO_MAP = "auto_map"
    RAW = "raw"


def _map_manually(
    assignments: Iterable[FieldAssignment], item: Mapping[str, Any]
) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    for assignment in assignments:
        fields[assignment.field_id] = assignment.field_value
    return fields


def _pass_through(
    assignments: Iterable[FieldAssignment], item: Mapping[str, Any]
) -> dict[str, Any]:
    return dict(item)


_STRATEGIES: dict[
    PayloadStrategy,
    Callable[[Iterable[FieldAssignment], Mapping[str, Any]], dict[str, Any]],
] = {
    PayloadStrategy.MANUAL: _map_manually,
    PayloadStrategy.AUTO_MAP: _pass_through,
    PayloadStrategy.RAW: _pass_through,
}


def select_strategy(kind: RecordKind, mapping_mode: MappingMode) -> PayloadStrategy:
    """Pick the payload strategy for a kind/mode pair.

    The mapping mode is ignored when sending raw data.
    """
    if RecordKind(kind) is RecordKind.SEND_RAW_DATA:
        return PayloadStrategy.RAW
    if MappingMode(mapping_mode) is MappingMode.AUTO:
        return PayloadStrategy.AUTO_MAP
    return PayloadStrategy.MANUAL


def build_payload(
    kind: RecordKind,
    mapping_mode: MappingMode,
    values_to_send: Optional[Iterable[FieldAssignment]],
    item: Mapping[str, Any],
) -> dict[str, Any]:
    """Build the ``fields`` mapping sent on create/update.

    Args:
        kind: Payload source selector.
        mapping_mode: Column mapping mode (only used for ``mapEachColumns``).
        values_to_send: Ordered field assignments for manual mapping; may be None.
        item: The input item's JSON mapping.

    Returns:
        A fresh dict; the input item is never mutated.
    """
    strategy = _STRATEGIES[select_strategy(kind, mapping_mode)]
    return strategy(values_to_send or (), item)
