"""Tests for output items."""

import requests

from basecrud.core.exceptions import OperationError, ParameterError
from basecrud.core.items import OutputItem


class TestOutputItem:
    def test_to_dict(self):
        item = OutputItem(json={"code": 0}, paired_item=2)
        assert item.to_dict() == {"json": {"code": 0}, "paired_item": 2}

    def test_from_operation_error(self):
        error = OperationError("field not found", code=1254045, context={"item_index": 1})
        item = OutputItem.from_error(error, 1)
        assert item.json == {"error": "Base API error: field not found"}
        assert item.paired_item == 1
        assert item.error is True

    def test_from_parameter_error(self):
        error = ParameterError("Missing required parameter 'record_id'")
        item = OutputItem.from_error(error, 0)
        assert item.json == {"error": "Missing required parameter 'record_id'"}

    def test_from_transport_error(self):
        item = OutputItem.from_error(requests.Timeout("read timed out"), 3)
        assert item.json == {"error": "read timed out"}
