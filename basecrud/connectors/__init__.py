"""Record connectors for the Base REST API."""

from basecrud.connectors.base import RecordConnector
from basecrud.connectors.bitable import BitableConnector, BitableConnectorConfig

__all__ = [
    "RecordConnector",
    "BitableConnector",
    "BitableConnectorConfig",
]
