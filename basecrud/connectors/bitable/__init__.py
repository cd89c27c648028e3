"""Bitable connector module."""

from basecrud.connectors.bitable.config import BitableConnectorConfig
from basecrud.connectors.bitable.connector import BitableConnector

__all__ = [
    "BitableConnector",
    "BitableConnectorConfig",
]
