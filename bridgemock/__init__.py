"""Mock bridge adapter: deterministic fake records for bridge integration tests."""

from bridgemock.adapters import BridgeAdapter, MockBridgeAdapter, get_adapter, register_adapter
from bridgemock.core.errors import (
    BridgeError,
    ConfigurationError,
    InvalidAttributeError,
    InvalidParameterError,
    PaginationError,
    SimulatedError,
    TemplateError,
)
from bridgemock.core.models import BridgeRequest, Count, Record, RecordList

__all__ = [
    "BridgeAdapter",
    "MockBridgeAdapter",
    "get_adapter",
    "register_adapter",
    "BridgeRequest",
    "Count",
    "Record",
    "RecordList",
    "BridgeError",
    "ConfigurationError",
    "InvalidAttributeError",
    "InvalidParameterError",
    "PaginationError",
    "SimulatedError",
    "TemplateError",
]
