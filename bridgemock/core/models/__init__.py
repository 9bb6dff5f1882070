"""Request, result and configuration models."""

from .config import ConfigurableProperty, ConfigurablePropertyMap
from .request import BridgeRequest
from .result import Count, Record, RecordList

__all__ = [
    "BridgeRequest",
    "ConfigurableProperty",
    "ConfigurablePropertyMap",
    "Count",
    "Record",
    "RecordList",
]
