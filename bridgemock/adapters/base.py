"""
Abstract bridge adapter interface.

The host framework drives every adapter through the same lifecycle:
construct, set properties, initialize, then serve count/retrieve/search
requests.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Mapping, Optional

from bridgemock.config import Settings, get_settings
from bridgemock.core.models import BridgeRequest, ConfigurablePropertyMap, Count, Record, RecordList


class BridgeAdapter(ABC):
    """Base class for pluggable bridge data sources."""

    NAME: str = ""
    VERSION: str = "0.0.0"

    def __init__(self, logger: Optional[logging.Logger] = None, settings: Optional[Settings] = None):
        self.logger = logger or logging.getLogger(type(self).__module__)
        self.settings = settings or get_settings()
        self._properties = self.build_properties()
        self._initialized = False

    @property
    def name(self) -> str:
        return self.NAME

    @property
    def version(self) -> str:
        return self.VERSION

    @property
    def properties(self) -> ConfigurablePropertyMap:
        return self._properties

    @property
    def initialized(self) -> bool:
        return self._initialized

    def build_properties(self) -> ConfigurablePropertyMap:
        """Return the adapter's configurable properties, with defaults."""
        return ConfigurablePropertyMap()

    def set_properties(self, values: Mapping[str, Optional[str]]) -> None:
        self._properties.set_values(values)

    def initialize(self) -> None:
        """Validate configuration; subclasses extend this to set up clients."""
        self._properties.validate()
        self._initialized = True
        self.logger.info(f"Initialized {self.name} v{self.version} ({self.settings.app_env})")

    def configure(self, options: Optional[Mapping[str, Optional[str]]] = None) -> "BridgeAdapter":
        """Set properties from *options* and initialize in one step."""
        self.set_properties(options or {})
        self.initialize()
        return self

    @abstractmethod
    def count(self, request: BridgeRequest) -> Count:
        """Return the number of records matching *request*."""

    @abstractmethod
    def retrieve(self, request: BridgeRequest) -> Record:
        """Return the single record matching *request*."""

    @abstractmethod
    def search(self, request: BridgeRequest) -> RecordList:
        """Return a page of records matching *request*."""
