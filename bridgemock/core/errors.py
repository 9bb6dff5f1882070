"""Exception hierarchy for bridge adapters.

Every failure raised while serving a request derives from ``BridgeError`` so
that host code can catch a single type at the adapter boundary.
"""

from __future__ import annotations

from typing import Optional

__all__: list[str] = [
    "BridgeError",
    "SimulatedError",
    "TemplateError",
    "InvalidParameterError",
    "InvalidAttributeError",
    "PaginationError",
    "ConfigurationError",
]


class BridgeError(Exception):
    """Base exception for bridge operations."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class SimulatedError(BridgeError):
    """Raised on purpose when a request carries an ``error`` parameter."""
    pass


class TemplateError(BridgeError):
    """Raised when a query template has malformed placeholder syntax."""

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.position = position


class InvalidParameterError(BridgeError):
    """Raised when a numeric parameter cannot be parsed."""

    def __init__(self, name: str, value: Optional[str], message: Optional[str] = None):
        super().__init__(message or f"The '{name}' value '{value}' is not a valid integer.")
        self.name = name
        self.value = value


class InvalidAttributeError(BridgeError, ValueError):
    """Raised when a records template entry is not a NAME:VALUE pair."""

    def __init__(self, attribute: str):
        super().__init__(
            "Attributes must be specified using comma separated NAME:VALUE pairs, "
            f"the attribute '{attribute}' is not valid."
        )
        self.attribute = attribute


class PaginationError(BridgeError):
    """Raised when offset or pageSize metadata is invalid."""
    pass


class ConfigurationError(BridgeError):
    """Raised for adapter configuration problems."""
    pass
