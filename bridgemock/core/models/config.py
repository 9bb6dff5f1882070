"""
Pydantic models for adapter configurable properties.
"""
import logging
from typing import Iterator, Mapping, Optional

from pydantic import BaseModel, Field

from bridgemock.core.errors import ConfigurationError

logger = logging.getLogger(__name__)


class ConfigurableProperty(BaseModel):
    """A single named adapter setting."""
    name: str = Field(..., description="The property name used as key when setting values.")
    value: Optional[str] = Field(None, description="The current value, if any.")
    description: Optional[str] = Field(None, description="Help text shown by the host framework.")
    is_required: bool = Field(False, description="Whether initialize() needs a value for this property.")
    is_sensitive: bool = Field(False, description="Whether the value must be masked when displayed.")

    def display_value(self) -> Optional[str]:
        """Return the value, masked when the property is sensitive."""
        if self.is_sensitive and self.value:
            return "*" * 8
        return self.value


class ConfigurablePropertyMap:
    """Ordered collection of an adapter's configurable properties."""

    def __init__(self, *properties: ConfigurableProperty):
        self._properties: dict[str, ConfigurableProperty] = {}
        for prop in properties:
            self._properties[prop.name] = prop

    def __iter__(self) -> Iterator[ConfigurableProperty]:
        return iter(self._properties.values())

    def __len__(self) -> int:
        return len(self._properties)

    def __contains__(self, name: object) -> bool:
        return name in self._properties

    def get_value(self, name: str) -> Optional[str]:
        prop = self._properties.get(name)
        return prop.value if prop else None

    def set_values(self, values: Mapping[str, Optional[str]]) -> None:
        """Assign values to known properties; unknown names are ignored."""
        for name, value in (values or {}).items():
            prop = self._properties.get(name)
            if prop is None:
                logger.warning(f"Ignoring unknown configurable property '{name}'")
                continue
            prop.value = None if value is None else str(value)

    def missing_required(self) -> list[str]:
        return [p.name for p in self._properties.values() if p.is_required and not p.value]

    def validate(self) -> None:
        """Raise ConfigurationError if any required property has no value."""
        missing = self.missing_required()
        if missing:
            raise ConfigurationError(
                f"Missing required configurable properties: {', '.join(missing)}"
            )

    def to_dict(self) -> dict[str, Optional[str]]:
        """Property values keyed by name, with sensitive values masked."""
        return {p.name: p.display_value() for p in self._properties.values()}
