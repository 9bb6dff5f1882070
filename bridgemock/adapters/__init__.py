"""Bridge adapters and the registry the host uses to pick one."""

from __future__ import annotations

from typing import Any, Optional

from bridgemock.config import get_settings
from bridgemock.core.errors import ConfigurationError

from .base import BridgeAdapter
from .mock import MockBridgeAdapter

__all__ = [
    "BridgeAdapter",
    "MockBridgeAdapter",
    "register_adapter",
    "get_adapter",
    "available_adapters",
]

_ADAPTERS: dict[str, type[BridgeAdapter]] = {}


def register_adapter(key: str, adapter_cls: type[BridgeAdapter]) -> None:
    """Make *adapter_cls* available under *key*."""
    if not issubclass(adapter_cls, BridgeAdapter):
        raise TypeError(f"{adapter_cls!r} is not a BridgeAdapter subclass")
    _ADAPTERS[key.lower()] = adapter_cls


def available_adapters() -> list[str]:
    return sorted(_ADAPTERS)


def get_adapter(key: Optional[str] = None, **kwargs: Any) -> BridgeAdapter:
    """Construct the adapter registered under *key*.

    Defaults to the adapter named by the ``BRIDGE_ADAPTER`` setting.
    """
    if key is None:
        key = get_settings().adapter
    adapter_cls = _ADAPTERS.get(key.lower())
    if adapter_cls is None:
        raise ConfigurationError(
            f"Unknown bridge adapter '{key}'. Available: {', '.join(available_adapters())}"
        )
    return adapter_cls(**kwargs)


register_adapter("mock", MockBridgeAdapter)
