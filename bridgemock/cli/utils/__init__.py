"""CLI utilities and helpers."""

from .console import BridgeConsole, format_error

__all__ = [
    "BridgeConsole",
    "format_error",
]
