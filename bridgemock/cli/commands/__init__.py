"""Bridge CLI commands."""

from .query import count, retrieve, search

__all__ = ["count", "retrieve", "search"]
