"""Shared constants and helpers."""

from .helpers import parse_integer
from .pagination import normalize_pagination_metadata, parse_non_negative

__all__ = ["normalize_pagination_metadata", "parse_integer", "parse_non_negative"]
