"""Pagination metadata helpers shared by adapters."""

from __future__ import annotations

from typing import Mapping, Optional

from bridgemock.core.errors import PaginationError
from bridgemock.core.utils.constants import DEFAULT_OFFSET, UNBOUNDED_PAGE_SIZE
from bridgemock.core.utils.helpers import parse_integer

__all__: list[str] = ["normalize_pagination_metadata", "parse_non_negative"]


def parse_non_negative(name: str, raw: Optional[str], default: int) -> int:
    """Parse a metadata value as a non-negative integer.

    Args:
        name: Metadata key, used in error messages
        raw: Raw string value, ``None`` or ``""`` meaning "use the default"
        default: Value returned when *raw* is absent

    Raises:
        PaginationError: If the value is not an integer or is negative
    """
    if raw is None or str(raw).strip() == "":
        return default
    try:
        value = parse_integer(raw)
    except ValueError:
        raise PaginationError(f"The '{name}' metadata value '{raw}' is not a valid integer.")
    if value < 0:
        raise PaginationError(f"The '{name}' metadata value must not be negative, got {value}.")
    return value


def normalize_pagination_metadata(metadata: Optional[Mapping[str, str]]) -> dict[str, str]:
    """Return a copy of *metadata* with valid ``offset`` and ``pageSize`` entries.

    Missing values default to offset 0 and pageSize 0 (all remaining records).
    Other keys are carried over untouched.
    """
    normalized = dict(metadata or {})
    offset = parse_non_negative("offset", normalized.get("offset"), DEFAULT_OFFSET)
    page_size = parse_non_negative("pageSize", normalized.get("pageSize"), UNBOUNDED_PAGE_SIZE)
    normalized["offset"] = str(offset)
    normalized["pageSize"] = str(page_size)
    return normalized
