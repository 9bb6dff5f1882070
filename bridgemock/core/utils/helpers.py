"""Miscellaneous helper utilities."""

from __future__ import annotations

import re

__all__: list[str] = ["parse_integer"]

# ASCII digits only, so "1_0" and non-Latin digits are rejected
_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_integer(raw: str) -> int:
    """Parse *raw* as a decimal integer, ignoring surrounding whitespace.

    Raises:
        ValueError: If *raw* is not an optional sign followed by digits
    """
    value = str(raw).strip()
    if not _INTEGER.fullmatch(value):
        raise ValueError(f"invalid integer: {raw!r}")
    return int(value)
