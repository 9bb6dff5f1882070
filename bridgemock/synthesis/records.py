"""Synthetic record generation from records templates.

A records template is a comma separated list of ``NAME:VALUE`` attributes,
for example ``"id:$,name:User $"``. Every ``$`` in a value is replaced with
the index of the record being generated. A comma inside a value is written
as ``\\,``.
"""

from __future__ import annotations

import logging
from typing import Optional

from bridgemock.core.errors import InvalidAttributeError
from bridgemock.core.models import BridgeRequest
from bridgemock.core.utils.constants import INDEX_TOKEN, RECORDS_PARAMETER

logger = logging.getLogger(__name__)

__all__: list[str] = [
    "default_records_template",
    "records_template",
    "split_attributes",
    "parse_attribute",
    "build_record",
]

ESCAPE_CHAR = "\\"
SEPARATOR = ","


def default_records_template(fields: list[str]) -> str:
    """Build ``"f1:f1 $,f2:f2 $"`` from the requested field names."""
    return SEPARATOR.join(f"{name}:{name} {INDEX_TOKEN}" for name in fields)


def records_template(request: BridgeRequest) -> Optional[str]:
    """Return the records template for *request*.

    The ``records`` parameter wins; otherwise the template is derived from the
    requested fields, or ``None`` when there are none.
    """
    template = request.get_parameter(RECORDS_PARAMETER)
    if template is None and request.fields:
        template = default_records_template(request.fields)
    return template


def split_attributes(template: str) -> list[str]:
    """Split *template* on commas that are not escaped with a backslash.

    Escaped commas are unescaped in the returned entries. Trailing empty
    entries are dropped.
    """
    entries: list[str] = []
    current: list[str] = []
    i = 0
    while i < len(template):
        char = template[i]
        if char == ESCAPE_CHAR and template[i + 1:i + 2] == SEPARATOR:
            current.append(SEPARATOR)
            i += 2
            continue
        if char == SEPARATOR:
            entries.append("".join(current))
            current = []
        else:
            current.append(char)
        i += 1
    entries.append("".join(current))

    while entries and entries[-1] == "":
        entries.pop()
    return entries


def parse_attribute(attribute: str) -> tuple[str, str]:
    """Split an attribute on its first colon into ``(name, value_template)``."""
    name, sep, value = attribute.partition(":")
    if not sep:
        raise InvalidAttributeError(attribute)
    return name, value


def build_record(request: BridgeRequest, index: int) -> dict[str, str]:
    """Synthesize one record for *request* at position *index*.

    Attributes keep their template order. When a name appears more than once
    the first declaration is kept.
    """
    record: dict[str, str] = {}
    template = records_template(request)
    if not template:
        return record

    for attribute in split_attributes(template):
        name, value_template = parse_attribute(attribute)
        if name in record:
            logger.debug(f"Duplicate attribute '{name}' in records template ignored")
            continue
        record[name] = value_template.replace(INDEX_TOKEN, str(index))
    return record
