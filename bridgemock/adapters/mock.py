"""
Mock Bridge adapter.

Serves synthetic records instead of querying a real system so that code
built against the bridge contract can be exercised in tests. Behaviour is
driven entirely by the request:

- ``error`` parameter: fail with that message
- ``count`` parameter: value returned by count() (default 1)
- ``records`` parameter: records template, e.g. ``"id:$,name:User $"``
- ``count`` metadata: total number of records search() pages over (default 10)
- ``offset`` / ``pageSize`` metadata: the page search() returns
"""

from __future__ import annotations

import logging
from typing import Optional

from bridgemock.adapters.base import BridgeAdapter
from bridgemock.config import Settings
from bridgemock.core.errors import InvalidParameterError, SimulatedError
from bridgemock.core.models import BridgeRequest, Count, Record, RecordList
from bridgemock.core.utils.constants import (
    COUNT_PARAMETER,
    DEFAULT_COUNT,
    DEFAULT_SEARCH_COUNT,
    ERROR_PARAMETER,
    RETRIEVE_INDEX,
    UNBOUNDED_PAGE_SIZE,
)
from bridgemock.core.utils.helpers import parse_integer
from bridgemock.core.utils.pagination import normalize_pagination_metadata
from bridgemock.qualification import QualificationParser
from bridgemock.synthesis import build_record

__all__: list[str] = ["MockBridgeAdapter"]


def _parse_count(name: str, raw: str) -> int:
    try:
        count = parse_integer(raw)
    except ValueError:
        raise InvalidParameterError(name, raw)
    if count < 0:
        raise InvalidParameterError(name, raw, f"The '{name}' value must not be negative, got {count}.")
    return count


class MockBridgeAdapter(BridgeAdapter):
    """Bridge adapter that synthesizes deterministic fake records."""

    NAME = "Mock Bridge"
    VERSION = "1.0.0"

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        settings: Optional[Settings] = None,
        parser: Optional[QualificationParser] = None,
    ):
        super().__init__(logger=logger, settings=settings)
        self.parser = parser or QualificationParser()

    # The mock needs no credentials or endpoints, so it keeps the empty
    # property map from BridgeAdapter.build_properties().

    def count(self, request: BridgeRequest) -> Count:
        self._prepare(request, "Counting the records", log_fields=False)

        value = DEFAULT_COUNT
        raw = request.get_parameter(COUNT_PARAMETER)
        if raw is not None:
            value = _parse_count(COUNT_PARAMETER, raw)

        return Count(value=value, metadata=dict(request.metadata))

    def retrieve(self, request: BridgeRequest) -> Record:
        self._prepare(request, "Retrieving a record")

        return Record(record=build_record(request, RETRIEVE_INDEX), metadata=dict(request.metadata))

    def search(self, request: BridgeRequest) -> RecordList:
        self._prepare(request, "Searching the records")

        raw = request.get_metadata("count")
        if raw is not None and raw != "":
            total = _parse_count("count", raw)
        else:
            total = DEFAULT_SEARCH_COUNT

        metadata = normalize_pagination_metadata(request.metadata)
        offset = int(metadata["offset"])
        page_size = int(metadata["pageSize"])
        if page_size == UNBOUNDED_PAGE_SIZE:
            max_index = total
        else:
            max_index = min(offset + page_size, total)

        records = [Record(record=build_record(request, i)) for i in range(offset, max_index)]

        metadata["size"] = str(len(records))
        metadata["count"] = str(total)
        self.logger.debug(f"  Returning {len(records)} of {total} records from offset {offset}")

        return RecordList(fields=list(request.fields), records=records, metadata=metadata)

    def _prepare(self, request: BridgeRequest, action: str, log_fields: bool = True) -> None:
        """Resolve the query, log the access and apply error simulation."""
        request.query = self.parser.parse(request.query, request.parameters)

        self.logger.debug(action)
        self.logger.debug(f"  Structure: {request.structure}")
        if log_fields:
            self.logger.debug(f"  Fields: {request.field_string}")
        self.logger.debug(f"  Query: {request.query}")

        message = request.get_parameter(ERROR_PARAMETER)
        if message is not None:
            raise SimulatedError(message)
