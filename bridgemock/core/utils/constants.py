"""Project-wide constant definitions."""

__all__: list[str] = [
    "DEFAULT_COUNT",
    "DEFAULT_SEARCH_COUNT",
    "RETRIEVE_INDEX",
    "DEFAULT_OFFSET",
    "UNBOUNDED_PAGE_SIZE",
    "INDEX_TOKEN",
    "ERROR_PARAMETER",
    "COUNT_PARAMETER",
    "RECORDS_PARAMETER",
]

# Result sizes
DEFAULT_COUNT: int = 1  # count() result when no "count" parameter is given
DEFAULT_SEARCH_COUNT: int = 10  # search() total when no "count" metadata is given
RETRIEVE_INDEX: int = 1  # retrieve() always synthesizes record #1

# Pagination
DEFAULT_OFFSET: int = 0
UNBOUNDED_PAGE_SIZE: int = 0  # pageSize sentinel meaning "all remaining"

# Records templates
INDEX_TOKEN: str = "$"

# Reserved request parameters
ERROR_PARAMETER: str = "error"
COUNT_PARAMETER: str = "count"
RECORDS_PARAMETER: str = "records"
