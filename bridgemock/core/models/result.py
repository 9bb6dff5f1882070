"""Result values returned by bridge adapters."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

__all__: list[str] = ["Count", "Record", "RecordList"]


class Count(BaseModel):
    """Number of matching records plus the request metadata."""

    model_config = ConfigDict(frozen=True)

    value: int = Field(..., ge=0)
    metadata: dict[str, str] = Field(default_factory=dict)


class Record(BaseModel):
    """A single record: an ordered mapping of field name to value."""

    model_config = ConfigDict(frozen=True)

    record: dict[str, str] = Field(default_factory=dict)
    metadata: Optional[dict[str, str]] = None


class RecordList(BaseModel):
    """A page of records with the requested fields and final metadata."""

    model_config = ConfigDict(frozen=True)

    fields: list[str] = Field(default_factory=list)
    records: list[Record] = Field(default_factory=list)
    metadata: dict[str, str] = Field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.records)
