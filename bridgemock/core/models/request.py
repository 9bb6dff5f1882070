"""
Pydantic model for an incoming bridge request.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BridgeRequest(BaseModel):
    """A structured query handed to an adapter by the host framework."""
    structure: str = Field(..., description="The logical record type being queried.")
    fields: list[str] = Field(default_factory=list, description="Requested field names, in order.")
    query: str = Field("", description="Query template, may contain parameter placeholders.")
    parameters: dict[str, str] = Field(default_factory=dict, description="Values for query placeholders and control parameters.")
    metadata: dict[str, str] = Field(default_factory=dict, description="Pagination and control hints (offset, pageSize, count).")

    model_config = ConfigDict(validate_assignment=True)

    @field_validator('fields', mode='before')
    @classmethod
    def validate_fields(cls, v):
        """Accept None or a comma separated string as well as a list."""
        if v is None:
            return []
        if isinstance(v, str):
            return [name.strip() for name in v.split(",") if name.strip()]
        return v

    @field_validator('query', mode='before')
    @classmethod
    def validate_query(cls, v):
        return "" if v is None else v

    @property
    def field_string(self) -> str:
        """The requested fields as a single comma separated string."""
        return ",".join(self.fields)

    def get_parameter(self, name: str) -> Optional[str]:
        return self.parameters.get(name)

    def get_metadata(self, name: str) -> Optional[str]:
        return self.metadata.get(name)
