"""Result models.

Pydantic models returned by the pipeline. Kept apart from the interfaces to
avoid circular imports between the buffer contract and the pipeline.
"""

import base64

from pydantic import BaseModel, ConfigDict, Field


class SourceMap(BaseModel):
    """A version 3 source map."""

    model_config = ConfigDict(populate_by_name=True)

    version: int = Field(default=3, description="Source map format version")
    file: str | None = Field(default=None, description="Name of the generated file")
    sources: list[str | None] = Field(default_factory=list, description="Original source names")
    sources_content: list[str | None] = Field(
        default_factory=list,
        alias="sourcesContent",
        description="Original source text, or None when not embedded",
    )
    names: list[str] = Field(default_factory=list, description="Symbol names referenced by mappings")
    mappings: str = Field(default="", description="Base64 VLQ encoded segments")

    def to_json(self) -> str:
        """Serialize with the field names used by the v3 format."""
        return self.model_dump_json(by_alias=True)

    def to_url(self) -> str:
        """Return the map as a base64 data URI."""
        encoded = base64.b64encode(self.to_json().encode("utf-8")).decode("ascii")
        return f"data:application/json;charset=utf-8;base64,{encoded}"

    def __str__(self) -> str:
        return self.to_json()


class MinifyResult(BaseModel):
    """Rewritten source text and its optional source map."""

    code: str = Field(description="The source with every matching template minified")
    map: SourceMap | None = Field(default=None, description="Map back to the original source")
