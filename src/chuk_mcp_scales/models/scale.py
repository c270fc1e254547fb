"""
Scale catalog models - validated definitions loaded from YAML.

A definition is a template: a named interval pattern. Roots are supplied
when a definition is turned into a Scale.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_scales.constants import ScaleFamily, SchemaVersion
from chuk_mcp_scales.core import Note, Scale


class ScaleDefinition(BaseModel):
    """A named interval pattern from the scale catalog."""

    schema_version: SchemaVersion = Field(default="scale/v1", alias="schema")
    name: str = Field(..., description="Catalog identifier, e.g. 'major'")
    symbol: str = Field(..., description="Display label, e.g. 'Major'")
    description: str = Field(default="")
    family: ScaleFamily = Field(default="other")
    intervals: list[int] = Field(..., min_length=1, description="Steps in cents")
    aliases: list[str] = Field(default_factory=list)

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("intervals")
    @classmethod
    def intervals_not_zero_width(cls, v: list[int]) -> list[int]:
        if not any(v):
            raise ValueError("Scale intervals must not all be zero")
        return v

    def to_scale(self, root: Note | None = None) -> Scale:
        """Build a new Scale from this definition."""
        return Scale(self.intervals, root, self.symbol)


class ScaleMetadata(BaseModel):
    """Lightweight listing entry for a catalog scale."""

    name: str
    symbol: str
    family: ScaleFamily
    size: int = Field(..., description="Number of notes including the closing note")
    description: str = ""

    model_config = {"frozen": True}

    @classmethod
    def from_definition(cls, definition: ScaleDefinition) -> ScaleMetadata:
        return cls(
            name=definition.name,
            symbol=definition.symbol,
            family=definition.family,
            size=len(definition.intervals) + 1,
            description=definition.description,
        )
