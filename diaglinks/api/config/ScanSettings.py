"""Scan defaults read from the settings file."""

from pydantic import BaseModel, ConfigDict, Field

from ...constants import DEFAULT_LINE_MARKER, DEFAULT_MAX_CONCURRENCY


class ScanSettings(BaseModel):
    """User defaults applied when a command does not override them."""

    model_config = ConfigDict(extra="forbid")

    line_marker: str = Field(DEFAULT_LINE_MARKER, min_length=1, description="Literal prefix a line must start with")
    max_concurrency: int = Field(DEFAULT_MAX_CONCURRENCY, gt=0, description="Filesystem checks in flight per scan")
