"""Output schemas for link commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LinkScanOutput(BaseOutputSchema):
    """Output schema for link scan command.

    Each entry of ``links`` is a LinkRecord dict: line_index, range_start,
    range_end and target (absolute_path, line, column).
    """

    path: str = Field(..., description="Scanned log file, '-' for stdin")
    workspace_root: str = Field(..., description="Root relative locations were resolved against, empty if invalid")
    platform: str = Field(..., description="Path convention used: posix or windows")
    line_marker: str = Field(..., description="Prefix lines had to start with")
    lines_scanned: int = Field(..., description="Number of lines in the document")
    links: list[dict[str, Any]] = Field(..., description="Link records in line order")


class LinkExplainOutput(BaseOutputSchema):
    """Output schema for link explain command.

    Each entry of ``lines`` has line_index, text, linked, stage (where the
    line dropped out, null when linked), reason and target.
    """

    path: str = Field(..., description="Scanned log file, '-' for stdin")
    workspace_root: str = Field(..., description="Root relative locations were resolved against, empty if invalid")
    platform: str = Field(..., description="Path convention used: posix or windows")
    line_marker: str = Field(..., description="Prefix lines had to start with")
    lines: list[dict[str, Any]] = Field(..., description="Per-line pipeline outcome")
    stage_counts: dict[str, int] = Field(..., description="Number of lines dropped at each stage, plus 'linked'")


register_output_schema("link", "scan", LinkScanOutput)
register_output_schema("link", "explain", LinkExplainOutput)
