"""Navigation target of a link."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ResolvedLocation:
    """Absolute file path plus 1-based line and column."""

    absolute_path: str
    line: int
    column: int = 1
