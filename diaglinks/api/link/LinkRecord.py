"""Clickable span emitted for one line of build output."""

from dataclasses import asdict, dataclass
from typing import Any

from .ResolvedLocation import ResolvedLocation


@dataclass(frozen=True)
class LinkRecord:
    """Span ``(line_index, range_start)`` to ``(line_index, range_end)`` and its target.

    Offsets are zero-based string offsets into the line; ``range_end`` is
    exclusive.
    """

    line_index: int
    range_start: int
    range_end: int
    target: ResolvedLocation

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
