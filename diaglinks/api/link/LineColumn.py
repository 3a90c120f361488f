"""Line/column pair parsed from a location tail."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LineColumn:
    line: int
    column: int = 1
