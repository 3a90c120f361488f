"""Pipeline stages a line passes through."""

from enum import Enum


class ScanStage(str, Enum):
    """Stage at which a line dropped out of the pipeline."""

    MARKER = "marker"
    PATTERN = "pattern"
    POSITION = "position"
    PATH = "path"
    EXISTS = "exists"
