"""Link API domain: source locations in build output."""

from .CandidateMatch import CandidateMatch
from .FileSystem import FileSystem
from .LineColumn import LineColumn
from .LineResult import LineResult
from .LinkRecord import LinkRecord
from .LinkScanner import LinkScanner
from .LocalFileSystem import LocalFileSystem
from .RawLine import RawLine
from .ResolvedLocation import ResolvedLocation
from .ScanStage import ScanStage

__all__ = [
    "CandidateMatch",
    "FileSystem",
    "LineColumn",
    "LineResult",
    "LinkRecord",
    "LinkScanner",
    "LocalFileSystem",
    "RawLine",
    "ResolvedLocation",
    "ScanStage",
]
