"""Line Scanner: turns build output into link records."""

import asyncio
import logging

from ..config.ScanConfig import ScanConfig
from .extract_position import extract_position
from .FileSystem import FileSystem
from .is_existing_file import is_existing_file
from .LineResult import LineResult
from .LinkRecord import LinkRecord
from .LocalFileSystem import LocalFileSystem
from .location_pattern import location_pattern
from .match_location import match_location
from .normalize_location_path import normalize_location_path
from .RawLine import RawLine
from .ResolvedLocation import ResolvedLocation
from .ScanStage import ScanStage
from .split_lines import split_lines

logger = logging.getLogger(__name__)


class LinkScanner:
    """Scan documents for marker-gated source locations.

    Each line goes through match -> position -> path -> existence and stops
    at the first stage that fails. Nothing is remembered between scans.
    """

    def __init__(self, config: ScanConfig, filesystem: FileSystem | None = None):
        self.config = config
        self.filesystem: FileSystem = filesystem if filesystem is not None else LocalFileSystem()
        self._pattern = location_pattern(config.platform, config.line_marker)

    def locate(self, line: RawLine) -> LinkRecord | LineResult:
        """Run the synchronous stages on one line.

        Returns an unverified record, or the LineResult describing where the
        line dropped out.
        """
        config = self.config
        if not line.text.startswith(config.line_marker):
            return LineResult.dropped(line, ScanStage.MARKER, f"Line does not start with {config.line_marker!r}")

        candidate = match_location(line.text, config.line_marker, self._pattern)
        if candidate is None:
            return LineResult.dropped(line, ScanStage.PATTERN, f"No {config.platform.value} location after the marker")

        position = extract_position(candidate.position_tail, config.platform)
        if position is None:
            return LineResult.dropped(line, ScanStage.POSITION, f"Malformed position {candidate.position_tail!r}")

        absolute_path = normalize_location_path(candidate.path_fragment, config)
        if absolute_path is None:
            return LineResult.dropped(line, ScanStage.PATH, f"Cannot resolve path {candidate.path_fragment!r}")

        return LinkRecord(
            line_index=line.index,
            range_start=candidate.start,
            range_end=candidate.end,
            target=ResolvedLocation(absolute_path=absolute_path, line=position.line, column=position.column),
        )

    async def _scan_line(self, line: RawLine, limit: asyncio.Semaphore) -> LineResult:
        located = self.locate(line)
        if isinstance(located, LineResult):
            return located

        path = located.target.absolute_path
        async with limit:
            exists = await is_existing_file(path, self.filesystem)
        if not exists:
            return LineResult.dropped(line, ScanStage.EXISTS, f"Not an existing file: {path}")
        return LineResult.linked(line, located)

    async def scan_line(self, line: RawLine) -> LineResult:
        """Run the full pipeline on a single line."""
        return await self._scan_line(line, asyncio.Semaphore(1))

    async def explain(self, text: str, eol: str | None = None) -> list[LineResult]:
        """Per-line outcome for every line of ``text``, in document order."""
        lines = split_lines(text, eol)
        limit = asyncio.Semaphore(self.config.max_concurrency)
        # gather keeps argument order whatever order the checks finish in
        results = await asyncio.gather(*(self._scan_line(line, limit) for line in lines))
        return list(results)

    async def scan(self, text: str, eol: str | None = None) -> list[LinkRecord]:
        """Link records for ``text`` in ascending line order."""
        results = await self.explain(text, eol)
        records = [result.record for result in results if result.record is not None]
        logger.debug("Scanned %d lines under %s: %d links", len(results), self.config.workspace_root, len(records))
        return records

    def scan_sync(self, text: str, eol: str | None = None) -> list[LinkRecord]:
        """Blocking wrapper around scan() for callers without an event loop."""
        return asyncio.run(self.scan(text, eol))

    def explain_sync(self, text: str, eol: str | None = None) -> list[LineResult]:
        """Blocking wrapper around explain()."""
        return asyncio.run(self.explain(text, eol))
