"""Position Extractor: line and column from a location tail."""

from ..config.Platform import Platform
from .LineColumn import LineColumn


def _parse_number(raw: str) -> int | None:
    if not raw.isascii() or not raw.isdigit():
        return None
    value = int(raw)
    return value if value >= 1 else None


def _line_column(parts: list[str]) -> LineColumn | None:
    if len(parts) > 2:
        return None
    line = _parse_number(parts[0])
    if line is None:
        return None
    if len(parts) == 1:
        return LineColumn(line=line)
    column = _parse_number(parts[1])
    if column is None:
        return None
    return LineColumn(line=line, column=column)


def extract_position(tail: str, platform: Platform) -> LineColumn | None:
    """Parse ``tail`` into a 1-based line/column, or None if malformed.

    POSIX tails look like ``:14:5`` or ``:14``, WINDOWS tails like ``(412)``
    or ``(412,7)``. Column defaults to 1 when the tail carries none. Zero,
    empty or non-digit numbers are malformed.
    """
    if not tail.startswith(platform.position_opener):
        return None
    if platform is Platform.WINDOWS:
        # the parentheses are not part of the numbers
        if not tail.endswith(")"):
            return None
        return _line_column(tail[1:-1].split(","))
    return _line_column(tail[1:].split(":"))
