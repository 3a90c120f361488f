"""Split document text into indexed lines."""

from .RawLine import RawLine


def split_lines(text: str, eol: str | None = None) -> list[RawLine]:
    """Split on ``eol``, or on any line boundary when ``eol`` is None.

    Line order and zero-based indices follow the document.
    """
    if eol == "":
        raise ValueError("eol must not be empty")
    parts = text.splitlines() if eol is None else text.split(eol)
    return [RawLine(index=i, text=part) for i, part in enumerate(parts)]
