"""One line of a scanned document."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RawLine:
    """Line text (without its end-of-line) and its zero-based index."""

    index: int
    text: str
