"""Location-shaped substring found by the pattern matcher."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CandidateMatch:
    """Matched text after the line marker, with its offsets in the line.

    ``start`` is always the marker length. ``position_start`` is the offset
    (in the line) of the character opening the line/column tail, so
    ``start <= position_start < end <= len(line)``.
    """

    text: str
    start: int
    end: int
    position_start: int

    @property
    def path_fragment(self) -> str:
        """Everything before the line/column tail."""
        return self.text[: self.position_start - self.start]

    @property
    def position_tail(self) -> str:
        """The ``:14:5`` or ``(412)`` part."""
        return self.text[self.position_start - self.start :]
