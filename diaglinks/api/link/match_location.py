"""Location Pattern Matcher."""

import re

from .CandidateMatch import CandidateMatch


def match_location(text: str, line_marker: str, pattern: re.Pattern[str]) -> CandidateMatch | None:
    """Find the candidate location on a line, or None.

    Lines that do not start with ``line_marker`` are rejected before the
    pattern runs.
    """
    if not text.startswith(line_marker):
        return None

    match = pattern.match(text)
    if match is None:
        return None

    start = len(line_marker)
    return CandidateMatch(
        text=match.group(0)[start:],
        start=start,
        end=match.end(),
        position_start=match.start("position"),
    )
