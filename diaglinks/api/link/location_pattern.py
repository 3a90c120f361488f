"""Marker-gated location patterns for each platform."""

import re

from ..config.Platform import Platform

# gcc/clang: path:line:col, both numbers required
_POSIX_POSITION = r":[0-9]+:[0-9]+"
# msvc: path(line) or path(line,col)
_WINDOWS_POSITION = r"\([0-9]+(?:,[0-9]+)?\)"


def location_pattern(platform: Platform, line_marker: str) -> re.Pattern[str]:
    """Compile the pattern recognizing ``<marker><path><position>`` at line start.

    The path part is non-greedy so the first well-formed position group on
    the line wins over later ones.
    """
    position = _WINDOWS_POSITION if platform is Platform.WINDOWS else _POSIX_POSITION
    return re.compile(rf"^{re.escape(line_marker)}(?P<path>.*?)(?P<position>{position})")
