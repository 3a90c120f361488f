"""Path Normalizer: absolute path for the path part of a location."""

import ntpath

from ..config.Platform import Platform
from ..config.ScanConfig import ScanConfig


def _last_relative_anchor(fragment: str, markers: tuple[str, ...]) -> int:
    """Offset just past the last relative marker, or 0 when there is none."""
    best = -1
    for marker in markers:
        index = fragment.rfind(marker)
        if index > best:
            best = index
    return best + 2 if best >= 0 else 0


def normalize_location_path(fragment: str, config: ScanConfig) -> str | None:
    """Resolve ``fragment`` against the workspace root, or None if unresolvable.

    Absolute fragments are only normalized. Relative ones keep what follows
    the last ``./`` (``.\\`` on Windows), so ``../../../src/a.cpp`` becomes
    ``<workspace_root>/src/a.cpp`` however deep the build directory was.
    On Windows a rooted fragment without a drive (``\\src\\a.cpp``) takes the
    drive of the workspace root, and a drive-relative one (``C:a.cpp``) is
    unresolvable.
    """
    platform = config.platform
    pathmod = platform.pathmod
    fragment = fragment.strip()
    if not fragment:
        return None

    if platform.is_absolute(fragment):
        return pathmod.normpath(fragment)

    if platform is Platform.WINDOWS:
        if ntpath.splitdrive(fragment)[0]:
            return None
        if fragment[0] in platform.separators:
            return ntpath.normpath(ntpath.splitdrive(config.workspace_root)[0] + fragment)

    remainder = fragment[_last_relative_anchor(fragment, platform.relative_markers) :]
    remainder = remainder.lstrip(platform.separators)
    if not remainder:
        return None

    return pathmod.normpath(pathmod.join(config.workspace_root, remainder))
