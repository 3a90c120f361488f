"""Path convention a scanning session follows."""

import ntpath
import posixpath
import sys
from enum import Enum
from types import ModuleType


class Platform(str, Enum):
    """Host path flavor, fixed for the lifetime of a scanning session."""

    POSIX = "posix"
    WINDOWS = "windows"

    @classmethod
    def from_host(cls) -> "Platform":
        """Platform of the running interpreter."""
        return cls.WINDOWS if sys.platform == "win32" else cls.POSIX

    @property
    def pathmod(self) -> ModuleType:
        """The os.path implementation for this platform (``ntpath`` or ``posixpath``)."""
        return ntpath if self is Platform.WINDOWS else posixpath

    @property
    def position_opener(self) -> str:
        """Character that starts the line/column tail of a location."""
        return "(" if self is Platform.WINDOWS else ":"

    @property
    def relative_markers(self) -> tuple[str, ...]:
        """Relative-directory markers that anchor a workspace-relative path.

        Windows tools emit both separators, so both spellings anchor there.
        """
        if self is Platform.WINDOWS:
            return (".\\", "./")
        return ("./",)

    @property
    def separators(self) -> str:
        """Characters accepted as path separators."""
        return "\\/" if self is Platform.WINDOWS else "/"

    def is_absolute(self, path: str) -> bool:
        """True if ``path`` is fully qualified for this platform.

        A Windows path needs a drive (or UNC share) and a root. ``\\src`` and
        ``C:src`` are not absolute, whatever ``ntpath.isabs`` reports on the
        running interpreter.
        """
        if self is not Platform.WINDOWS:
            return posixpath.isabs(path)
        drive, rest = ntpath.splitdrive(path)
        if not drive:
            return False
        return drive[:2] in ("\\\\", "//") or rest[:1] in ("\\", "/")
