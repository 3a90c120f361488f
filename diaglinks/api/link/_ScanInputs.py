"""Everything a scan command needs, loaded and validated."""

import sys
from dataclasses import dataclass
from pathlib import Path

from ..config.ConfigError import ConfigError
from ..config.DiaglinksConfig import DiaglinksConfig
from ..config.Platform import Platform
from ..config.ScanConfig import ScanConfig

_EOL_NAMES = {"lf": "\n", "crlf": "\r\n", "cr": "\r"}


@dataclass(frozen=True)
class _ScanInputs:
    config: ScanConfig
    text: str
    eol: str | None

    @classmethod
    def load(
        cls,
        path: str,
        workspace: str,
        marker: str | None = None,
        platform: str | None = None,
        eol: str | None = None,
    ) -> "_ScanInputs":
        """Resolve settings, the session config and the log text.

        Raises:
            ConfigError: Invalid settings, platform, eol or workspace root.
            FileNotFoundError: The log file does not exist.
        """
        settings = DiaglinksConfig.load()

        try:
            platform_value = Platform(platform.lower()) if platform else None
        except ValueError as e:
            raise ConfigError(f"Unknown platform: {platform} (expected posix or windows)") from e

        if eol is not None and eol.lower() not in _EOL_NAMES:
            raise ConfigError(f"Unknown eol: {eol} (expected one of {', '.join(_EOL_NAMES)})")

        config = ScanConfig.for_workspace(
            workspace,
            line_marker=marker if marker is not None else settings.scan.line_marker,
            platform=platform_value,
            max_concurrency=settings.scan.max_concurrency,
        )
        return cls(
            config=config,
            text=_read_log_text(path),
            eol=_EOL_NAMES[eol.lower()] if eol is not None else None,
        )


def _read_log_text(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    log_path = Path(path).expanduser()
    if not log_path.is_file():
        raise FileNotFoundError(f"Log file does not exist: {log_path}")
    # newline="" keeps \r\n intact so an explicit eol can split on it
    with log_path.open(encoding="utf-8", errors="replace", newline="") as fh:
        return fh.read()
