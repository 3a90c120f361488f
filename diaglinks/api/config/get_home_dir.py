"""Get diaglinks home directory path or path under it."""

import os
from pathlib import Path

from ...constants import DIAGLINKS_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get diaglinks home directory path or path under it.

    Checks the DIAGLINKS_HOME environment variable first, defaults to
    ~/.diaglinks if not set.

    Args:
        *parts: Optional path components to join (e.g., "config.json")

    Returns:
        Absolute path to the home directory or a subpath under it

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.diaglinks")
        >>> get_home_dir("config.json")
        Path("/Users/user/.diaglinks/config.json")
    """
    home_env = os.environ.get("DIAGLINKS_HOME")
    if home_env:
        home = Path(home_env).expanduser().resolve()
    else:
        user_home = os.environ.get("HOME")
        home = Path(user_home) / DIAGLINKS_HOME_EXT if user_home else Path.home() / DIAGLINKS_HOME_EXT

    return home / Path(*parts) if parts else home
