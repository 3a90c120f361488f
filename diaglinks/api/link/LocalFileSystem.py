"""FileSystem backed by the local disk."""

import asyncio
from pathlib import Path


class LocalFileSystem:
    """Runs blocking ``pathlib`` queries in worker threads."""

    async def path_exists(self, path: str) -> bool:
        return await asyncio.to_thread(_query, Path.exists, path)

    async def is_regular_file(self, path: str) -> bool:
        return await asyncio.to_thread(_query, Path.is_file, path)


def _query(check, path: str) -> bool:
    try:
        return bool(check(Path(path)))
    except (OSError, ValueError):
        # unreadable parents and embedded NULs count as missing
        return False
