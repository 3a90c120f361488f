"""Existence Validator."""

from .FileSystem import FileSystem


async def is_existing_file(path: str, filesystem: FileSystem) -> bool:
    """True if ``path`` exists and is a regular file (not a directory)."""
    if not await filesystem.path_exists(path):
        return False
    return await filesystem.is_regular_file(path)
