"""Read-only filesystem queries the scanner depends on."""

from typing import Protocol


class FileSystem(Protocol):
    """Asynchronous existence queries.

    Implementations must not raise for missing paths; they answer False.
    """

    async def path_exists(self, path: str) -> bool: ...

    async def is_regular_file(self, path: str) -> bool: ...
