"""Shared pytest configuration and fixtures for all tests."""

import asyncio
from collections.abc import Iterable
from pathlib import Path

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external services")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


class FakeFileSystem:
    """In-memory FileSystem that records calls and concurrency.

    ``delays`` maps a path to seconds each query on it sleeps, so tests can
    force checks to finish out of line order.
    """

    def __init__(
        self,
        files: Iterable[str] = (),
        directories: Iterable[str] = (),
        delays: dict[str, float] | None = None,
        default_delay: float = 0.0,
    ):
        self.files = set(files)
        self.directories = set(directories)
        self.delays = dict(delays or {})
        self.default_delay = default_delay
        self.calls: list[tuple[str, str]] = []
        self.completed: list[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def _wait(self, path: str) -> None:
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(path, self.default_delay))
        finally:
            self.in_flight -= 1

    async def path_exists(self, path: str) -> bool:
        self.calls.append(("exists", path))
        await self._wait(path)
        return path in self.files or path in self.directories

    async def is_regular_file(self, path: str) -> bool:
        self.calls.append(("is_file", path))
        await self._wait(path)
        self.completed.append(path)
        return path in self.files


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def diaglinks_home(tmp_path: Path, monkeypatch) -> Path:
    """Point DIAGLINKS_HOME at an empty per-test directory."""
    home = tmp_path / "diaglinks_home"
    monkeypatch.setenv("DIAGLINKS_HOME", str(home))
    return home


@pytest.fixture(name="run_cmd")
def run_cmd_fixture():
    return run_cmd


@pytest.fixture
def fake_filesystem():
    """Factory for FakeFileSystem instances."""
    return FakeFileSystem


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Empty workspace directory."""
    root = tmp_path / "workspace"
    root.mkdir()
    return root


@pytest.fixture
def write_source():
    """Create ``relative`` (and parents) under a root and return its path."""

    def _write(root: Path, relative: str, content: str = "int main() {}\n") -> Path:
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
