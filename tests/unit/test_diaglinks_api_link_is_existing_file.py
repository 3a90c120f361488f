"""Unit tests for the existence validator and LocalFileSystem."""

import asyncio

from diaglinks.api.link.is_existing_file import is_existing_file
from diaglinks.api.link.LocalFileSystem import LocalFileSystem


class TestLocalFileSystem:
    def test_regular_file(self, tmp_path):
        path = tmp_path / "a.cpp"
        path.write_text("x")
        assert asyncio.run(is_existing_file(str(path), LocalFileSystem())) is True

    def test_directory_is_not_a_file(self, tmp_path):
        fs = LocalFileSystem()
        assert asyncio.run(fs.path_exists(str(tmp_path))) is True
        assert asyncio.run(is_existing_file(str(tmp_path), fs)) is False

    def test_missing(self, tmp_path):
        assert asyncio.run(is_existing_file(str(tmp_path / "missing.cpp"), LocalFileSystem())) is False

    def test_embedded_nul_counts_as_missing(self, tmp_path):
        fs = LocalFileSystem()
        bad = str(tmp_path / "a\0b.cpp")
        assert asyncio.run(fs.path_exists(bad)) is False
        assert asyncio.run(fs.is_regular_file(bad)) is False


class TestWithFakeFileSystem:
    def test_missing_path_skips_file_query(self, fake_filesystem):
        fs = fake_filesystem()
        assert asyncio.run(is_existing_file("/nope.cpp", fs)) is False
        assert fs.calls == [("exists", "/nope.cpp")]

    def test_directory(self, fake_filesystem):
        fs = fake_filesystem(directories=["/work/src"])
        assert asyncio.run(is_existing_file("/work/src", fs)) is False
        assert fs.calls == [("exists", "/work/src"), ("is_file", "/work/src")]

    def test_file(self, fake_filesystem):
        fs = fake_filesystem(files=["/work/src/a.cpp"])
        assert asyncio.run(is_existing_file("/work/src/a.cpp", fs)) is True
