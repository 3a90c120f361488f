"""Unit tests for diaglinks.api.config.ScanConfig module."""

import os
import sys

import pytest
from pydantic import ValidationError

from diaglinks.api.config.ConfigError import ConfigError
from diaglinks.api.config.Platform import Platform
from diaglinks.api.config.ScanConfig import ScanConfig

posix_host = pytest.mark.skipif(sys.platform == "win32", reason="host path checks assume a POSIX host")


class TestScanConfigModel:
    def test_defaults(self):
        config = ScanConfig(platform=Platform.POSIX, workspace_root="/work/proj")
        assert config.line_marker == "[build] "
        assert config.max_concurrency == 32

    def test_posix_root_is_normalized(self):
        config = ScanConfig(platform=Platform.POSIX, workspace_root="/work//proj/./sub/../")
        assert config.workspace_root == "/work/proj"

    def test_windows_root_is_normalized(self):
        config = ScanConfig(platform="windows", workspace_root="C:/work/proj")
        assert config.platform is Platform.WINDOWS
        assert config.workspace_root == "C:\\work\\proj"

    @pytest.mark.parametrize(
        ("platform", "root"),
        [
            (Platform.POSIX, "work/proj"),
            (Platform.POSIX, ""),
            (Platform.POSIX, "   "),
            (Platform.WINDOWS, "work\\proj"),
            (Platform.WINDOWS, "C:work"),
            (Platform.WINDOWS, "\\work"),
            (Platform.WINDOWS, "/work"),
        ],
    )
    def test_rejects_relative_or_empty_root(self, platform, root):
        with pytest.raises(ValidationError):
            ScanConfig(platform=platform, workspace_root=root)

    def test_rejects_empty_marker(self):
        with pytest.raises(ValidationError):
            ScanConfig(platform=Platform.POSIX, workspace_root="/work", line_marker="")

    def test_rejects_unknown_fields(self):
        with pytest.raises(ValidationError):
            ScanConfig(platform=Platform.POSIX, workspace_root="/work", cache=True)

    def test_is_immutable(self):
        config = ScanConfig(platform=Platform.POSIX, workspace_root="/work")
        with pytest.raises(ValidationError):
            config.workspace_root = "/elsewhere"

    def test_platform_defaults_to_host(self, monkeypatch):
        monkeypatch.setattr(sys, "platform", "linux")
        assert ScanConfig(workspace_root="/work").platform is Platform.POSIX


@posix_host
class TestForWorkspace:
    def test_existing_directory(self, workspace):
        config = ScanConfig.for_workspace(workspace)
        assert config.platform is Platform.POSIX
        assert config.workspace_root == os.path.normpath(str(workspace))

    def test_overrides(self, workspace):
        config = ScanConfig.for_workspace(str(workspace), line_marker="[ninja] ", max_concurrency=4)
        assert config.line_marker == "[ninja] "
        assert config.max_concurrency == 4

    def test_expands_home(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        config = ScanConfig.for_workspace("~")
        assert config.workspace_root == os.path.normpath(str(tmp_path))

    def test_missing_directory_fails(self, tmp_path):
        with pytest.raises(ConfigError, match="Workspace root is not a directory"):
            ScanConfig.for_workspace(tmp_path / "missing")

    def test_file_is_not_a_workspace(self, tmp_path):
        file_path = tmp_path / "file.txt"
        file_path.write_text("x")
        with pytest.raises(ConfigError, match="not a directory"):
            ScanConfig.for_workspace(file_path)

    def test_empty_root_fails(self):
        with pytest.raises(ConfigError, match="Workspace root is required"):
            ScanConfig.for_workspace("  ")

    def test_invalid_field_becomes_config_error(self, workspace):
        with pytest.raises(ConfigError, match="max_concurrency"):
            ScanConfig.for_workspace(workspace, max_concurrency=0)

    def test_foreign_platform_only_checks_syntax(self):
        config = ScanConfig.for_workspace("D:\\code\\framework", platform=Platform.WINDOWS)
        assert config.workspace_root == "D:\\code\\framework"

    def test_foreign_platform_relative_root_fails(self):
        with pytest.raises(ConfigError, match="workspace_root"):
            ScanConfig.for_workspace("code\\framework", platform=Platform.WINDOWS)


@posix_host
def test_model_checks_root_syntax_only(tmp_path):
    missing = str(tmp_path / "missing")
    assert ScanConfig(platform=Platform.POSIX, workspace_root=missing).workspace_root == missing
    with pytest.raises(ConfigError, match="not a directory"):
        ScanConfig.for_workspace(missing, platform=Platform.POSIX)
