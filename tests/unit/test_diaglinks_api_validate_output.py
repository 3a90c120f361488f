"""Unit tests for StageResult and output validation."""

from collections.abc import Iterator

import pytest

from diaglinks.api._output_schemas._registry import get_output_schema, register_output_schema
from diaglinks.api._output_schemas.link import LinkScanOutput
from diaglinks.api.link.cmd_scan import cmd_scan
from diaglinks.api.StageResult import StageResult
from diaglinks.api.validate_output import validate_output


def test_stage_result_initialization():
    def progress_gen(result: StageResult) -> Iterator[tuple[float, str]]:
        yield (1.0, "Complete")
        result.result = "Done"
        result.output = {"test": True}
        result.success = True

    result = StageResult(announce="Testing", progress_callback=progress_gen)
    assert result.result == ""
    assert result.output == {}
    assert result.success is False

    list(result.progress_callback(result))
    assert result.success is True
    assert result.output == {"test": True}


def test_schema_registered_for_commands():
    assert get_output_schema("link", "scan") is LinkScanOutput
    assert get_output_schema("link", "nope") is None


def test_duplicate_registration_rejected():
    with pytest.raises(ValueError, match="already registered"):
        register_output_schema("link", "scan", LinkScanOutput)


def test_fills_defaults():
    output = {
        "path": "-",
        "workspace_root": "/w",
        "platform": "posix",
        "line_marker": "[build] ",
        "lines_scanned": 0,
        "links": [],
    }
    validated = validate_output(cmd_scan, output)
    assert validated["errors"] == []
    assert validated["warnings"] == []


def test_missing_field_fails():
    with pytest.raises(ValueError, match="Output validation failed for link.scan"):
        validate_output(cmd_scan, {"path": "-"})


def test_functions_outside_api_pass_through():
    def cmd_local():
        pass

    assert validate_output(cmd_local, {"anything": 1}) == {"anything": 1}
