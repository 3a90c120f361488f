"""Link scan API command."""

from collections.abc import Iterator

from ...constants import DEFAULT_LINE_MARKER
from .._output_schemas.link import LinkScanOutput
from ..config.ConfigError import ConfigError
from ..config.Platform import Platform
from ..StageResult import StageResult
from ._ScanInputs import _ScanInputs
from .LinkScanner import LinkScanner


def cmd_scan(
    path: str,
    workspace: str,
    marker: str | None = None,
    platform: str | None = None,
    eol: str | None = None,
) -> StageResult:
    """Find clickable source locations in a build log.

    Args:
        path: Build log file, or "-" to read stdin.
        workspace: Workspace root relative locations resolve against.
        marker: Line prefix override (defaults to the settings file value).
        platform: "posix" or "windows" (defaults to the host).
        eol: "lf", "crlf" or "cr" (defaults to any line boundary).
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        try:
            inputs = _ScanInputs.load(path, workspace, marker=marker, platform=platform, eol=eol)
        except (ConfigError, OSError) as e:
            yield (1.0, "Complete")
            result_obj.output = LinkScanOutput(
                path=path,
                workspace_root="",
                platform=platform or Platform.from_host().value,
                line_marker=marker if marker is not None else DEFAULT_LINE_MARKER,
                lines_scanned=0,
                links=[],
                errors=[str(e)],
            ).model_dump(mode="python")
            result_obj.result = f"Cannot scan {path}: {e}"
            result_obj.success = False
            return

        yield (0.5, "Scanning lines...")
        config = inputs.config
        scanner = LinkScanner(config)
        results = scanner.explain_sync(inputs.text, inputs.eol)
        links = [r.record.to_dict() for r in results if r.record is not None]

        yield (1.0, "Complete")
        result_obj.output = LinkScanOutput(
            path=path,
            workspace_root=config.workspace_root,
            platform=config.platform.value,
            line_marker=config.line_marker,
            lines_scanned=len(results),
            links=links,
            errors=[],
        ).model_dump(mode="python")
        result_obj.result = f"Found {len(links)} link(s) in {len(results)} line(s)"
        result_obj.success = True

    return StageResult(announce=f"Scanning {path} for source locations...", progress_callback=do_work)
