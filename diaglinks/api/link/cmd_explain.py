"""Link explain API command."""

from collections import Counter
from collections.abc import Iterator

from ...constants import DEFAULT_LINE_MARKER
from .._output_schemas.link import LinkExplainOutput
from ..config.ConfigError import ConfigError
from ..config.Platform import Platform
from ..StageResult import StageResult
from ._ScanInputs import _ScanInputs
from .LinkScanner import LinkScanner
from .ScanStage import ScanStage


def cmd_explain(
    path: str,
    workspace: str,
    marker: str | None = None,
    platform: str | None = None,
    eol: str | None = None,
    only_marked: bool = False,
) -> StageResult:
    """Explain, line by line, why build output did or did not become links.

    Args:
        only_marked: Leave out lines rejected for lacking the marker.
        Other arguments as for cmd_scan.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        try:
            inputs = _ScanInputs.load(path, workspace, marker=marker, platform=platform, eol=eol)
        except (ConfigError, OSError) as e:
            yield (1.0, "Complete")
            result_obj.output = LinkExplainOutput(
                path=path,
                workspace_root="",
                platform=platform or Platform.from_host().value,
                line_marker=marker if marker is not None else DEFAULT_LINE_MARKER,
                lines=[],
                stage_counts={},
                errors=[str(e)],
            ).model_dump(mode="python")
            result_obj.result = f"Cannot scan {path}: {e}"
            result_obj.success = False
            return

        yield (0.5, "Tracing lines...")
        config = inputs.config
        results = LinkScanner(config).explain_sync(inputs.text, inputs.eol)

        counts = Counter("linked" if r.ok else r.failed_stage.value for r in results)
        if only_marked:
            results = [r for r in results if r.failed_stage is not ScanStage.MARKER]

        yield (1.0, "Complete")
        result_obj.output = LinkExplainOutput(
            path=path,
            workspace_root=config.workspace_root,
            platform=config.platform.value,
            line_marker=config.line_marker,
            lines=[r.to_dict() for r in results],
            stage_counts=dict(counts),
            errors=[],
        ).model_dump(mode="python")
        result_obj.result = f"{counts.get('linked', 0)} of {sum(counts.values())} line(s) linked"
        result_obj.success = True

    return StageResult(announce=f"Explaining source locations in {path}...", progress_callback=do_work)
