"""Link Typer app factory."""

import typer

from ..api.link.cmd_explain import cmd_explain
from ..api.link.cmd_scan import cmd_scan
from ._handle_stage_result import _handle_stage_result

_WORKSPACE_HELP = "Workspace root relative locations resolve against"
_MARKER_HELP = "Prefix diagnostic lines start with (default from config)"
_PLATFORM_HELP = "Path convention of the log: posix or windows (default: host)"
_EOL_HELP = "Line delimiter: lf, crlf or cr (default: any)"


def link() -> typer.Typer:
    """Create and configure the link Typer app."""
    app = typer.Typer(
        name="link",
        help="Find source locations in build output",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="scan")
    def scan_cmd(
        path: str = typer.Argument(..., help="Build log to scan, '-' for stdin"),
        workspace: str = typer.Option(".", "--workspace", "-w", help=_WORKSPACE_HELP),
        marker: str | None = typer.Option(None, "--marker", "-m", help=_MARKER_HELP),
        platform: str | None = typer.Option(None, "--platform", "-p", help=_PLATFORM_HELP),
        eol: str | None = typer.Option(None, "--eol", help=_EOL_HELP),
    ) -> None:
        """List clickable source locations found in a build log."""
        _handle_stage_result(cmd_scan)(path=path, workspace=workspace, marker=marker, platform=platform, eol=eol)

    @app.command(name="explain")
    def explain_cmd(
        path: str = typer.Argument(..., help="Build log to scan, '-' for stdin"),
        workspace: str = typer.Option(".", "--workspace", "-w", help=_WORKSPACE_HELP),
        marker: str | None = typer.Option(None, "--marker", "-m", help=_MARKER_HELP),
        platform: str | None = typer.Option(None, "--platform", "-p", help=_PLATFORM_HELP),
        eol: str | None = typer.Option(None, "--eol", help=_EOL_HELP),
        only_marked: bool = typer.Option(False, "--only-marked", help="Hide lines without the marker"),
    ) -> None:
        """Show, per line, which stage linked or dropped it."""
        _handle_stage_result(cmd_explain)(
            path=path, workspace=workspace, marker=marker, platform=platform, eol=eol, only_marked=only_marked
        )

    return app
