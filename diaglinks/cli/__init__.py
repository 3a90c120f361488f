"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from ..api.config.ConfigError import ConfigError
    from ..api.config.DiaglinksConfig import DiaglinksConfig
    from ..utils.get_package_version import get_package_version
    from ..utils.logger import configure_logging
    from ._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        print(f"diaglinks {get_package_version()}")
        return 0

    try:
        level = DiaglinksConfig.load().log.level
    except ConfigError:
        # commands report the broken settings file themselves
        level = "INFO"
    configure_logging(level=level)

    app = _create_app()
    try:
        exit_code = app(argv, standalone_mode=False)
        return exit_code if isinstance(exit_code, int) else 0
    except SystemExit as e:
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    except typer.Exit as e:
        return e.exit_code
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 2
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
