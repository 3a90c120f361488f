"""CLI display implementation using Rich library."""

import json
import sys
from datetime import datetime
from typing import Any

import yaml
from rich.console import Console
from rich.markup import escape

from ...utils.display.Display import Display


def _timestamp() -> str:
    return datetime.now().strftime("%H:%M:%S")


class CLIDisplay(Display):
    """Status lines on stderr, structured output on stdout."""

    def __init__(self):
        self.stderr_console = Console(file=sys.stderr)

    def status(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(f"[dim]{_timestamp()}[/dim] [blue]i[/blue] {escape(message)}", highlight=False)

    def success(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(f"[dim]{_timestamp()}[/dim] [green]✓[/green] {escape(message)}", highlight=False)

    def error(self, message: str, **kwargs) -> None:
        details = kwargs.get("details", "")
        self.stderr_console.print(f"[dim]{_timestamp()}[/dim] [red]✗[/red] {escape(message)}", highlight=False)
        if details:
            self.stderr_console.print(f"  [dim]{escape(str(details))}[/dim]", highlight=False)

    def warning(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(f"[yellow]⚠[/yellow] {escape(message)}", highlight=False)

    def info(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(message, highlight=False)

    def json_output(self, data: Any, **kwargs) -> None:
        output_format = kwargs.get("format", "yaml")
        indent = kwargs.get("indent", 2)

        if output_format == "yaml":
            rendered = yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
            lexer_name = "yaml"
        else:
            rendered = json.dumps(data, indent=indent, ensure_ascii=False) + "\n"
            lexer_name = "json"

        if sys.stdout.isatty():
            from pygments import highlight
            from pygments.formatters import Terminal256Formatter
            from pygments.lexers import get_lexer_by_name

            rendered = highlight(rendered, get_lexer_by_name(lexer_name), Terminal256Formatter(style="monokai"))

        sys.stdout.write(rendered)
