"""Terminal display: rich status lines on stderr, data on stdout."""

import json
import sys
from datetime import datetime
from typing import Any

import yaml  # type: ignore
from rich.console import Console

from .Display import Display


class CLIDisplay(Display):
    """Keep stdout clean for YAML/JSON so ``picup image scan doc.md | yq`` works."""

    def __init__(self):
        self.console = Console(file=sys.stderr, highlight=False)

    def _stamped(self, marker: str, message: str) -> None:
        self.console.print(f"[dim]{datetime.now():%H:%M:%S}[/dim] {marker} {message}")

    def status(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self._stamped("[blue]»[/blue]", message)

    def info(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.console.print(message)

    def success(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self._stamped("[green]✓[/green]", message)

    def error(self, message: str, **kwargs) -> None:
        self._stamped("[red]✗[/red]", message)
        if kwargs.get("details"):
            self.console.print(f"  [dim]{kwargs['details']}[/dim]")

    def warning(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.console.print(f"[yellow]![/yellow] {message}")

    def json_output(self, data: Any, **kwargs) -> None:
        if kwargs.get("format", "yaml") == "json":
            sys.stdout.write(json.dumps(data, indent=kwargs.get("indent", 2), ensure_ascii=False) + "\n")
        else:
            sys.stdout.write(yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True))
