"""Config Typer app factory."""

import typer

from picup.api.config.cmd_show import cmd_show
from picup.api.config.cmd_version import cmd_version
from picup.cli._handle_stage_result import _handle_stage_result
from picup.constants import PICUP_HOME_DISPLAY


def config() -> typer.Typer:
    """Create and configure the config Typer app."""
    app = typer.Typer(
        name="config",
        help=f"Show the configuration in {PICUP_HOME_DISPLAY}/config.json (or $PICUP_HOME)",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """List configuration sections when no subcommand is provided."""
        if ctx.invoked_subcommand is None:
            _handle_stage_result(cmd_show)("")

    @app.command(name="show")
    def show_cmd(
        section: str = typer.Argument(..., help="Configuration section name (upload, rewrite, log)"),
    ) -> None:
        """Show configuration for a specific section."""
        _handle_stage_result(cmd_show)(section)

    @app.command(name="version")
    def version_cmd() -> None:
        """Show picup version information."""
        _handle_stage_result(cmd_version)()

    return app
