"""Image Typer app factory."""

import typer

from picup.api.image.cmd_rewrite import cmd_rewrite
from picup.api.image.cmd_scan import cmd_scan
from picup.api.image.cmd_upload import cmd_upload
from picup.cli._handle_stage_result import _handle_stage_result


def image() -> typer.Typer:
    """Create and configure the image Typer app."""
    app = typer.Typer(
        name="image",
        help="Find, upload and rewrite Markdown image references",
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
        path: str = typer.Argument(..., help="Markdown document to scan"),
    ) -> None:
        """List image references and whether they are local, remote or missing."""
        _handle_stage_result(cmd_scan)(path=path)

    @app.command(name="rewrite")
    def rewrite_cmd(
        path: str = typer.Argument(..., help="Markdown document to process"),
        same_file: bool = typer.Option(
            False, "--same-file", "-s", help="Edit the document in place instead of an _uploadedVersion copy"
        ),
    ) -> None:
        """Upload local images and point their references at the uploaded URLs."""
        _handle_stage_result(cmd_rewrite)(path=path, same_file=same_file)

    @app.command(name="upload")
    def upload_cmd(
        paths: list[str] = typer.Argument(..., help="Image files to upload"),
    ) -> None:
        """Upload image files and print Markdown links for them."""
        _handle_stage_result(cmd_upload)(paths=paths)

    return app
