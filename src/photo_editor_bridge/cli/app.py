import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from photo_editor_bridge.cli.present import present
from photo_editor_bridge.cli.resolve import resolve
from photo_editor_bridge.cli.sites import sites

app = typer.Typer(
    name="photo-editor-bridge",
    help="Photo editor bridge CLI for resolving asset references in editor configurations.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _configure_logging(verbose: bool) -> None:
    """Send package log records to stderr so stdout carries only command output."""
    package_logger = logging.getLogger("photo_editor_bridge")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


@app.callback()
def configure(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log every resolved reference.")] = False,
) -> None:
    _configure_logging(verbose)


app.command("resolve")(resolve)
app.command("present")(present)
app.command("sites")(sites)


def main() -> None:
    app()
