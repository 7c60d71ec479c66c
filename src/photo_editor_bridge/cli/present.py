import json
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.markup import escape

from photo_editor_bridge.assets.manifest import load_manifest
from photo_editor_bridge.bridge.memory import RecordingEditorBridge
from photo_editor_bridge.cli.resolve import load_configuration
from photo_editor_bridge.core.editor import PhotoEditor
from photo_editor_bridge.settings import get_platform, parse_platform

console = Console()
err_console = Console(stderr=True)


def _parse_image(image: str) -> Any:
    """Integer arguments are asset handles, anything else a locator."""
    try:
        return int(image)
    except ValueError:
        return image


def present(
    image: Annotated[str, typer.Argument(help="Image locator or asset handle.")],
    manifest: Annotated[Path, typer.Option(help="JSON asset manifest mapping handles to descriptors.")],
    config: Annotated[Path | None, typer.Option(help="Path to a JSON editor configuration.")] = None,
    platform: Annotated[
        str | None,
        typer.Option(help="Target platform (ios or android). Defaults to $PHOTO_EDITOR_PLATFORM."),
    ] = None,
) -> None:
    """Show the payload the editor would be opened with."""
    bridge = RecordingEditorBridge()
    try:
        target = parse_platform(platform) if platform is not None else get_platform()
        registry = load_manifest(manifest)
        configuration = load_configuration(config) if config is not None else bridge.create_default_configuration()
    except ValueError as exc:
        err_console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1) from exc

    editor = PhotoEditor(bridge, registry, platform=target)
    editor.open_editor(_parse_image(image), configuration)
    call = bridge.presented[-1]
    err_console.print(f"[green]Platform[/green] {target.value}")
    console.print_json(json.dumps({"image": call.image, "configuration": call.configuration}))
