import json
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.markup import escape

from photo_editor_bridge.assets.manifest import load_manifest
from photo_editor_bridge.core.walker import resolve_asset_references

console = Console()
err_console = Console(stderr=True)


def load_configuration(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise ValueError(f"Configuration not found: {path}") from None
    except json.JSONDecodeError as exc:
        raise ValueError(f"Configuration is not valid JSON: {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Configuration must be a JSON object: {path}")
    return data


def resolve(
    config: Annotated[Path, typer.Argument(help="Path to a JSON editor configuration.")],
    manifest: Annotated[Path, typer.Option(help="JSON asset manifest mapping handles to descriptors.")],
    locator_only: Annotated[
        bool,
        typer.Option("--locator-only/--descriptor", help="Write bare locators or full descriptors."),
    ] = True,
    output: Annotated[Path | None, typer.Option(help="Write the resolved configuration here.")] = None,
) -> None:
    """Resolve asset handles in a configuration file."""
    try:
        configuration = load_configuration(config)
        registry = load_manifest(manifest)
    except ValueError as exc:
        err_console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1) from exc

    count = resolve_asset_references(configuration, registry, extract_locator=locator_only)
    rendered = json.dumps(configuration, indent=2)
    if output is None:
        console.print_json(rendered)
    else:
        output.write_text(rendered + "\n", encoding="utf-8")
        err_console.print(f"[green]Wrote[/green] {output}")
    err_console.print(f"({count} references resolved)")
