from rich.console import Console
from rich.table import Table

from photo_editor_bridge.core.catalog import iter_reference_paths
from photo_editor_bridge.core.paths import format_path

console = Console()


def sites() -> None:
    """List the configuration paths that may hold asset references."""
    table = Table(show_lines=False)
    table.add_column("collection")
    table.add_column("reference")
    rows = list(iter_reference_paths())
    for collection, reference in rows:
        table.add_row(format_path(collection), format_path(reference))
    console.print(table)
    console.print(f"({len(rows)} rows)")
