"""Load asset handle tables from JSON manifests.

Two layouts are accepted:

* an object mapping decimal handle strings to descriptors,
  e.g. ``{"7": {"uri": "file://thumb.png", "width": 64, "height": 64}}``;
* a list of descriptors, registered in order starting at handle 1.

A descriptor may also be given as a bare locator string.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from photo_editor_bridge.assets.memory import InMemoryAssetRegistry


def _parse_handle(key: str) -> int:
    try:
        handle = int(key)
    except ValueError:
        raise ValueError(f"Manifest key '{key}' is not an integer asset handle") from None
    if handle <= 0:
        raise ValueError(f"Manifest key '{key}' is not a positive asset handle")
    return handle


def registry_from_data(data: Any) -> InMemoryAssetRegistry:
    registry = InMemoryAssetRegistry()
    if isinstance(data, dict):
        entries = {_parse_handle(key): value for key, value in data.items()}
    elif isinstance(data, list):
        entries = dict(enumerate(data, start=1))
    else:
        raise ValueError("Asset manifest must be a JSON object or list")

    try:
        registry.register_many(entries)
    except ValidationError as exc:
        raise ValueError(f"Invalid asset descriptor in manifest: {exc}") from exc
    return registry


def load_manifest(path: str | Path) -> InMemoryAssetRegistry:
    manifest_path = Path(path)
    try:
        data = json.loads(manifest_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise ValueError(f"Asset manifest not found: {manifest_path}") from None
    except json.JSONDecodeError as exc:
        raise ValueError(f"Asset manifest is not valid JSON: {manifest_path}: {exc}") from exc
    return registry_from_data(data)
