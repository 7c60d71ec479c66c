"""Shared fixtures and helpers for tests."""

from pathlib import Path
from typing import Any

import pytest

from photo_editor_bridge.assets import InMemoryAssetRegistry
from photo_editor_bridge.bridge.memory import RecordingEditorBridge
from photo_editor_bridge.core.catalog import FRAME_EDGES, FRAME_SEGMENTS
from photo_editor_bridge.models import PlatformDescriptor

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def registry() -> InMemoryAssetRegistry:
    return InMemoryAssetRegistry()


@pytest.fixture
def bridge() -> RecordingEditorBridge:
    return RecordingEditorBridge()


@pytest.fixture
def full_registry() -> InMemoryAssetRegistry:
    """Handles 1..21, one per catalog reference path, each resolving to ``file://asset-<n>.png``."""
    registry = InMemoryAssetRegistry()
    for handle in range(1, 22):
        registry.register(PlatformDescriptor(uri=f"file://asset-{handle}.png", width=32, height=32, scale=2.0))
    return registry


@pytest.fixture
def full_configuration() -> dict[str, Any]:
    """A configuration with a distinct unresolved handle at every catalog reference path."""
    handles = iter(range(1, 22))
    return {
        "filter": {
            "categories": [
                {
                    "identifier": "vintage",
                    "thumbnailURI": next(handles),
                    "items": [{"identifier": "sepia", "lutURI": next(handles)}],
                }
            ]
        },
        "sticker": {
            "categories": [
                {
                    "identifier": "emoji",
                    "thumbnailURI": next(handles),
                    "items": [{"identifier": "smile", "thumbnailURI": next(handles), "stickerURI": next(handles)}],
                }
            ]
        },
        "text": {"fonts": [{"identifier": "roboto", "fontURI": next(handles)}]},
        "overlay": {"items": [{"identifier": "grain", "thumbnailURI": next(handles), "overlayURI": next(handles)}]},
        "frame": {
            "items": [
                {
                    "identifier": "wood",
                    "thumbnailURI": next(handles),
                    "imageGroups": {
                        edge: {segment: next(handles) for segment in FRAME_SEGMENTS} for edge in FRAME_EDGES
                    },
                }
            ]
        },
    }
