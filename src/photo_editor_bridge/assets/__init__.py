from photo_editor_bridge.assets.manifest import load_manifest, registry_from_data
from photo_editor_bridge.assets.memory import InMemoryAssetRecord, InMemoryAssetRegistry

__all__ = [
    "InMemoryAssetRecord",
    "InMemoryAssetRegistry",
    "load_manifest",
    "registry_from_data",
]
