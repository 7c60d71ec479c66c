import json
from typing import Any

from photo_editor_bridge.core.ports.assets import AssetHandleResolver
from photo_editor_bridge.core.ports.editor import EditorBridge
from photo_editor_bridge.core.walker import resolve_asset_references, resolve_top_level_image
from photo_editor_bridge.models import EditorResult
from photo_editor_bridge.settings import Platform, get_platform


class PhotoEditor:
    """Prepares editor input for the host platform and hands it to the editor bridge.

    Android expects a bare image locator and JSON-encoded payloads; iOS takes
    the image descriptor and plain objects.
    """

    def __init__(
        self,
        bridge: EditorBridge,
        assets: AssetHandleResolver,
        platform: Platform | None = None,
    ) -> None:
        self._bridge = bridge
        self._assets = assets
        self._platform = platform if platform is not None else get_platform()

    @property
    def platform(self) -> Platform:
        return self._platform

    @property
    def _is_android(self) -> bool:
        return self._platform is Platform.ANDROID

    def open_editor(
        self,
        image_source: Any,
        configuration: dict[str, Any] | None = None,
        serialization: Any | None = None,
    ) -> EditorResult | None:
        """Present the editor for ``image_source``.

        ``image_source`` may be a locator string, a mapping with a ``uri`` or an
        asset handle. Asset handles inside ``configuration`` are resolved in
        place first. Returns ``None`` when the editor is dismissed without
        exporting.
        """
        resolve_asset_references(configuration, self._assets)
        image = resolve_top_level_image(image_source, self._assets, extract_locator=self._is_android)
        if self._is_android and serialization is not None:
            serialization = json.dumps(serialization)
        return self._bridge.present(image, configuration, serialization)

    def unlock_with_license(self, license: Any) -> None:
        if self._is_android:
            license = json.dumps(license)
        self._bridge.unlock_with_license(license)

    def create_default_configuration(self) -> dict[str, Any]:
        return self._bridge.create_default_configuration()
