from collections.abc import Mapping
from typing import Any, Protocol

from photo_editor_bridge.models import PlatformDescriptor


class AssetHandleResolver(Protocol):
    def resolve_handle(self, handle: int) -> PlatformDescriptor | Mapping[str, Any] | None: ...
