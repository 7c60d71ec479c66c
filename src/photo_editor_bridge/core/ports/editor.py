from typing import Any, Protocol

from photo_editor_bridge.models import EditorResult


class EditorBridge(Protocol):
    def present(
        self,
        image: Any,
        configuration: dict[str, Any] | None,
        serialization: Any | None,
    ) -> EditorResult | None: ...

    def unlock_with_license(self, license: Any) -> None: ...

    def create_default_configuration(self) -> dict[str, Any]: ...
