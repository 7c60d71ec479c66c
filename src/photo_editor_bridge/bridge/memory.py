import copy
from dataclasses import dataclass
from typing import Any

from photo_editor_bridge.models import EditorResult

BASELINE_CONFIGURATION: dict[str, Any] = {
    "filter": {"categories": []},
    "sticker": {"categories": []},
    "text": {"fonts": []},
    "overlay": {"items": []},
    "frame": {"items": []},
}


@dataclass(frozen=True)
class PresentCall:
    image: Any
    configuration: dict[str, Any] | None
    serialization: Any | None


class RecordingEditorBridge:
    """Editor bridge that records every call instead of showing an editor.

    Implements the ``EditorBridge`` protocol. ``present`` answers with
    ``result``; ``None`` stands for a dismissed editor.
    """

    def __init__(
        self,
        result: EditorResult | None = None,
        default_configuration: dict[str, Any] | None = None,
    ) -> None:
        self.result = result
        self.presented: list[PresentCall] = []
        self.licenses: list[Any] = []
        self._default_configuration = (
            default_configuration if default_configuration is not None else BASELINE_CONFIGURATION
        )

    def present(
        self,
        image: Any,
        configuration: dict[str, Any] | None,
        serialization: Any | None,
    ) -> EditorResult | None:
        self.presented.append(PresentCall(image=image, configuration=configuration, serialization=serialization))
        return self.result

    def unlock_with_license(self, license: Any) -> None:
        self.licenses.append(license)

    def create_default_configuration(self) -> dict[str, Any]:
        return copy.deepcopy(self._default_configuration)
