from dataclasses import dataclass
from typing import Any

from photo_editor_bridge.models import PlatformDescriptor


@dataclass(frozen=True)
class InMemoryAssetRecord:
    handle: int
    descriptor: PlatformDescriptor


class InMemoryAssetRegistry:
    """Handle table for bundled assets, handing out handles from 1 upward.

    Implements the ``AssetHandleResolver`` protocol. Every handle passed to
    ``resolve_handle`` is appended to ``lookups``; the registry is meant for
    tests, manifests and other short-lived sessions, so the list is never
    pruned.
    """

    def __init__(self) -> None:
        self.records: dict[int, InMemoryAssetRecord] = {}
        self.lookups: list[int] = []
        self._next_handle = 1

    def register(self, descriptor: PlatformDescriptor | str, handle: int | None = None) -> int:
        if isinstance(descriptor, str):
            descriptor = PlatformDescriptor(uri=descriptor)
        if handle is None:
            handle = self._next_handle
        if isinstance(handle, bool) or handle <= 0:
            raise ValueError(f"Asset handles must be positive integers, got {handle!r}")
        self.records[handle] = InMemoryAssetRecord(handle=handle, descriptor=descriptor)
        self._next_handle = max(self._next_handle, handle + 1)
        return handle

    def register_many(self, entries: dict[int, Any]) -> None:
        for handle, descriptor in entries.items():
            self.register(_coerce_descriptor(descriptor), handle=handle)

    def resolve_handle(self, handle: int) -> PlatformDescriptor | None:
        self.lookups.append(handle)
        record = self.records.get(handle)
        if record is None:
            return None
        return record.descriptor

    def __len__(self) -> int:
        return len(self.records)


def _coerce_descriptor(value: Any) -> PlatformDescriptor | str:
    if isinstance(value, (PlatformDescriptor, str)):
        return value
    return PlatformDescriptor.model_validate(value)
