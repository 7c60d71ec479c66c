from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from photo_editor_bridge.core.ports.assets import AssetHandleResolver
from photo_editor_bridge.models import PlatformDescriptor


@dataclass(frozen=True)
class AssetHandle:
    handle: int


@dataclass(frozen=True)
class LocatorReference:
    uri: str


@dataclass(frozen=True)
class DescriptorReference:
    source: Mapping[str, Any] | PlatformDescriptor
    uri: str | None


AssetReference = AssetHandle | LocatorReference | DescriptorReference


def is_unresolved_handle(value: Any) -> bool:
    """Bundler handles are non-zero ints; ``bool`` is never a handle."""
    return isinstance(value, int) and not isinstance(value, bool) and value != 0


def classify_reference(value: Any) -> AssetReference | None:
    if is_unresolved_handle(value):
        return AssetHandle(value)
    if isinstance(value, str):
        return LocatorReference(value)
    if isinstance(value, PlatformDescriptor):
        return DescriptorReference(value, value.uri)
    if isinstance(value, Mapping):
        uri = value.get("uri")
        return DescriptorReference(value, uri if isinstance(uri, str) else None)
    return None


def resolve_static_asset(
    reference: Any,
    assets: AssetHandleResolver,
    extract_locator: bool = True,
) -> Any:
    """Resolve one asset reference to a locator string or a descriptor.

    Only unresolved handles reach ``assets``; when it has no entry for the
    handle the input is returned unchanged. What it returns, a model or a
    plain mapping, is handled like a descriptor found in the tree. Strings
    and descriptors pass through, unwrapped to their ``uri`` in locator mode.
    """
    if reference is None:
        return None

    classified = classify_reference(reference)
    if isinstance(classified, AssetHandle):
        resolved = assets.resolve_handle(classified.handle)
        if resolved is None:
            return reference
        if isinstance(resolved, PlatformDescriptor):
            resolved = resolved.to_tree_value()
        reference = resolved
        classified = classify_reference(resolved)

    if isinstance(classified, LocatorReference):
        return classified.uri
    if isinstance(classified, DescriptorReference) and extract_locator and classified.uri is not None:
        return classified.uri
    return reference
