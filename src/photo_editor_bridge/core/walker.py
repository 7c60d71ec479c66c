import logging
from collections.abc import Sequence
from typing import Any

from photo_editor_bridge.core.catalog import REFERENCE_SITES, ReferenceSite
from photo_editor_bridge.core.paths import Path, format_path, get_at, is_sequence, set_at
from photo_editor_bridge.core.ports.assets import AssetHandleResolver
from photo_editor_bridge.core.references import is_unresolved_handle, resolve_static_asset

logger = logging.getLogger(__name__)


def _elements(node: Any, path: Path) -> Sequence[Any]:
    collection = get_at(node, path)
    return collection if is_sequence(collection) else ()


def resolve_nested_asset(
    element: Any,
    path: Path,
    assets: AssetHandleResolver,
    extract_locator: bool = True,
) -> bool:
    """Replace an unresolved handle at ``path`` with its resolved form.

    Returns whether a value was written. Anything other than a handle is left
    as it is.
    """
    asset = get_at(element, path)
    if not is_unresolved_handle(asset):
        return False

    resolved = resolve_static_asset(asset, assets, extract_locator)
    if resolved is asset:
        logger.warning("No asset registered for handle %d at %s; leaving it unresolved", asset, format_path(path))
        return False

    written = set_at(element, path, resolved)
    if written:
        logger.debug("Resolved handle %d at %s", asset, format_path(path))
    return written


def _resolve_site(
    node: Any,
    site: ReferenceSite,
    assets: AssetHandleResolver,
    extract_locator: bool,
) -> int:
    count = 0
    for element in _elements(node, site.collection):
        for reference in site.references:
            if resolve_nested_asset(element, reference, assets, extract_locator):
                count += 1
        for child in site.children:
            count += _resolve_site(element, child, assets, extract_locator)
    return count


def resolve_asset_references(
    configuration: Any,
    assets: AssetHandleResolver,
    extract_locator: bool = True,
    sites: Sequence[ReferenceSite] = REFERENCE_SITES,
) -> int:
    """Resolve every asset handle at the known reference sites, in place.

    Categories that are absent from ``configuration`` are skipped. Collections
    keep their length and order. Returns the number of rewritten references.
    """
    count = 0
    for site in sites:
        count += _resolve_site(configuration, site, assets, extract_locator)
    logger.info("Resolved %d asset reference(s)", count)
    return count


def resolve_top_level_image(
    image_reference: Any,
    assets: AssetHandleResolver,
    extract_locator: bool,
) -> Any:
    return resolve_static_asset(image_reference, assets, extract_locator)
