"""Known places in an editor configuration where asset references live.

Every site is listed explicitly; values elsewhere in the tree are never treated
as asset references, even if they look like one.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from photo_editor_bridge.core.paths import Path

FRAME_EDGES = ("top", "left", "right", "bottom")
FRAME_SEGMENTS = ("startURI", "midURI", "endURI")
ANY_ELEMENT = "*"


@dataclass(frozen=True)
class ReferenceSite:
    collection: Path
    references: tuple[Path, ...] = ()
    children: tuple["ReferenceSite", ...] = ()


FILTER_SITE = ReferenceSite(
    collection=("filter", "categories"),
    references=(("thumbnailURI",),),
    children=(ReferenceSite(collection=("items",), references=(("lutURI",),)),),
)

STICKER_SITE = ReferenceSite(
    collection=("sticker", "categories"),
    references=(("thumbnailURI",),),
    children=(
        ReferenceSite(
            collection=("items",),
            references=(("thumbnailURI",), ("stickerURI",)),
        ),
    ),
)

FONT_SITE = ReferenceSite(
    collection=("text", "fonts"),
    references=(("fontURI",),),
)

OVERLAY_SITE = ReferenceSite(
    collection=("overlay", "items"),
    references=(("thumbnailURI",), ("overlayURI",)),
)

FRAME_SITE = ReferenceSite(
    collection=("frame", "items"),
    references=(
        ("thumbnailURI",),
        *(("imageGroups", edge, segment) for edge in FRAME_EDGES for segment in FRAME_SEGMENTS),
    ),
)

REFERENCE_SITES: tuple[ReferenceSite, ...] = (
    FILTER_SITE,
    STICKER_SITE,
    FONT_SITE,
    OVERLAY_SITE,
    FRAME_SITE,
)


def iter_reference_paths(
    sites: tuple[ReferenceSite, ...] = REFERENCE_SITES,
    prefix: Path = (),
) -> Iterator[tuple[Path, Path]]:
    """Yield ``(collection, reference)`` pairs, nested collections prefixed by their parent and ``ANY_ELEMENT``."""
    for site in sites:
        collection = prefix + site.collection
        for reference in site.references:
            yield collection, reference
        yield from iter_reference_paths(site.children, collection + (ANY_ELEMENT,))
