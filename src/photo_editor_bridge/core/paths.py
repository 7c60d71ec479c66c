"""Path-addressed read/write over JSON-like configuration trees.

A path is a tuple of steps: ``str`` keys index mappings, ``int`` indices index
sequences. Traversal never raises; anything that cannot be followed is reported
as ``MISSING``, which is distinct from a present ``None``.
"""

from collections.abc import Mapping, MutableMapping, MutableSequence, Sequence
from typing import Any, Final

PathStep = str | int
Path = tuple[PathStep, ...]


class _Missing:
    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()


def is_sequence(node: Any) -> bool:
    return isinstance(node, Sequence) and not isinstance(node, (str, bytes, bytearray))


def _step(node: Any, step: PathStep) -> Any:
    if isinstance(step, str):
        if isinstance(node, Mapping) and step in node:
            return node[step]
        return MISSING
    if isinstance(step, int) and not isinstance(step, bool) and is_sequence(node):
        if 0 <= step < len(node):
            return node[step]
    return MISSING


def get_at(tree: Any, path: Path) -> Any:
    node = tree
    for step in path:
        if node is MISSING or node is None:
            return MISSING
        node = _step(node, step)
    return node


def set_at(tree: Any, path: Path, value: Any) -> bool:
    """Assign ``value`` at ``path`` if its parent container already exists.

    Returns whether the write happened. Intermediate containers are never
    created.
    """
    if not path:
        return False
    parent = get_at(tree, path[:-1])
    key = path[-1]
    if isinstance(key, str) and isinstance(parent, MutableMapping):
        parent[key] = value
        return True
    if (
        isinstance(key, int)
        and not isinstance(key, bool)
        and isinstance(parent, MutableSequence)
        and 0 <= key < len(parent)
    ):
        parent[key] = value
        return True
    return False


def format_path(path: Path) -> str:
    parts: list[str] = []
    for step in path:
        if isinstance(step, int) or step == "*":
            parts.append(f"[{step}]")
        elif parts:
            parts.append(f".{step}")
        else:
            parts.append(step)
    return "".join(parts)
