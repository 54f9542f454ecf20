"""Dotted-path access into nested JSON-like structures.

Paths are plain strings split on ``.``; ``"a.b.c"`` addresses
``data["a"]["b"]["c"]``. Mappings are indexed by the segment itself and lists
by a segment holding an in-range, non-negative integer. Nothing in here raises
for a missing path: lookups fall back to a default and deletes are no-ops.
"""

from __future__ import annotations

from collections.abc import MutableMapping, MutableSequence
from typing import Any

from loguru import logger

_MISSING = object()


def split_path(path: str) -> list[str]:
    """Tokenize `path` on dots, keeping empty segments as literal keys."""
    return str(path).split(".")


def _is_list(node: Any) -> bool:
    return isinstance(node, MutableSequence) and not isinstance(node, (str, bytes, bytearray))


def _list_index(node: MutableSequence[Any], segment: str) -> int | None:
    if not (segment.isascii() and segment.isdecimal()):
        return None
    index = int(segment)
    return index if index < len(node) else None


def _child(node: Any, segment: str) -> Any:
    """Return the child of `node` named by `segment`, or `_MISSING`."""
    if isinstance(node, MutableMapping):
        return node.get(segment, _MISSING)
    if _is_list(node):
        index = _list_index(node, segment)
        if index is not None:
            return node[index]
    return _MISSING


def _assign(node: Any, segment: str, value: Any) -> bool:
    """Store `value` under `segment`; False if a list can't take that index."""
    if not _is_list(node):
        node[segment] = value
        return True
    index = _list_index(node, segment)
    if index is not None:
        node[index] = value
    elif segment.isascii() and segment.isdecimal() and int(segment) == len(node):
        node.append(value)
    else:
        return False
    return True


def _resolve(data: Any, parts: list[str]) -> Any:
    node = data
    for part in parts:
        node = _child(node, part)
        if node is _MISSING:
            break
    return node


def has(data: MutableMapping[str, Any], path: str) -> bool:
    """Return True when `path` addresses an existing value in `data`."""
    return _resolve(data, split_path(path)) is not _MISSING


def get(data: MutableMapping[str, Any], path: str, default: Any = None) -> Any:
    """Return value for dotted `path`, or `default` if not present."""
    node = _resolve(data, split_path(path))
    return default if node is _MISSING else node


# pylint: disable-next=redefined-builtin
def set(data: MutableMapping[str, Any], path: str, value: Any) -> None:
    """Assign `value` at `path`, creating intermediate mappings as needed.

    A scalar intermediate is replaced by an empty mapping. Lists take an
    in-range index, or one past the end to append; any other segment leaves
    the list untouched and nothing is assigned.
    """
    parts = split_path(path)
    node: Any = data
    for part in parts[:-1]:
        child = _child(node, part)
        if not (isinstance(child, MutableMapping) or _is_list(child)):
            child = {}
            if not _assign(node, part, child):
                logger.debug("Cannot set {}: list has no index {!r}", path, part)
                return
        node = child
    if not _assign(node, parts[-1], value):
        logger.debug("Cannot set {}: list has no index {!r}", path, parts[-1])


def delete(data: MutableMapping[str, Any], path: str) -> None:
    """Remove the value at `path` if present. Parents are left in place."""
    parts = split_path(path)
    parent = _resolve(data, parts[:-1])
    leaf = parts[-1]
    if isinstance(parent, MutableMapping):
        parent.pop(leaf, None)
    elif _is_list(parent):
        index = _list_index(parent, leaf)
        if index is not None:
            del parent[index]
