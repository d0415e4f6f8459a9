import logging
from collections.abc import Mapping, MutableMapping
from typing import Any, List, Optional

from .exceptions import PathTraversalError

log = logging.getLogger(__name__)


def _split(root: Any, path: Any, mapping_type: type) -> List[str]:
    if not isinstance(root, mapping_type):
        raise TypeError(f"root must be a mapping, got {type(root).__name__}")
    if not isinstance(path, str):
        raise TypeError(f"path must be a string, got {type(path).__name__}")
    if not path:
        raise TypeError("path must be a non-empty string")
    # "a..b" yields an empty-string key, which is addressed like any other.
    return path.split(".")


def _descend(root: Mapping, path: str, segments: List[str]) -> Optional[Mapping]:
    # None means an intermediate is absent (or null): nothing is stored below it.
    current = root
    for depth, key in enumerate(segments[:-1], start=1):
        nxt = current.get(key)
        if nxt is None:
            return None
        if not isinstance(nxt, Mapping):
            raise PathTraversalError(path, ".".join(segments[:depth]))
        current = nxt
    return current


def get_path(root: Mapping, path: str, default: Any = None) -> Any:
    """
    Reads the value addressed by a dotted path.

    A missing key at any depth returns `default`. An intermediate segment
    that holds a value other than a mapping raises PathTraversalError naming
    the prefix walked so far. Never mutates `root`.

    Example:
        >>> get_path({"x": {"y": {"z": 1}}}, "x.y.z")
        1
    """
    segments = _split(root, path, Mapping)
    parent = _descend(root, path, segments)
    if parent is None:
        return default
    return parent.get(segments[-1], default)


def set_path(root: MutableMapping, path: str, value: Any) -> None:
    """
    Writes `value` at a dotted path, creating intermediate mappings.

    An intermediate segment that is absent or holds anything other than a
    mapping is replaced by a new empty dict. Traversal never fails.
    """
    segments = _split(root, path, MutableMapping)

    current = root
    for key in segments[:-1]:
        nxt = current.get(key)
        if not isinstance(nxt, MutableMapping):
            if nxt is not None:
                log.debug(f"Replacing {type(nxt).__name__} at '{key}' in '{path}'")
            nxt = current[key] = {}
        current = nxt

    current[segments[-1]] = value


def delete_path(root: MutableMapping, path: str) -> Any:
    """
    Removes the value at a dotted path and returns it (None if absent).

    Traverses like get_path; never creates structure.
    """
    segments = _split(root, path, MutableMapping)
    parent = _descend(root, path, segments)
    if parent is None:
        return None
    if not isinstance(parent, MutableMapping):
        raise TypeError(f"value at '{path}' is held by a read-only mapping")
    return parent.pop(segments[-1], None)
