from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any

from i18n_manager.core.errors import InvalidKeyPathError

KeyPath = str | Sequence[str]


class _Missing:
    """Marker for "no value at this path"; JSON ``null`` is a present value."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


def split_path(path: str) -> list[str]:
    """Split ``a.b.c`` into segments, rejecting empty ones."""
    parts = path.split(".")
    if any(part == "" for part in parts):
        raise InvalidKeyPathError(path)
    return parts


def _segments(path: KeyPath) -> list[str]:
    return path.split(".") if isinstance(path, str) else list(path)


def get_value(tree: Any, path: KeyPath) -> Any:
    """
    Return the value at ``path`` or ``MISSING``.

    Descends through mappings only; a missing key, a scalar, a list or
    ``None`` on the way all yield ``MISSING``.
    """
    cur: Any = tree
    for part in _segments(path):
        if isinstance(cur, dict) and part in cur:
            cur = cur[part]
        else:
            return MISSING
    return cur


def set_value(tree: Any, path: KeyPath, value: Any) -> dict[str, Any]:
    """
    Assign ``value`` at ``path``, creating intermediate mappings.

    Any non-mapping found at a shorter prefix of the path (scalar, list,
    ``None``) is replaced by an empty mapping, and so is a non-mapping root.
    Returns the root, which is a new dict only in that last case.
    """
    root: dict[str, Any] = tree if isinstance(tree, dict) else {}
    parts = _segments(path)
    if not parts:
        return root
    cur = root
    for part in parts[:-1]:
        nxt = cur.get(part)
        if not isinstance(nxt, dict):
            nxt = {}
            cur[part] = nxt
        cur = nxt
    cur[parts[-1]] = value
    return root


def iter_paths(tree: Any, prefix: str = "") -> Iterator[str]:
    """Yield every leaf path of ``tree`` depth-first, in key order."""
    if not isinstance(tree, dict):
        return
    for key, value in tree.items():
        full = f"{prefix}.{key}" if prefix else key
        if isinstance(value, dict):
            yield from iter_paths(value, full)
        else:
            yield full
