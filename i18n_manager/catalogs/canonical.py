from __future__ import annotations

from typing import Any


def canonicalize(tree: Any) -> Any:
    """
    Return ``tree`` with every mapping's keys in ordinal order.

    Scalars and lists come back unchanged (lists are neither reordered nor
    descended into). Mappings are rebuilt, so the input is never mutated.
    """
    if not isinstance(tree, dict):
        return tree
    return {key: canonicalize(tree[key]) for key in sorted(tree)}
