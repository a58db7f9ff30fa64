from .canonical import canonicalize
from .key_paths import MISSING, get_value, iter_paths, set_value, split_path
from .store import CatalogStore

__all__ = [
    "MISSING",
    "CatalogStore",
    "canonicalize",
    "get_value",
    "iter_paths",
    "set_value",
    "split_path",
]
