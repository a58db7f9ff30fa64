"""
File-backed storage for translation catalogs.

One JSON document per language lives at ``<directory>/<language>.json``.
Documents are read and written whole; a missing or blank file reads as an
empty catalog.
"""

from __future__ import annotations

import json
import logging
import math
from pathlib import Path
from typing import Any

from i18n_manager.core.errors import CatalogIOError, MalformedCatalogError
from i18n_manager.utils.json_io import dumps

log = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    """Refuse NaN, Infinity and -Infinity, which are not JSON."""
    raise ValueError(f"invalid JSON constant {name!r}")


def _parse_float(text: str) -> float:
    value = float(text)
    if math.isinf(value):
        raise ValueError(f"number out of range: {text}")
    return value


class CatalogStore:
    """
    Loads and persists per-language catalog trees.

    Typical usage:
        store = CatalogStore(Path("i18n/lang"))
        tree = store.load("en")
        store.save("en", tree)
    """

    def __init__(self, directory: Path | str) -> None:
        self.directory = Path(directory)

    # -- Public API ------------------------------------------------------------

    def path_for(self, language: str) -> Path:
        return self.directory / f"{language}.json"

    def exists(self, language: str) -> bool:
        return self.path_for(language).exists()

    def ensure_directory(self) -> None:
        """Create the catalog directory (and parents) if missing."""
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise CatalogIOError(self.directory, "create", str(e)) from e

    def load(self, language: str) -> Any:
        """
        Read the catalog for ``language``.

        Returns an empty dict for a missing or whitespace-only file.

        Raises:
            MalformedCatalogError: the file is not valid JSON.
            CatalogIOError: the file exists but cannot be read.
        """
        path = self.path_for(language)
        if not path.exists():
            return {}
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise MalformedCatalogError(language, path, str(e)) from e
        except OSError as e:
            raise CatalogIOError(path, "read", str(e), language) from e

        if not text.strip():
            return {}
        try:
            return json.loads(text, parse_constant=_reject_constant, parse_float=_parse_float)
        except ValueError as e:
            raise MalformedCatalogError(language, path, str(e)) from e

    def save(self, language: str, tree: Any) -> None:
        """Overwrite the catalog file for ``language`` with ``tree``."""
        path = self.path_for(language)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("w", encoding="utf-8", newline="\n") as f:
                f.write(dumps(tree))
        except OSError as e:
            raise CatalogIOError(path, "write", str(e), language) from e
        log.debug("Wrote %s", path)
