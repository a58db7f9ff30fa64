# i18n_manager/services/catalog_service.py
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from i18n_manager.catalogs.canonical import canonicalize
from i18n_manager.catalogs.key_paths import MISSING, get_value, iter_paths, set_value, split_path
from i18n_manager.catalogs.store import CatalogStore
from i18n_manager.core.config import Settings
from i18n_manager.core.errors import (
    CatalogError,
    KeyAlreadyExistsError,
    MissingTranslationError,
)
from i18n_manager.utils.json_io import dumps, render_value

log = logging.getLogger(__name__)


def _is_blank(value: Any) -> bool:
    # bool is an int, so False == 0 is covered too
    return value is MISSING or value is None or value == "" or (
        isinstance(value, (int, float)) and value == 0
    )


class SortStatus(Enum):
    SORTED = "Sorted successfully"
    ALREADY_SORTED = "Already sorted"
    SKIPPED = "File does not exist, skipping"
    FAILED = "Error"


@dataclass(frozen=True)
class SortOutcome:
    """Result of canonicalizing one language's catalog."""

    language: str
    status: SortStatus
    detail: str | None = None

    def __str__(self) -> str:
        if self.status is SortStatus.FAILED:
            return f"{self.language}.json: {self.status.value} - {self.detail}"
        return f"{self.language}.json: {self.status.value}"


@dataclass(frozen=True)
class CatalogIssue:
    """A catalog file that failed to load during validation."""

    language: str
    message: str

    def __str__(self) -> str:
        return f"{self.language}.json: {self.message}"


@dataclass(frozen=True)
class MissingKey:
    """A leaf path present in some catalogs but absent from ``languages``."""

    path: str
    languages: tuple[str, ...]

    def __str__(self) -> str:
        return f"{self.path}: missing in {', '.join(self.languages)}"


class CatalogService:
    """
    Cross-language operations over a set of catalogs.

    Each call reads the catalogs it needs from the store, works in memory
    and writes whole files back. Mutations are staged: every precondition is
    checked for every language before the first file is written. Writes then
    happen one language at a time, so an I/O failure part-way can still
    leave earlier languages updated.
    """

    def __init__(
        self,
        store: CatalogStore,
        languages: Iterable[str] = ("fr", "en"),
        *,
        required: Iterable[str] | None = None,
        reference: str = "en",
    ) -> None:
        self.store = store
        self.languages: list[str] = list(languages)
        self.required: list[str] = list(required) if required is not None else list(self.languages)
        self.reference = reference

    @classmethod
    def from_settings(cls, settings: Settings, root: Path | str | None = None) -> CatalogService:
        return cls(
            CatalogStore(settings.catalog_dir(root)),
            settings.SUPPORTED_LOCALES,
            required=settings.REQUIRED_LOCALES,
            reference=settings.DEFAULT_LOCALE,
        )

    # --- helpers ---

    def _check_required(self, values: Mapping[str, Any]) -> None:
        for lang in self.required:
            if not values.get(lang):
                raise MissingTranslationError(lang)

    def _load_all(self) -> dict[str, Any]:
        return {lang: self.store.load(lang) for lang in self.languages}

    def _write(self, path: str, values: Mapping[str, Any], trees: dict[str, Any]) -> None:
        for lang in self.languages:
            # An empty value counts as not supplied, as in _check_required
            if not values.get(lang):
                continue
            trees[lang] = set_value(trees[lang], path, values[lang])
            self.store.save(lang, trees[lang])

    # --- single-key operations ---

    def exists(self, path: str) -> bool:
        for lang in self.languages:
            if get_value(self.store.load(lang), path) is not MISSING:
                return True
        return False

    def get(self, path: str) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for lang in self.languages:
            value = get_value(self.store.load(lang), path)
            if value is not MISSING:
                result[lang] = value
        return result

    def add(self, path: str, values: Mapping[str, Any]) -> None:
        """
        Add a new key to every catalog.

        Raises:
            InvalidKeyPathError: ``path`` has an empty segment.
            MissingTranslationError: a required language has no value.
            KeyAlreadyExistsError: some catalog already has a value at ``path``.
        """
        split_path(path)
        self._check_required(values)
        trees = self._load_all()
        for lang in self.languages:
            if get_value(trees[lang], path) is not MISSING:
                raise KeyAlreadyExistsError(lang, path)
        self._write(path, values, trees)
        log.info("Added %s (%s)", path, ", ".join(lang for lang in self.languages if values.get(lang)))

    def update(self, path: str, values: Mapping[str, Any]) -> None:
        """Set ``path`` in every catalog a value is given for, overwriting."""
        split_path(path)
        self._check_required(values)
        trees = self._load_all()
        self._write(path, values, trees)
        log.info("Updated %s", path)

    # --- whole-catalog operations ---

    def list_all(self) -> list[str]:
        """
        One line per leaf path of the reference catalog, e.g.
        ``home.title: fr="Bienvenue" en="Welcome"``, sorted by the line text.
        Languages whose value is absent, null, false, zero or an empty string
        are left out.
        """
        trees = self._load_all()
        reference = trees[self.reference] if self.reference in trees else self.store.load(self.reference)
        lines: list[str] = []
        for path in iter_paths(reference):
            line = f"{path}:"
            for lang in self.languages:
                value = get_value(trees[lang], path)
                if _is_blank(value):
                    continue
                line += f' {lang}="{render_value(value)}"'
            lines.append(line)
        return sorted(lines)

    def validate_all(self) -> list[CatalogIssue]:
        issues: list[CatalogIssue] = []
        for lang in self.languages:
            if not self.store.exists(lang):
                continue
            try:
                self.store.load(lang)
            except CatalogError as e:
                log.warning("%s.json is invalid: %s", lang, e)
                issues.append(CatalogIssue(lang, str(e)))
        return issues

    def sort_all(self) -> list[SortOutcome]:
        outcomes: list[SortOutcome] = []
        for lang in self.languages:
            if not self.store.exists(lang):
                outcomes.append(SortOutcome(lang, SortStatus.SKIPPED))
                continue
            try:
                tree = self.store.load(lang)
                sorted_tree = canonicalize(tree)
                if dumps(tree) != dumps(sorted_tree):
                    self.store.save(lang, sorted_tree)
                    outcomes.append(SortOutcome(lang, SortStatus.SORTED))
                else:
                    outcomes.append(SortOutcome(lang, SortStatus.ALREADY_SORTED))
            except CatalogError as e:
                log.warning("Could not sort %s.json: %s", lang, e)
                outcomes.append(SortOutcome(lang, SortStatus.FAILED, str(e)))
        return outcomes

    def find_missing(self) -> list[MissingKey]:
        """Leaf paths that some catalogs define and others lack, sorted by path."""
        trees = self._load_all()
        all_paths: set[str] = set()
        for tree in trees.values():
            all_paths.update(iter_paths(tree))

        missing: list[MissingKey] = []
        for path in sorted(all_paths):
            absent = tuple(lang for lang in self.languages if get_value(trees[lang], path) is MISSING)
            if absent:
                missing.append(MissingKey(path, absent))
        return missing
