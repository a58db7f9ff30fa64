"""
Exceptions raised by the catalog layer.

Every error carries a human-readable message; the CLI prints ``str(exc)``
and exits non-zero. Structured attributes (language, path) are kept for
callers and tests.
"""

from __future__ import annotations

from pathlib import Path


class CatalogError(Exception):
    """Base class for catalog operational errors."""


class MalformedCatalogError(CatalogError):
    """Raised when an existing, non-blank catalog file is not valid JSON."""

    def __init__(self, language: str, path: Path, reason: str) -> None:
        self.language = language
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read {path}: {reason}")


class CatalogIOError(CatalogError):
    """Raised when a catalog file cannot be read or written."""

    def __init__(
        self, path: Path, action: str, reason: str, language: str | None = None
    ) -> None:
        self.language = language
        self.path = path
        super().__init__(f"Failed to {action} {path}: {reason}")


class MissingTranslationError(CatalogError):
    """Raised when a required language has no (or an empty) value."""

    def __init__(self, language: str) -> None:
        self.language = language
        super().__init__(f"Translation for language '{language}' is required")


class KeyAlreadyExistsError(CatalogError):
    """Raised by ``add`` when the key is already populated in some catalog."""

    def __init__(self, language: str, key: str) -> None:
        self.language = language
        self.key = key
        super().__init__(f"Key '{key}' already exists in {language}.json")


class InvalidKeyPathError(CatalogError, ValueError):
    """Raised for dotted paths with an empty segment (``a..b``, ``.a``, ``""``)."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Invalid key path {key!r}: segments must be non-empty")
