"""
Application configuration for i18n-manager.

Strongly-typed settings using Pydantic v2 BaseSettings. Defaults match the
conventional project layout (catalogs under ``i18n/lang`` in the current
directory, French and English); every value can be overridden via
environment variables or a .env file in the working directory.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from i18n_manager import __version__


class Settings(BaseSettings):
    """Application settings loaded from environment variables (.env supported)."""

    # Load from .env in the working directory; ignore unknown variables
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # -------------------------------------------------------------------------
    # Core application info
    # -------------------------------------------------------------------------
    APP_NAME: str = "i18n-manager"
    APP_VERSION: str = __version__
    LOG_LEVEL: str = "WARNING"

    # -------------------------------------------------------------------------
    # Catalog location
    # -------------------------------------------------------------------------
    # None means "current working directory at the time of the call"
    I18N_ROOT: Path | None = None
    I18N_DIR: str = "i18n/lang"

    # -------------------------------------------------------------------------
    # Languages
    # -------------------------------------------------------------------------
    SUPPORTED_LOCALES: list[str] = ["fr", "en"]
    # None means every supported locale is required by add/update
    REQUIRED_LOCALES: list[str] | None = None
    # Reference catalog walked by `list`
    DEFAULT_LOCALE: str = "en"

    @model_validator(mode="after")
    def _check_locales(self) -> Settings:
        if not self.SUPPORTED_LOCALES:
            raise ValueError("SUPPORTED_LOCALES must not be empty")
        if self.DEFAULT_LOCALE not in self.SUPPORTED_LOCALES:
            raise ValueError(
                f"DEFAULT_LOCALE {self.DEFAULT_LOCALE!r} is not one of "
                f"SUPPORTED_LOCALES {self.SUPPORTED_LOCALES}"
            )
        unknown = [c for c in self.REQUIRED_LOCALES or [] if c not in self.SUPPORTED_LOCALES]
        if unknown:
            raise ValueError(f"REQUIRED_LOCALES not in SUPPORTED_LOCALES: {unknown}")
        return self

    def catalog_dir(self, root: Path | str | None = None) -> Path:
        """Directory holding ``<lang>.json`` files; ``root`` overrides I18N_ROOT."""
        base = Path(root) if root is not None else (self.I18N_ROOT or Path.cwd())
        return base / self.I18N_DIR


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance (singleton-like)."""
    return Settings()
