# ruff: noqa: E402
import json
import logging
import sys
from pathlib import Path

# Ensure project root on sys.path
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest

from i18n_manager.catalogs.store import CatalogStore
from i18n_manager.core.config import get_settings
from i18n_manager.services.catalog_service import CatalogService

_SETTINGS_ENV = (
    "APP_NAME",
    "LOG_LEVEL",
    "I18N_ROOT",
    "I18N_DIR",
    "SUPPORTED_LOCALES",
    "REQUIRED_LOCALES",
    "DEFAULT_LOCALE",
)


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    # Run each test from an empty directory so no stray .env is picked up
    monkeypatch.chdir(tmp_path)
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    # cli.main() reconfigures the root logger; put it back afterwards
    root_logger = logging.getLogger()
    handlers, level = list(root_logger.handlers), root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
    get_settings.cache_clear()


@pytest.fixture
def catalog_dir(tmp_path: Path) -> Path:
    d = tmp_path / "i18n" / "lang"
    d.mkdir(parents=True)
    return d


@pytest.fixture
def store(catalog_dir: Path) -> CatalogStore:
    return CatalogStore(catalog_dir)


@pytest.fixture
def service(store: CatalogStore) -> CatalogService:
    return CatalogService(store, ["fr", "en"])


@pytest.fixture
def write_catalog(catalog_dir: Path):
    """Write raw text (str) or a JSON-serializable tree to <lang>.json."""

    def _write(lang: str, content) -> Path:
        path = catalog_dir / f"{lang}.json"
        text = content if isinstance(content, str) else json.dumps(content, indent=2) + "\n"
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def read_catalog(catalog_dir: Path):
    def _read(lang: str):
        return json.loads((catalog_dir / f"{lang}.json").read_text(encoding="utf-8"))

    return _read
