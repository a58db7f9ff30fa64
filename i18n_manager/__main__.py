"""Module entrypoint so the CLI runs via ``python -m i18n_manager``."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover - thin wrapper
    raise SystemExit(main())
