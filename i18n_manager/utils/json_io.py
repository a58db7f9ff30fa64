# i18n_manager/utils/json_io.py
# JSON serialization helpers for catalog files.

from __future__ import annotations

import json
from typing import Any


def dumps(data: Any) -> str:
    """
    Serialize a catalog tree to the on-disk text format.

    - 2-space indentation.
    - Non-ASCII characters written as-is (files are UTF-8).
    - Key order preserved; sorting is the canonicalizer's job.
    - Exactly one trailing newline.
    """
    return json.dumps(data, ensure_ascii=False, indent=2, allow_nan=False) + "\n"


def render_value(value: Any) -> str:
    """Render a catalog value for a single line of CLI output."""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
