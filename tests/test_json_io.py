from __future__ import annotations

import pytest

from i18n_manager.utils.json_io import dumps, render_value


def test_dumps_basic():
    s = dumps({"a": 1, "b": True, "nested": {"x": "ü"}})
    assert s.endswith("}\n")
    assert not s.endswith("\n\n")
    assert '  "a": 1,' in s
    assert '    "x": "ü"' in s


def test_dumps_keeps_key_order():
    assert dumps({"b": 1, "a": 2}) == '{\n  "b": 1,\n  "a": 2\n}\n'


def test_render_value():
    assert render_value("plain: text") == "plain: text"
    assert render_value({"b": [1, "é"]}) == '{"b":[1,"é"]}'
    assert render_value(None) == "null"
    assert render_value(False) == "false"


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_dumps_refuses_non_json_numbers(value):
    with pytest.raises(ValueError):
        dumps({"a": value})
