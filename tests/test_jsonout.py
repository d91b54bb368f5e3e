import io
import json

import pytest

from ocmtools.jsonout import HubInfo, write_json_output


def _render(value):
    buffer = io.StringIO()
    write_json_output(buffer, value)
    return buffer.getvalue()


def test_hub_info_format():
    info = HubInfo(hub_token="token", hub_apiserver="https://example.com:6443")
    assert _render(info) == (
        '{\n  "hub-token": "token",\n  "hub-apiserver": "https://example.com:6443"\n}\n'
    )


def test_round_trip():
    value = {"a": [1, 2], "b": {"c": "d"}}
    out = _render(value)
    assert out.endswith("\n")
    assert json.loads(out) == value


def test_html_characters_escaped():
    out = _render({"k": "<a&b>"})
    assert "<" not in out and ">" not in out and "&" not in out
    assert json.loads(out) == {"k": "<a&b>"}


def test_unserializable_value():
    with pytest.raises(TypeError):
        _render(object())