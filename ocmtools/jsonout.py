"""Indented JSON output."""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass
from typing import Any, TextIO

_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


@dataclass
class HubInfo:
    hub_token: str = ""
    hub_apiserver: str = ""

    def to_json(self) -> dict[str, str]:
        return {"hub-token": self.hub_token, "hub-apiserver": self.hub_apiserver}


def _default(obj: Any) -> Any:
    to_json = getattr(obj, "to_json", None)
    if callable(to_json):
        return to_json()
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"object of type {type(obj).__name__} is not JSON serializable")


def write_json_output(stream: TextIO, value: Any) -> None:
    """Write value as two-space indented JSON followed by a newline."""
    text = json.dumps(value, indent=2, ensure_ascii=False, default=_default)
    for char, escaped in _ESCAPES.items():
        text = text.replace(char, escaped)
    stream.write(text)
    stream.write("\n")