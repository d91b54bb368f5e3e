"""Parsing of key=value command-line arguments."""

from __future__ import annotations

from typing import Iterable


def parse_labels(labels: Iterable[str]) -> dict[str, str]:
    """Turn "key=value" strings into a dict."""
    result: dict[str, str] = {}
    for label in labels:
        parts = label.split("=")
        if len(parts) != 2:
            raise ValueError(
                f"error parsing label '{label}'. Expected to be of the form: key=value"
            )
        key, value = parts
        result[key] = value
    return result