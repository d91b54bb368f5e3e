"""Indented text output and status strings for progress displays."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, TextIO

LEVEL_0 = 0
LEVEL_1 = 1
LEVEL_2 = 2
LEVEL_3 = 3
LEVEL_4 = 4

_LEVEL_SPACE = "  "


class PrefixWriter:
    """Writes text at indentation levels of two spaces each."""

    def __init__(self, out: TextIO) -> None:
        self.out = out

    def write(self, level: int, fmt: str, *args: Any) -> None:
        """Write printf-style formatted text indented to level."""
        self.out.write((_LEVEL_SPACE * level + fmt) % args)

    def write_line(self, *args: Any) -> None:
        """Write the arguments separated by spaces, with no indentation."""
        self.out.write(" ".join(str(arg) for arg in args) + "\n")

    def flush(self) -> None:
        flush = getattr(self.out, "flush", None)
        if callable(flush):
            flush()


def _find_condition(conditions: Iterable[Mapping[str, Any]], kind: str):
    return next((c for c in conditions if c.get("type") == kind), None)


def get_spinner_pod_status(pod: Mapping[str, Any]) -> str:
    """The pod phase, or the reason the last waiting container gives."""
    status = pod.get("status") or {}
    reason = status.get("phase", "")
    for container in status.get("containerStatuses") or []:
        waiting = (container.get("state") or {}).get("waiting")
        if waiting is not None:
            reason = waiting.get("reason", "")
    return reason


def get_spinner_klusterlet_status(klusterlet: Mapping[str, Any]) -> str:
    """The reason of the most telling klusterlet condition, or ""."""
    conditions = (klusterlet.get("status") or {}).get("conditions") or []
    for kind in ("RegistrationDesiredDegraded", "WorkDesiredDegraded", "Available", "Applied"):
        condition = _find_condition(conditions, kind)
        if condition is not None:
            return condition.get("reason", "")
    return ""