"""Preflight checks run before changing a cluster."""

from __future__ import annotations

import abc
from typing import Iterable, TextIO


class Checker(abc.ABC):
    """Validates cluster state so later steps are likely to succeed."""

    @abc.abstractmethod
    def check(self) -> tuple[list[str], list[Exception]]:
        """Return warnings and errors found."""

    @abc.abstractmethod
    def name(self) -> str:
        """Name shown in the report."""


class PreflightError(Exception):
    """One or more preflight checks reported errors."""

    preflight = True

    def __init__(self, msg: str) -> None:
        super().__init__(msg)
        self.msg = msg

    def __str__(self) -> str:
        return f"[preflight] Some fatal errors occurred:\n{self.msg}"


def _check_result(name: str, warnings: list, errors: list) -> str:
    flag = "Failed" if errors else "Passed"
    return (
        f"Preflight check: {name} {flag} with {len(warnings)} warnings "
        f"and {len(errors)} errors\n"
    )


def run_checks(checks: Iterable[Checker], stream: TextIO) -> None:
    """Run every check, report to stream, then raise if any failed."""
    error_lines: list[str] = []
    for checker in checks:
        name = checker.name()
        warnings, errors = checker.check()
        for warning in warnings:
            stream.write(f"\t[WARNING {name}]: {warning}\n")
        for error in errors:
            error_lines.append(f"\t[ERROR {name}]: {error}\n")
        stream.write(_check_result(name, warnings, errors))
    if error_lines:
        raise PreflightError("".join(error_lines))