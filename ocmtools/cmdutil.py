"""Small helpers for command output and random names."""

from __future__ import annotations

import random
import string
import sys

_AZ09 = string.ascii_lowercase + string.digits
_random = random.Random()


def get_example_header(argv0: str | None = None) -> str:
    """The command prefix to show in examples."""
    name = sys.argv[0] if argv0 is None else argv0
    if name == "oc":
        return "oc cm"
    if name == "kubectl":
        return "kubectl cm"
    return name


def dry_run_message(dry_run: bool) -> None:
    """Announce dry-run mode on standard output."""
    if dry_run:
        print(f"{get_example_header()} is running in dry-run mode")


def rand_string_az09(n: int) -> str:
    """A random string of n lower-case letters and digits."""
    return "".join(_random.choices(_AZ09, k=n))