import string
import sys

import pytest

from ocmtools.cmdutil import dry_run_message, get_example_header, rand_string_az09


@pytest.mark.parametrize(
    "arg0, want",
    [("oc", "oc cm"), ("kubectl", "kubectl cm"), ("cm", "cm")],
    ids=["oc", "kubectl", "not-defined"],
)
def test_get_example_header(arg0, want):
    assert get_example_header(arg0) == want


def test_get_example_header_uses_argv(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["kubectl"])
    assert get_example_header() == "kubectl cm"


def test_dry_run_message(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["oc"])
    dry_run_message(True)
    assert capsys.readouterr().out == "oc cm is running in dry-run mode\n"
    dry_run_message(False)
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize("n", [0, 1, 6, 50])
def test_rand_string_az09(n):
    value = rand_string_az09(n)
    assert len(value) == n
    assert set(value) <= set(string.ascii_lowercase + string.digits)