import io

import pytest

from ocmtools.preflight import Checker, PreflightError, run_checks


class FakeChecker(Checker):
    def __init__(self, label, warnings=(), errors=()):
        self._label = label
        self._warnings = list(warnings)
        self._errors = list(errors)

    def check(self):
        return self._warnings, self._errors

    def name(self):
        return self._label


def test_passing_check_report():
    out = io.StringIO()
    run_checks([FakeChecker("Alpha")], out)
    assert out.getvalue() == "Preflight check: Alpha Passed with 0 warnings and 0 errors\n"


def test_warnings_are_written_before_summary():
    out = io.StringIO()
    run_checks([FakeChecker("Alpha", warnings=["careful"])], out)
    lines = out.getvalue().splitlines()
    assert lines[0] == "\t[WARNING Alpha]: careful"
    assert lines[1].startswith("Preflight check: Alpha Passed")


def test_errors_raise_after_all_checks():
    out = io.StringIO()
    checks = [FakeChecker("Bad", errors=[ValueError("boom")]), FakeChecker("Good")]
    with pytest.raises(PreflightError) as info:
        run_checks(checks, out)
    assert info.value.msg == "\t[ERROR Bad]: boom\n"
    assert str(info.value).startswith("[preflight] Some fatal errors occurred:\n")
    assert info.value.preflight is True
    assert "Preflight check: Good Passed" in out.getvalue()
    assert "Preflight check: Bad Failed with 0 warnings and 1 errors" in out.getvalue()


def test_checker_is_abstract():
    with pytest.raises(TypeError):
        Checker()