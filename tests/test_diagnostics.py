import pytest

from ra_mcp.diagnostics import diagnostic_summary


def diag(severity=None):
    result = {"message": "msg", "range": {}}
    if severity is not None:
        result["severity"] = severity
    return result


def test_empty_summary():
    assert diagnostic_summary([]) == {
        "total": 0,
        "errors": 0,
        "warnings": 0,
        "information": 0,
        "hints": 0,
    }


@pytest.mark.parametrize(
    "severity, key",
    [(1, "errors"), (2, "warnings"), (3, "information"), (4, "hints")],
)
def test_each_severity_lands_in_its_bucket(severity, key):
    diagnostics = [diag(severity), diag(severity)]
    summary = diagnostic_summary(diagnostics)
    assert summary[key] == len(diagnostics)
    assert summary["total"] == len(diagnostics)


def test_missing_severity_counts_as_information():
    diagnostics = [diag(), diag(None)]
    summary = diagnostic_summary(diagnostics)
    assert summary["information"] == len(diagnostics)
    assert summary["errors"] == summary["warnings"] == summary["hints"] == 0


def test_buckets_sum_to_total():
    diagnostics = [diag(1), diag(2), diag(2), diag(3), diag(4), diag()]
    summary = diagnostic_summary(diagnostics)
    buckets = summary["errors"] + summary["warnings"] + summary["information"] + summary["hints"]
    assert buckets == summary["total"] == len(diagnostics)