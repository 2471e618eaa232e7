"""Tests for assay.cli.output - summary table and JSON."""

from __future__ import annotations

import io
import json

from rich.console import Console

from assay.cli.output import output_json, render_summary_table
from assay.models.result import EqualityFailure, Success
from assay.models.summary import RunSummary
from assay.suite import Results


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_results(detail: str) -> Results:
    return Results([Success() if c == "+" else EqualityFailure(1, 2, repr) for c in detail])


def _make_summary() -> RunSummary:
    return RunSummary.from_suites([_make_results("++-").summary("A"), _make_results("+").summary("B")])


def _render(summary: RunSummary) -> str:
    buffer = io.StringIO()
    render_summary_table(summary, Console(file=buffer, width=120, color_system=None))
    return buffer.getvalue()


class TestSummaryTable:
    """Test render_summary_table."""

    def test_table_lists_suites_and_verdict(self):
        """Each suite gets a row and the verdict line follows."""
        out = _render(_make_summary())
        assert "A" in out
        assert "++-" in out
        assert "FAIL" in out
        assert "3/4 passed" in out

    def test_suite_name_with_markup_is_literal(self):
        """Bracketed suite names are printed as text, not parsed as markup."""
        summary = RunSummary.from_suites([_make_results("+").summary("Edge [/] [bold]cases")])
        out = _render(summary)
        assert "Edge [/] [bold]cases" in out
        assert "PASS" in out

    def test_empty_suite_detail_is_blank(self):
        """An empty suite shows no detail marker, unlike a single failure."""
        summary = RunSummary.from_suites(
            [_make_results("").summary("Empty"), _make_results("-").summary("Broken")]
        )
        rows = {line.split()[0]: line.split() for line in _render(summary).splitlines() if line.split()}
        assert rows["Empty"] == ["Empty", "0", "0", "0"]
        assert rows["Broken"] == ["Broken", "0", "1", "1", "-"]


class TestOutputJson:
    """Test output_json."""

    def test_writes_summary_json(self, capsys):
        """The run summary is written to stdout as JSON."""
        output_json(_make_summary())
        data = json.loads(capsys.readouterr().out)
        assert data["total_suites"] == 2
        assert data["total_passed"] == 3
        assert data["suites"][0]["detail"] == "++-"
