"""Tests for assay.report - suite header, results line, summary block, CSV."""

from __future__ import annotations

import subprocess
import sys

from assay.i18n.catalog import Renderer
from assay.models.result import EqualityFailure, Success
from assay.models.summary import RunSummary
from assay.report import capitalize, csv_lines, results_line, suite_header, summary_block
from assay.style import MarkupStyle, PlainStyle
from assay.suite import Results


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_results(detail: str) -> Results:
    return Results([Success() if c == "+" else EqualityFailure(1, 2, repr) for c in detail])


def _make_summary() -> RunSummary:
    return RunSummary.from_suites([_make_results("++-").summary("A"), _make_results("+").summary("B")])


class TestCapitalize:
    """Test capitalize helper."""

    def test_capitalizes_first_letter(self):
        assert capitalize("passed") == "Passed"

    def test_leaves_rest_alone(self):
        assert capitalize("éxitos TOTALES") == "Éxitos TOTALES"

    def test_empty(self):
        assert capitalize("") == ""


class TestLines:
    """Test header, results line, and summary block."""

    def test_plain_header_has_rule(self):
        """Plain headers are followed by a rule of the same length."""
        assert suite_header("Math", Renderer(), PlainStyle()) == ["Tests for Math", "=" * 14]

    def test_colored_header_is_single_line(self):
        """Colored headers are underlined instead of ruled."""
        lines = suite_header("Math", Renderer(), MarkupStyle())
        assert len(lines) == 1
        assert "[underline]" in lines[0]

    def test_results_line(self):
        """The suite line lists counts and the detail string."""
        text = results_line(_make_results("+-+"), Renderer(), PlainStyle())
        assert text == "Passed: 2, Failed: 1, Total: 3, Detail: +-+"

    def test_summary_block(self):
        """The summary block is framed by 40-character rules."""
        lines = summary_block(_make_summary(), Renderer(), PlainStyle())
        assert lines[0] == "=" * 40
        assert lines[-1] == "=" * 40
        assert lines[1] == "Overall Summary"
        assert "Suites run: 2" in lines
        assert "Total tests: 4" in lines
        assert "Passed: 3" in lines
        assert "Failed: 1" in lines
        assert "Success rate: 75.00%" in lines

    def test_csv_lines_for_empty_suite(self):
        """An empty suite contributes 0/0 and a 1.000 rate."""
        assert csv_lines([Results([])]) == ["0/0", "", "0", "1.000"]


class TestLayering:
    """Test that the runner does not depend on the CLI package."""

    def test_suite_import_leaves_cli_unloaded(self):
        """Importing assay.suite loads assay.report but never assay.cli."""
        code = (
            "import sys, assay.suite; "
            "print('assay.report' in sys.modules, "
            "any(m == 'assay.cli' or m.startswith('assay.cli.') for m in sys.modules))"
        )
        result = subprocess.run(
            [sys.executable, "-c", code], capture_output=True, text=True, check=True
        )
        assert result.stdout.split() == ["True", "False"]
