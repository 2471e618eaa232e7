"""Tests for the assay CLI: run, demo, and --version."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from assay import __version__
from assay.cli.main import app

runner = CliRunner()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

PASSING_SUITE = '''
from assay import TestSuite, equal, expect_exception

MATH = TestSuite(
    "Math",
    [
        equal("adds", lambda: 2 + 2, 4),
        expect_exception("divides", lambda: 1 / 0, ZeroDivisionError),
    ],
)
'''

FAILING_SUITE = '''
from assay import TestSuite, equal

FIRST = TestSuite("First", [equal("good", lambda: 1, 1)])
SECOND = TestSuite("Second", [equal("bad", lambda: 4, 5)])
'''


def _write(tmp_path: Path, source: str, name: str = "suite_file.py") -> Path:
    path = tmp_path / name
    path.write_text(source)
    return path


@pytest.fixture(autouse=True)
def _isolate(tmp_path: Path, monkeypatch):
    """Run every CLI test from an empty directory with no language override."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ASSAY_LANG", raising=False)


class TestVersion:
    """Test --version."""

    def test_prints_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"assay {__version__}" in result.output


class TestRunCommand:
    """Test assay run."""

    def test_passing_suite_exits_zero(self, tmp_path: Path):
        """All tests passing exits with code 0."""
        path = _write(tmp_path, PASSING_SUITE)
        result = runner.invoke(app, ["run", str(path), "--no-color"])
        assert result.exit_code == 0, result.output
        assert "Tests for Math" in result.output
        assert "TEST PASSED SUCCESSFULLY!" in result.output
        assert "Passed: 2, Failed: 0, Total: 2, Detail: ++" in result.output

    def test_failing_suite_exits_one(self, tmp_path: Path):
        """Any failing test exits with code 1."""
        path = _write(tmp_path, FAILING_SUITE)
        result = runner.invoke(app, ["run", str(path), "--no-color"])
        assert result.exit_code == 1
        assert "Expected result was: 5" in result.output
        assert result.output.index("Tests for First") < result.output.index("Tests for Second")

    def test_suites_list_controls_order(self, tmp_path: Path):
        """A SUITES list selects and orders the suites."""
        path = _write(tmp_path, FAILING_SUITE + "\nSUITES = [SECOND, FIRST]\n")
        result = runner.invoke(app, ["run", str(path), "--no-color"])
        assert result.output.index("Tests for Second") < result.output.index("Tests for First")

    def test_missing_file_exits_two(self, tmp_path: Path):
        """A missing suite file is a load error."""
        result = runner.invoke(app, ["run", str(tmp_path / "nope.py")])
        assert result.exit_code == 2
        assert "file not found" in result.output

    def test_file_without_suites_exits_two(self, tmp_path: Path):
        """A file defining no suites is a load error."""
        path = _write(tmp_path, "X = 1\n")
        result = runner.invoke(app, ["run", str(path)])
        assert result.exit_code == 2
        assert "no TestSuite objects found" in result.output

    def test_bad_suites_attribute_exits_two(self, tmp_path: Path):
        """SUITES must only contain TestSuite objects."""
        path = _write(tmp_path, "SUITES = [1, 2]\n")
        result = runner.invoke(app, ["run", str(path)])
        assert result.exit_code == 2

    def test_import_error_exits_two(self, tmp_path: Path):
        """A suite file that fails to import is a load error."""
        path = _write(tmp_path, "raise RuntimeError('broken file')\n")
        result = runner.invoke(app, ["run", str(path)])
        assert result.exit_code == 2
        assert "broken file" in result.output

    def test_json_output(self, tmp_path: Path):
        """--json --quiet writes only the JSON summary to stdout."""
        path = _write(tmp_path, FAILING_SUITE)
        result = runner.invoke(app, ["run", str(path), "--json", "--quiet"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["total_suites"] == 2
        assert data["total_tests"] == 2
        assert data["total_failed"] == 1
        assert [s["name"] for s in data["suites"]] == ["First", "Second"]

    def test_csv_output(self, tmp_path: Path):
        """--csv prints the machine-readable lines."""
        path = _write(tmp_path, FAILING_SUITE)
        result = runner.invoke(app, ["run", str(path), "--csv", "--no-color"])
        assert "1/1 0/1" in result.output
        assert "+;;-" in result.output
        assert "1.000;0.000" in result.output

    def test_quiet_prints_table_only(self, tmp_path: Path):
        """--quiet hides per-test output but still reports totals."""
        path = _write(tmp_path, PASSING_SUITE)
        result = runner.invoke(app, ["run", str(path), "--quiet"])
        assert result.exit_code == 0
        assert "TEST PASSED" not in result.output
        assert "Math" in result.output
        assert "2/2 passed" in result.output

    def test_language_option(self, tmp_path: Path):
        """--lang switches the message catalog."""
        path = _write(tmp_path, PASSING_SUITE)
        result = runner.invoke(app, ["run", str(path), "--lang", "es", "--no-color"])
        assert "Superadas" in result.output

    def test_timeout_option(self, tmp_path: Path):
        """--timeout sets the default timeout for every test."""
        source = "import time\nfrom assay import TestSuite, equal\nS = TestSuite('Slow', [equal('sleepy', lambda: time.sleep(2), None)])\n"
        path = _write(tmp_path, source)
        result = runner.invoke(app, ["run", str(path), "--timeout", "1", "--no-color"])
        assert result.exit_code == 1
        assert "took more than 1 seconds" in result.output

    def test_config_file_is_used(self, tmp_path: Path):
        """Settings in assay.yaml apply to the run."""
        (tmp_path / "assay.yaml").write_text("language: fr\ncolor: false\n")
        path = _write(tmp_path, PASSING_SUITE)
        result = runner.invoke(app, ["run", str(path)])
        assert "Réussis" in result.output

    def test_invalid_config_exits_two(self, tmp_path: Path):
        """Unknown config keys are reported with a suggestion."""
        config = tmp_path / "custom.yaml"
        config.write_text("timout: 4\n")
        path = _write(tmp_path, PASSING_SUITE)
        result = runner.invoke(app, ["run", str(path), "--config", str(config)])
        assert result.exit_code == 2
        assert "timout" in result.output
        assert "Did you mean 'timeout'?" in result.output

    def test_non_mapping_config_exits_two(self, tmp_path: Path):
        """A config file holding a YAML list is a config error, not a crash."""
        (tmp_path / "assay.yaml").write_text("- timeout\n- 4\n")
        path = _write(tmp_path, PASSING_SUITE)
        result = runner.invoke(app, ["run", str(path)])
        assert result.exit_code == 2
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "<root>" in result.output

    def test_missing_config_exits_two(self, tmp_path: Path):
        """An explicit config path must exist."""
        path = _write(tmp_path, PASSING_SUITE)
        result = runner.invoke(app, ["run", str(path), "--config", str(tmp_path / "none.yaml")])
        assert result.exit_code == 2


class TestDemoCommand:
    """Test assay demo."""

    def test_demo_reports_both_suites(self):
        """The bundled examples run and include deliberate failures."""
        result = runner.invoke(app, ["demo", "--quiet", "--json"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        names = [s["name"] for s in data["suites"]]
        assert names == ["Core Testing Library Features", "Exception Test Error Reporting"]
        library, reporting = data["suites"]
        assert library["failed"] == 0
        assert reporting["passed"] == 0
        assert "timeout" in reporting["outcomes"]
        assert "wrong_exception_and_message" not in reporting["outcomes"]
