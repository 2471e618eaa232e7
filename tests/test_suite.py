"""Tests for assay.suite - TestSuite, Results, SuiteRunner."""

from __future__ import annotations

import asyncio
import io

import pytest
from rich.console import Console

from assay.execution.context import ExecutionContext
from assay.factory import equal, expect_exception, info
from assay.models.config import EngineConfig
from assay.models.result import EqualityFailure, Success, TimeoutFailure, UnexpectedExceptionFailure
from assay.suite import Info, Results, SuiteRunner, TestSuite


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_suite(name: str = "Arithmetic") -> TestSuite:
    """Five tests, three passing, in the order + - + - +."""
    return TestSuite(
        name,
        [
            equal("one", lambda: 1, 1),
            equal("two", lambda: 2, 3),
            expect_exception("div", lambda: 1 / 0, ZeroDivisionError),
            expect_exception("none", lambda: 0, ValueError),
            equal("five", lambda: 5, 5),
        ],
    )


def _make_console_context(**config) -> tuple[ExecutionContext, io.StringIO]:
    buffer = io.StringIO()
    console = Console(file=buffer, width=200, color_system=None)
    context = ExecutionContext.from_config(EngineConfig(color=False, **config), console=console)
    return context, buffer


class TestResults:
    """Test Results aggregation."""

    def test_counts_and_detail(self):
        """Counts and detail follow the results in order."""
        results = Results([Success(), EqualityFailure(1, 2, repr), Success()])
        assert results.total == 3
        assert results.passed == 2
        assert results.failed == 1
        assert results.detail == "+-+"
        assert results.success_rate == pytest.approx(2 / 3)
        assert not results.successful

    def test_empty_results(self):
        """An empty Results has rate 1.0 and an empty detail."""
        results = Results([])
        assert results.total == 0
        assert results.success_rate == 1.0
        assert results.detail == ""
        assert results.successful

    def test_equality(self):
        """Results compare by their result sequences."""
        assert Results([Success()]) == Results([Success()])
        assert Results([Success()]) != Results([TimeoutFailure(1, "d")])

    def test_summary(self):
        """summary() produces the serializable per-suite model."""
        summary = Results([Success(), TimeoutFailure(1, "d")]).summary("S")
        assert summary.name == "S"
        assert summary.detail == "+-"
        assert summary.outcomes == ["success", "timeout"]
        assert summary.success_rate == 0.5

    def test_rejects_none(self):
        """None is not a result sequence."""
        with pytest.raises(TypeError):
            Results(None)  # type: ignore[arg-type]


class TestTestSuite:
    """Test suite construction."""

    def test_items_and_tests(self):
        """Info items are kept in place but are not tests."""
        suite = TestSuite("S", [equal("a", lambda: 1, 1), info("note"), equal("b", lambda: 2, 2)])
        assert len(suite.items) == 3
        assert len(suite) == 2
        assert isinstance(suite.items[1], Info)

    def test_rejects_foreign_items(self):
        """Only tests and Info lines can be suite items."""
        with pytest.raises(TypeError):
            TestSuite("S", [lambda: 1])  # type: ignore[list-item]

    def test_rejects_empty_name(self):
        """Suites need a name."""
        with pytest.raises(ValueError):
            TestSuite("", [])


class TestSuiteRunner:
    """Test SuiteRunner.run_suite and run_all."""

    @pytest.mark.asyncio
    async def test_detail_preserves_order(self):
        """A suite of five tests with three passes gives +-+-+."""
        results = await SuiteRunner().run_suite(_make_suite())
        assert results.detail == "+-+-+"
        assert results.passed == 3
        assert results.failed == 2

    @pytest.mark.asyncio
    async def test_run_all_summary(self):
        """run_all rolls every suite up in order."""
        report = await SuiteRunner().run_all([_make_suite("A"), TestSuite("Empty", [])])
        assert report.names == ("A", "Empty")
        assert report.summary.total_suites == 2
        assert report.summary.total_tests == 5
        assert report.summary.total_passed == 3
        assert report.summary.total_failed == 2
        assert report.summary.success_rate == pytest.approx(0.6)
        assert not report.successful

    @pytest.mark.asyncio
    async def test_run_all_without_tests(self):
        """A run without tests has success rate 1.0."""
        report = await SuiteRunner().run_all([])
        assert report.summary.total_tests == 0
        assert report.summary.success_rate == 1.0
        assert report.successful

    @pytest.mark.asyncio
    async def test_run_all_accepts_generator(self):
        """Suites given as a one-shot iterable still appear in the summary."""
        report = await SuiteRunner().run_all(suite for suite in [_make_suite("A")])
        assert report.names == ("A",)
        assert report.summary.total_suites == 1
        assert report.summary.total_tests == 5

    @pytest.mark.asyncio
    async def test_self_cancelling_coroutine_does_not_abort_suite(self):
        """A coroutine raising CancelledError fails its test and the suite goes on."""

        async def cancels():
            raise asyncio.CancelledError()

        suite = TestSuite("Async", [equal("cancels", cancels, 1), equal("after", lambda: 2, 2)])
        results = await SuiteRunner().run_suite(suite)
        first, second = list(results)
        assert isinstance(first, UnexpectedExceptionFailure)
        assert isinstance(first.thrown, asyncio.CancelledError)
        assert second == Success()
        assert results.detail == "-+"

    @pytest.mark.asyncio
    async def test_csv_lines(self):
        """The CSV summary has four lines in the documented format."""
        report = await SuiteRunner().run_all([_make_suite("A"), TestSuite("B", [equal("x", lambda: 1, 1)])])
        assert report.csv() == [
            "3/5 1/1",
            "+;-;+;-;+;;+",
            "3;1",
            "0.600;1.000",
        ]

    @pytest.mark.asyncio
    async def test_console_output(self):
        """Header, per-test lines, info, suite line and summary block are printed."""
        context, buffer = _make_console_context()
        suite = TestSuite("Demo", [equal("adds", lambda: 1 + 1, 2), info("halfway"), equal("bad", lambda: 1, 2)])
        await SuiteRunner(context).run_all([suite])
        out = buffer.getvalue()

        assert "Tests for Demo\n" + "=" * len("Tests for Demo") in out
        assert " adds:" in out
        assert "\n   TEST PASSED SUCCESSFULLY!" in out
        assert out.index(" adds:") < out.index("TEST PASSED SUCCESSFULLY!")
        assert " halfway" in out
        assert "Passed: 1, Failed: 1, Total: 2, Detail: +-" in out
        assert "=" * 40 in out
        assert "Overall Summary" in out
        assert "Suites run: 1" in out
        assert "Total tests: 2" in out
        assert "Success rate: 50.00%" in out

    @pytest.mark.asyncio
    async def test_csv_printed_when_enabled(self):
        """CSV lines are printed only when csv_output is set."""
        context, buffer = _make_console_context(csv_output=True)
        await SuiteRunner(context).run_all([_make_suite("A")])
        assert "+;-;+;-;+" in buffer.getvalue()

        context, buffer = _make_console_context()
        await SuiteRunner(context).run_all([_make_suite("A")])
        assert "+;-;+;-;+" not in buffer.getvalue()

    @pytest.mark.asyncio
    async def test_silent_context_prints_nothing(self):
        """With logging disabled nothing reaches the console."""
        buffer = io.StringIO()
        context = ExecutionContext.from_config(
            EngineConfig(logging=False), console=Console(file=buffer)
        )
        await SuiteRunner(context).run_all([_make_suite()])
        assert buffer.getvalue() == ""

    @pytest.mark.asyncio
    async def test_localized_summary(self):
        """Summary labels follow the configured language."""
        context, buffer = _make_console_context(language="es")
        await SuiteRunner(context).run_all([_make_suite()])
        out = buffer.getvalue()
        assert "Superadas" in out
        assert "Fallidas" in out
