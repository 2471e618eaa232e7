"""Suites, result aggregation, and the sequential suite runner.

A TestSuite is an ordered list of tests with optional Info lines in
between. SuiteRunner runs suites one test at a time, wraps each
suite's outcomes in a Results, and rolls every suite up into a
RunSummary once all suites have finished.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Union

from assay.checks.base import Test, check_name
from assay.execution.context import ExecutionContext
from assay.models.result import TestResult
from assay.models.summary import RunSummary, SuiteSummary
from assay.report import csv_lines, results_line, suite_header, summary_block

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Info:
    """A line of text printed between the tests of a suite."""

    message: str

    def __post_init__(self) -> None:
        if not isinstance(self.message, str):
            raise TypeError("info message must be a string")

    def show(self, context: ExecutionContext) -> None:
        context.observer.write_line(" " + context.style.blue(self.message))
        context.observer.flush()


SuiteItem = Union[Test, Info]


class TestSuite:
    """A named, ordered, immutable collection of tests and info lines."""

    __test__ = False  # Prevent pytest from collecting this as a test class

    def __init__(self, name: str, items: Iterable[SuiteItem] = ()) -> None:
        self.name = check_name(name)
        if items is None:
            raise TypeError("suite items cannot be None")
        checked = tuple(items)
        for item in checked:
            if not isinstance(item, (Test, Info)):
                raise TypeError(f"suite items must be tests or Info, got {type(item).__name__}")
        self.items: tuple[SuiteItem, ...] = checked

    @property
    def tests(self) -> tuple[Test, ...]:
        return tuple(item for item in self.items if not isinstance(item, Info))

    def __len__(self) -> int:
        return len(self.tests)

    def __repr__(self) -> str:
        return f"TestSuite(name={self.name!r}, tests={len(self)})"


class Results:
    """Aggregate of the results of one suite run.

    Counts and the +/- detail string are computed once at construction.
    """

    __slots__ = ("_results", "passed", "failed", "total", "success_rate", "detail")

    def __init__(self, results: Iterable[TestResult] = ()) -> None:
        if results is None:
            raise TypeError("results cannot be None")
        self._results: tuple[TestResult, ...] = tuple(results)
        self.total = len(self._results)
        self.passed = sum(1 for r in self._results if r.is_success)
        self.failed = self.total - self.passed
        self.success_rate = 1.0 if self.total == 0 else self.passed / self.total
        self.detail = "".join("+" if r.is_success else "-" for r in self._results)

    @property
    def results(self) -> tuple[TestResult, ...]:
        return self._results

    @property
    def successful(self) -> bool:
        return self.failed == 0

    def summary(self, name: str) -> SuiteSummary:
        """Convert to the serializable per-suite summary."""
        return SuiteSummary(
            name=name,
            passed=self.passed,
            failed=self.failed,
            total=self.total,
            success_rate=self.success_rate,
            detail=self.detail,
            outcomes=[r.kind.value for r in self._results],
        )

    def __iter__(self):
        return iter(self._results)

    def __len__(self) -> int:
        return self.total

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Results):
            return NotImplemented
        return self._results == other._results

    def __hash__(self) -> int:
        return hash(self._results)

    def __repr__(self) -> str:
        return (
            f"Results(passed={self.passed}, failed={self.failed}, "
            f"total={self.total}, detail={self.detail!r})"
        )


@dataclass(frozen=True)
class RunReport:
    """Everything a run produced: per-suite Results and the rollup."""

    names: tuple[str, ...]
    results: tuple[Results, ...]
    summary: RunSummary

    @property
    def successful(self) -> bool:
        return self.summary.successful

    def csv(self) -> list[str]:
        """The four machine-readable summary lines."""
        return csv_lines(self.results)


class SuiteRunner:
    """Runs suites sequentially and reports through the context observer.

    Args:
        context: Default context for every run. Methods accept an
            explicit context that takes precedence.
    """

    def __init__(self, context: ExecutionContext | None = None) -> None:
        self.context = context or ExecutionContext()

    async def run_suite(
        self,
        suite: TestSuite,
        context: ExecutionContext | None = None,
    ) -> Results:
        """Run every item of *suite* in order and return its Results."""
        context = context or self.context
        observer = context.observer
        for line in suite_header(suite.name, context.renderer, context.style):
            observer.write_line(line)

        logger.info("Running suite %r (%d tests)", suite.name, len(suite))
        collected: list[TestResult] = []
        for item in suite.items:
            if isinstance(item, Info):
                item.show(context)
                continue
            collected.append(await item.run(context))

        results = Results(collected)
        observer.write_line("\n" + results_line(results, context.renderer, context.style) + "\n")
        observer.flush()
        logger.info("Suite %r finished: %d/%d passed", suite.name, results.passed, results.total)
        return results

    async def run_all(
        self,
        suites: Iterable[TestSuite],
        context: ExecutionContext | None = None,
    ) -> RunReport:
        """Run *suites* in order, print the overall summary, and return the report."""
        context = context or self.context
        if suites is None:
            raise TypeError("suites cannot be None")
        suites = tuple(suites)

        all_results: list[Results] = []
        for suite in suites:
            all_results.append(await self.run_suite(suite, context))

        names = tuple(suite.name for suite in suites)
        summary = RunSummary.from_suites(
            [results.summary(name) for name, results in zip(names, all_results)]
        )
        report = RunReport(names=names, results=tuple(all_results), summary=summary)

        observer = context.observer
        for line in summary_block(summary, context.renderer, context.style):
            observer.write_line(line)
        observer.write_line()
        if context.config.csv_output:
            for line in report.csv():
                observer.write_line(line)
        observer.flush()
        return report
