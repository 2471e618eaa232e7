"""Report lines printed around test results.

Builds the suite header, the per-suite results line, the overall
summary block and the CSV summary. Lines are styled through a Style,
so the same builders serve colored and plain output.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from assay.i18n.catalog import Renderer
    from assay.models.summary import RunSummary
    from assay.style import Style
    from assay.suite import Results

# Width of the rule framing the overall summary block
SEPARATOR_WIDTH = 40


def capitalize(text: str) -> str:
    """Upper-case the first character of *text*, leaving the rest alone."""
    if not text:
        return text
    return text[0].upper() + text[1:]


def suite_header(name: str, renderer: Renderer, style: Style) -> list[str]:
    """Lines introducing a suite.

    Colored output underlines the header; plain output follows it with
    a rule of "=" as long as the header text.
    """
    header = renderer.render("suite.for", name)
    if style.colored:
        return [style.underline(style.bold(style.blue(header)))]
    return [header, "=" * len(header)]


def results_line(results: Results, renderer: Renderer, style: Style) -> str:
    """One-line suite summary: Passed: n, Failed: m, Total: t, Detail: +-."""
    passed = f"{style.green(renderer.render('results.passed'))}: {style.green(str(results.passed))}"
    failed = f"{style.red(renderer.render('results.failed'))}: {style.red(str(results.failed))}"
    detail = "".join(style.green(c) if c == "+" else style.red(c) for c in results.detail)
    return (
        f"{passed}, {failed}, {renderer.render('results.total')}: {results.total}, "
        f"{renderer.render('results.detail')}: {detail}"
    )


def summary_block(summary: RunSummary, renderer: Renderer, style: Style) -> list[str]:
    """The framed overall summary printed after every suite has run."""
    separator = style.bold(style.blue("=" * SEPARATOR_WIDTH))
    passed_label = capitalize(renderer.render("results.passed"))
    failed_label = capitalize(renderer.render("results.failed"))
    return [
        separator,
        style.bold(style.blue(renderer.render("summary.title"))),
        separator,
        renderer.render("summary.suites.run", summary.total_suites),
        renderer.render("summary.total.tests", summary.total_tests),
        f"{passed_label}: {style.green(str(summary.total_passed))}",
        f"{failed_label}: {style.red(str(summary.total_failed))}",
        renderer.render("summary.success.rate", summary.success_rate * 100.0),
        separator,
    ]


def csv_lines(all_results: Sequence[Results]) -> list[str]:
    """Compact machine-readable summary of a run.

    Four lines: passed/total per suite separated by spaces; per-test
    detail characters joined by ";" within a suite and ";;" between
    suites; passed counts joined by ";"; success rates with three
    decimals joined by ";".
    """
    return [
        " ".join(f"{r.passed}/{r.total}" for r in all_results),
        ";;".join(";".join(r.detail) for r in all_results),
        ";".join(str(r.passed) for r in all_results),
        ";".join(f"{r.success_rate:.3f}" for r in all_results),
    ]
