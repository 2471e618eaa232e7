"""Observers notified while tests run.

An observer receives the start and end of every test and the plain
lines emitted by suites (headers, info messages, summaries). The
console observer prints through a Rich Console; the silent observer
discards everything.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from rich.console import Console

from assay.style import MarkupStyle, PlainStyle, Style

if TYPE_CHECKING:
    from assay.i18n.catalog import Renderer
    from assay.models.result import TestResult


class Observer(Protocol):
    """Receives test lifecycle events and output lines."""

    def on_start(self, name: str) -> None: ...

    def on_result(self, result: TestResult) -> None: ...

    def write_line(self, text: str = "") -> None: ...

    def flush(self) -> None: ...


class ConsoleObserver:
    """Prints progress and results to a Rich console.

    Args:
        renderer: Renderer used to produce result messages.
        style: Style applied to message fragments. Markup is only
            interpreted by the console when the style is colored.
        console: Console to print to. Defaults to stdout.
    """

    def __init__(
        self,
        renderer: Renderer,
        style: Style | None = None,
        console: Console | None = None,
    ) -> None:
        self.renderer = renderer
        self.style = style or MarkupStyle()
        self.console = console or Console(highlight=False)

    def _print(self, text: str, end: str = "\n") -> None:
        self.console.print(
            text,
            end=end,
            markup=self.style.colored,
            highlight=False,
            soft_wrap=True,
        )

    def on_start(self, name: str) -> None:
        self._print(self.style.bold(" " + name) + ": ", end="")

    def on_result(self, result: TestResult) -> None:
        self._print(result.message(self.renderer, self.style))
        self._print("")

    def write_line(self, text: str = "") -> None:
        self._print(text)

    def flush(self) -> None:
        self.console.file.flush()


class SilentObserver:
    """Observer that ignores every event."""

    style: Style = PlainStyle()

    def on_start(self, name: str) -> None:
        pass

    def on_result(self, result: TestResult) -> None:
        pass

    def write_line(self, text: str = "") -> None:
        pass

    def flush(self) -> None:
        pass
