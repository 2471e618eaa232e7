"""Test result variants.

The closed set of outcomes a single test run can produce. Every
variant is an immutable dataclass carrying exactly the payload its
message needs, including the expectation description that was
rendered before evaluation started.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from assay.i18n.catalog import Renderer
    from assay.style import Style

Formatter = Callable[[Any], str]

# Rendered message of an exception raised without a message
NULL_MESSAGE = "null"

INDENT = "\n   "


def exception_message(exc: BaseException) -> str:
    """Return the raw message of *exc*, or "null" when it has none."""
    if not exc.args or (len(exc.args) == 1 and exc.args[0] is None):
        return NULL_MESSAGE
    return str(exc)


def exception_type_name(exc: BaseException) -> str:
    """Return the simple class name of *exc*."""
    return type(exc).__name__


class ResultKind(str, Enum):
    """Discriminator for result variants."""

    success = "success"
    property_failure = "property_failure"
    equality_failure = "equality_failure"
    no_exception = "no_exception"
    wrong_exception_type = "wrong_exception_type"
    wrong_exception_message = "wrong_exception_message"
    wrong_exception_and_message = "wrong_exception_and_message"
    timeout = "timeout"
    unexpected_exception = "unexpected_exception"


class TestResult(ABC):
    """Outcome of executing one test."""

    __test__ = False  # Prevent pytest from collecting this as a test class

    kind: ClassVar[ResultKind]

    @property
    @abstractmethod
    def is_success(self) -> bool:
        """Whether this result represents a passing test."""

    @abstractmethod
    def message(self, renderer: Renderer, style: Style) -> str:
        """Render a localized, styled description of this outcome."""


@dataclass(frozen=True)
class Success(TestResult):
    """The expectation was met."""

    kind: ClassVar[ResultKind] = ResultKind.success

    @property
    def is_success(self) -> bool:
        return True

    def message(self, renderer: Renderer, style: Style) -> str:
        return INDENT + style.bold(style.green(renderer.render("passed")))


class Failure(TestResult):
    """Base for every failing outcome."""

    @property
    def is_success(self) -> bool:
        return False

    def failed_marker(self, renderer: Renderer, style: Style) -> str:
        return style.bold(style.red(renderer.render("failed")))

    def _lines(self, renderer: Renderer, style: Style, *lines: str) -> str:
        return INDENT + INDENT.join((self.failed_marker(renderer, style), *lines))


@dataclass(frozen=True)
class PropertyFailure(Failure):
    """The property predicate did not hold for the obtained value."""

    kind: ClassVar[ResultKind] = ResultKind.property_failure

    actual: Any
    formatter: Formatter
    description: str

    def message(self, renderer: Renderer, style: Style) -> str:
        obtained = renderer.render("obtained.result", style.red(self.formatter(self.actual)))
        return self._lines(renderer, style, self.description, obtained)


@dataclass(frozen=True)
class EqualityFailure(Failure):
    """The obtained value was not equal to the expected one."""

    kind: ClassVar[ResultKind] = ResultKind.equality_failure

    expected: Any
    actual: Any
    formatter: Formatter

    def message(self, renderer: Renderer, style: Style) -> str:
        expected = renderer.render("expected.result", style.green(self.formatter(self.expected)))
        obtained = renderer.render("obtained.result", style.red(self.formatter(self.actual)))
        return self._lines(renderer, style, expected, obtained)


@dataclass(frozen=True)
class NoExceptionFailure(Failure):
    """An exception was expected but the computation returned normally."""

    kind: ClassVar[ResultKind] = ResultKind.no_exception

    result: Any
    formatter: Formatter
    description: str

    def message(self, renderer: Renderer, style: Style) -> str:
        basic = renderer.render("no.exception.basic", self.description)
        obtained = renderer.render("obtained.result", style.red(self.formatter(self.result)))
        return self._lines(renderer, style, basic, obtained)


@dataclass(frozen=True)
class WrongExceptionTypeFailure(Failure):
    """An exception of an unacceptable type was raised."""

    kind: ClassVar[ResultKind] = ResultKind.wrong_exception_type

    thrown: BaseException
    description: str

    def message(self, renderer: Renderer, style: Style) -> str:
        thrown_name = style.red(exception_type_name(self.thrown))
        return self._lines(
            renderer,
            style,
            renderer.render("wrong.exception.type.basic", thrown_name),
            renderer.render("but.expected", self.description),
        )


@dataclass(frozen=True)
class WrongExceptionMessageFailure(Failure):
    """The exception type was acceptable but its message was not.

    detail explains which message requirement failed; it is None when
    a bare predicate without help text was in effect.
    """

    kind: ClassVar[ResultKind] = ResultKind.wrong_exception_message

    thrown: BaseException
    description: str
    detail: str | None = None

    def message(self, renderer: Renderer, style: Style) -> str:
        thrown_name = style.green(exception_type_name(self.thrown))
        actual = style.red(f'"{exception_message(self.thrown)}"')
        detail = self.detail if self.detail is not None else renderer.render(
            "wrong.exception.message.unspecified"
        )
        return self._lines(
            renderer,
            style,
            renderer.render("wrong.exception.message.basic", thrown_name, actual),
            detail,
        )


@dataclass(frozen=True)
class WrongExceptionAndMessageFailure(Failure):
    """Both the exception type and its message were unacceptable."""

    kind: ClassVar[ResultKind] = ResultKind.wrong_exception_and_message

    thrown: BaseException
    description: str

    def message(self, renderer: Renderer, style: Style) -> str:
        thrown_name = style.red(exception_type_name(self.thrown))
        actual = style.red(f'"{exception_message(self.thrown)}"')
        return self._lines(
            renderer,
            style,
            renderer.render("wrong.exception.and.message.basic", thrown_name, actual),
            renderer.render("but.expected", self.description),
        )


@dataclass(frozen=True)
class TimeoutFailure(Failure):
    """The computation did not finish within the time bound."""

    kind: ClassVar[ResultKind] = ResultKind.timeout

    timeout: int
    description: str

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")

    def message(self, renderer: Renderer, style: Style) -> str:
        return self._lines(renderer, style, renderer.render("timeout", self.description, self.timeout))


@dataclass(frozen=True)
class UnexpectedExceptionFailure(Failure):
    """An error the test never expects, or an external interruption."""

    kind: ClassVar[ResultKind] = ResultKind.unexpected_exception

    thrown: BaseException
    description: str

    def message(self, renderer: Renderer, style: Style) -> str:
        thrown_name = style.red(exception_type_name(self.thrown))
        actual = style.red(f'"{exception_message(self.thrown)}"')
        return self._lines(
            renderer,
            style,
            renderer.render("unexpected.exception", self.description, thrown_name, actual),
        )
