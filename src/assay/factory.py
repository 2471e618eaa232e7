"""Factory functions for every test family.

One function per family, with optional behavior passed as keyword-only
arguments. The optional arguments are collected into a frozen options
object, validated once, and handed to the test constructor.

Example::

    equal("square", lambda: 2 * 2, 4)
    expect_exception("div by zero", lambda: 1 / 0, ZeroDivisionError)
    expect_exception_one_of(
        "bad key",
        lambda: {}["k"],
        (KeyError, IndexError),
        predicate=lambda m: "k" in m,
        help="mentions the key",
    )
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from assay.checks.base import default_formatter
from assay.checks.equality import EqualityTest
from assay.checks.exceptions import ExceptionTest, ExpectationSpec, MessagePredicate
from assay.checks.property import PropertyTest, is_false, is_true, was_key
from assay.execution.evaluator import check_timeout
from assay.models.result import Formatter
from assay.suite import Info


@dataclass(frozen=True)
class PropertyOptions:
    """Optional settings of a property test."""

    help: str | None = None
    formatter: Formatter | None = None
    timeout: int | None = None

    def __post_init__(self) -> None:
        if self.help is not None and not isinstance(self.help, str):
            raise TypeError("help must be a string")
        if self.formatter is not None and not callable(self.formatter):
            raise TypeError("formatter must be callable")
        if self.timeout is not None:
            check_timeout(self.timeout)


@dataclass(frozen=True)
class ExceptionOptions:
    """Optional settings of an exception-style test.

    When both message and predicate are given, only message is checked.
    """

    message: str | None = None
    predicate: MessagePredicate | None = None
    help: str | None = None
    formatter: Formatter = default_formatter
    timeout: int | None = None

    def __post_init__(self) -> None:
        if self.message is not None and not isinstance(self.message, str):
            raise TypeError("message must be a string")
        if self.predicate is not None and not callable(self.predicate):
            raise TypeError("predicate must be callable")
        if self.help is not None and not isinstance(self.help, str):
            raise TypeError("help must be a string")
        if not callable(self.formatter):
            raise TypeError("formatter must be callable")
        if self.timeout is not None:
            check_timeout(self.timeout)

    def spec_arguments(self) -> dict[str, Any]:
        return {"message": self.message, "predicate": self.predicate, "help": self.help}


def equal(
    name: str,
    computation: Callable[[], Any],
    expected: Any,
    *,
    formatter: Formatter = default_formatter,
    timeout: int | None = None,
) -> EqualityTest:
    """Test that the computation returns a value equal to *expected*."""
    return EqualityTest(name, computation, expected, formatter=formatter, timeout=timeout)


def equal_by(
    name: str,
    computation: Callable[[], Any],
    expected: Any,
    equals: Callable[[Any, Any], bool],
    *,
    formatter: Formatter = default_formatter,
    timeout: int | None = None,
) -> EqualityTest:
    """Test with a custom relation, called as equals(actual, expected)."""
    return EqualityTest(
        name, computation, expected, equals=equals, formatter=formatter, timeout=timeout
    )


def property_test(
    name: str,
    computation: Callable[[], Any],
    predicate: Callable[[Any], bool],
    *,
    help: str | None = None,
    formatter: Formatter | None = None,
    timeout: int | None = None,
) -> PropertyTest:
    """Test that *predicate* holds for the computed value."""
    options = PropertyOptions(help=help, formatter=formatter, timeout=timeout)
    return PropertyTest(
        name,
        computation,
        predicate,
        help=options.help,
        formatter=options.formatter,
        timeout=options.timeout,
    )


def assert_true(
    name: str,
    computation: Callable[[], Any],
    *,
    timeout: int | None = None,
) -> PropertyTest:
    """Test that the computation returns True. None counts as a failure."""
    return PropertyTest(
        name,
        computation,
        is_true,
        help_key="property.must.be.true",
        formatter_key=was_key,
        timeout=timeout,
    )


def refute(
    name: str,
    computation: Callable[[], Any],
    *,
    timeout: int | None = None,
) -> PropertyTest:
    """Test that the computation returns False. None counts as a failure."""
    return PropertyTest(
        name,
        computation,
        is_false,
        help_key="property.must.be.false",
        formatter_key=was_key,
        timeout=timeout,
    )


def _exception_test(
    name: str,
    computation: Callable[[], Any],
    spec: ExpectationSpec,
    options: ExceptionOptions,
) -> ExceptionTest:
    return ExceptionTest(
        name, computation, spec, formatter=options.formatter, timeout=options.timeout
    )


def expect_exception(
    name: str,
    computation: Callable[[], Any],
    exc_type: type[BaseException],
    *,
    message: str | None = None,
    predicate: MessagePredicate | None = None,
    help: str | None = None,
    formatter: Formatter = default_formatter,
    timeout: int | None = None,
) -> ExceptionTest:
    """Test that the computation raises *exc_type* (or a subclass)."""
    options = ExceptionOptions(message, predicate, help, formatter, timeout)
    spec = ExpectationSpec.single(exc_type, **options.spec_arguments())
    return _exception_test(name, computation, spec, options)


def expect_exception_one_of(
    name: str,
    computation: Callable[[], Any],
    exc_types: Iterable[type[BaseException]],
    *,
    message: str | None = None,
    predicate: MessagePredicate | None = None,
    help: str | None = None,
    formatter: Formatter = default_formatter,
    timeout: int | None = None,
) -> ExceptionTest:
    """Test that the computation raises an instance of any of *exc_types*."""
    options = ExceptionOptions(message, predicate, help, formatter, timeout)
    spec = ExpectationSpec.one_of(exc_types, **options.spec_arguments())
    return _exception_test(name, computation, spec, options)


def expect_exception_except(
    name: str,
    computation: Callable[[], Any],
    excluded: type[BaseException],
    *,
    message: str | None = None,
    predicate: MessagePredicate | None = None,
    help: str | None = None,
    formatter: Formatter = default_formatter,
    timeout: int | None = None,
) -> ExceptionTest:
    """Test that the computation raises anything but an *excluded* instance."""
    options = ExceptionOptions(message, predicate, help, formatter, timeout)
    spec = ExpectationSpec.excluding(excluded, **options.spec_arguments())
    return _exception_test(name, computation, spec, options)


def any_exception_but_not_implemented(
    name: str,
    computation: Callable[[], Any],
    *,
    message: str | None = None,
    predicate: MessagePredicate | None = None,
    help: str | None = None,
    formatter: Formatter = default_formatter,
    timeout: int | None = None,
) -> ExceptionTest:
    """Test that the computation raises, but not NotImplementedError.

    Useful to check that an operation is actually implemented and
    rejects bad input, rather than being a stub.
    """
    return expect_exception_except(
        name,
        computation,
        NotImplementedError,
        message=message,
        predicate=predicate,
        help=help,
        formatter=formatter,
        timeout=timeout,
    )


def info(message: str) -> Info:
    """Create a suite item that prints *message* between tests."""
    return Info(message)
