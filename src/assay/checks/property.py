"""PropertyTest: check a unary predicate over a computed value."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from assay.checks.base import Test, check_callable, default_formatter
from assay.execution.context import ExecutionContext
from assay.execution.evaluator import Thrown, TimedOut
from assay.models.result import (
    Formatter,
    PropertyFailure,
    Success,
    TestResult,
    TimeoutFailure,
    UnexpectedExceptionFailure,
)


class PropertyTest(Test):
    """Passes when predicate(value) holds for the computed value.

    Help text and value formatting can be given either literally or as
    catalog keys, so built-in properties stay localized. A literal help
    text wins over help_key, and formatter wins over formatter_key.

    Args:
        name: Display name.
        computation: Zero-argument callable producing the value.
        predicate: Unary predicate the value must satisfy.
        help: Text describing the property, shown on failure.
        help_key: Catalog key for the help text.
        formatter: Renders the obtained value.
        formatter_key: Maps the obtained value to a catalog key.
        timeout: Optional per-test timeout override.
    """

    def __init__(
        self,
        name: str,
        computation: Callable[[], Any],
        predicate: Callable[[Any], bool],
        *,
        help: str | None = None,
        help_key: str | None = None,
        formatter: Formatter | None = None,
        formatter_key: Callable[[Any], str] | None = None,
        timeout: int | None = None,
    ) -> None:
        super().__init__(name, computation, timeout)
        self.predicate = check_callable(predicate, "predicate")
        self.help = help
        self.help_key = help_key
        self.formatter = None if formatter is None else check_callable(formatter, "formatter")
        self.formatter_key = (
            None if formatter_key is None else check_callable(formatter_key, "formatter_key")
        )

    def describe(self, context: ExecutionContext) -> str:
        base = context.render("property.failure.base")
        detail = self.help
        if detail is None and self.help_key is not None:
            detail = context.render(self.help_key)
        if detail is None:
            return base
        return base + context.render("property.failure.suffix", context.style.green(detail))

    def value_formatter(self, context: ExecutionContext) -> Formatter:
        """Return the formatter used for the obtained value in *context*."""
        if self.formatter is not None:
            return self.formatter
        if self.formatter_key is not None:
            key_for = self.formatter_key
            return lambda value: context.render(key_for(value))
        return default_formatter

    async def _execute(self, context: ExecutionContext) -> TestResult:
        description = self.describe(context)
        outcome = await self.evaluator.evaluate(self.computation, context.timeout)

        if isinstance(outcome, TimedOut):
            return TimeoutFailure(outcome.timeout, description)
        if isinstance(outcome, Thrown):
            return UnexpectedExceptionFailure(outcome.error, description)

        try:
            holds = bool(self.predicate(outcome.value))
        except Exception as exc:
            return UnexpectedExceptionFailure(exc, description)
        if holds:
            return Success()
        return PropertyFailure(outcome.value, self.value_formatter(context), description)


def is_true(value: Any) -> bool:
    return value is True


def is_false(value: Any) -> bool:
    return value is False


def was_key(value: Any) -> str:
    """Catalog key naming the boolean *value* of an assert/refute test."""
    if value is True:
        return "property.was.true"
    if value is False:
        return "property.was.false"
    return "null" if value is None else repr(value)
