"""EqualityTest: compare a computed value with an expected one."""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import Any

from assay.checks.base import Test, check_callable, default_formatter
from assay.execution.context import ExecutionContext
from assay.execution.evaluator import Thrown, TimedOut
from assay.models.result import (
    EqualityFailure,
    Formatter,
    Success,
    TestResult,
    TimeoutFailure,
    UnexpectedExceptionFailure,
)


class EqualityTest(Test):
    """Passes when equals(actual, expected) holds for the computed value.

    Args:
        name: Display name.
        computation: Zero-argument callable producing the actual value.
        expected: The value the computation should produce.
        equals: Binary relation called as equals(actual, expected).
        formatter: Renders expected and actual values in messages.
        timeout: Optional per-test timeout override.
    """

    def __init__(
        self,
        name: str,
        computation: Callable[[], Any],
        expected: Any,
        *,
        equals: Callable[[Any, Any], bool] = operator.eq,
        formatter: Formatter = default_formatter,
        timeout: int | None = None,
    ) -> None:
        super().__init__(name, computation, timeout)
        self.expected = expected
        self.equals = check_callable(equals, "equals")
        self.formatter = check_callable(formatter, "formatter")

    def describe(self, context: ExecutionContext) -> str:
        return context.render("expected.result", context.style.green(self.formatter(self.expected)))

    async def _execute(self, context: ExecutionContext) -> TestResult:
        description = self.describe(context)
        outcome = await self.evaluator.evaluate(self.computation, context.timeout)

        if isinstance(outcome, TimedOut):
            return TimeoutFailure(outcome.timeout, description)
        if isinstance(outcome, Thrown):
            return UnexpectedExceptionFailure(outcome.error, description)

        try:
            matched = bool(self.equals(outcome.value, self.expected))
        except Exception as exc:
            return UnexpectedExceptionFailure(exc, description)
        if matched:
            return Success()
        return EqualityFailure(self.expected, outcome.value, self.formatter)
