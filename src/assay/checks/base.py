"""Test: the execution contract shared by every test family."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from assay.execution.context import ExecutionContext
from assay.execution.evaluator import BoundedEvaluator, check_timeout
from assay.models.result import TestResult

logger = logging.getLogger(__name__)


def check_name(name: Any) -> str:
    """Validate a test name.

    Raises:
        TypeError: If *name* is not a string.
        ValueError: If *name* is empty or blank.
    """
    if not isinstance(name, str):
        raise TypeError(f"test name must be a string, got {type(name).__name__}")
    if not name.strip():
        raise ValueError("test name cannot be empty")
    return name


def check_callable(value: Any, what: str) -> Callable[..., Any]:
    """Raise TypeError unless *value* is callable."""
    if value is None:
        raise TypeError(f"{what} cannot be None")
    if not callable(value):
        raise TypeError(f"{what} must be callable, got {type(value).__name__}")
    return value


def default_formatter(value: Any) -> str:
    """Format a value for result messages."""
    return repr(value)


class Test(ABC):
    """A named, immutable check over one user-supplied computation.

    Subclasses implement _execute(); run() wraps it with observer
    notifications and timeout resolution. A test can be run any number
    of times; every run is an independent evaluation.

    Args:
        name: Non-empty display name.
        computation: Zero-argument callable or coroutine function.
        timeout: Optional per-test override of the context timeout,
            in whole seconds.
    """

    __test__ = False  # Prevent pytest from collecting this as a test class

    evaluator = BoundedEvaluator()

    def __init__(
        self,
        name: str,
        computation: Callable[[], Any],
        timeout: int | None = None,
    ) -> None:
        self._name = check_name(name)
        self._computation = check_callable(computation, "computation")
        self._timeout = None if timeout is None else check_timeout(timeout)

    @property
    def name(self) -> str:
        return self._name

    @property
    def timeout(self) -> int | None:
        return self._timeout

    @property
    def computation(self) -> Callable[[], Any]:
        return self._computation

    def resolve_timeout(self, context: ExecutionContext) -> int:
        """Return the override if set, else the context default."""
        return self._timeout if self._timeout is not None else context.timeout

    async def run(self, context: ExecutionContext) -> TestResult:
        """Execute the test once and report it to the context observer."""
        observer = context.observer
        observer.on_start(self._name)

        local = context.with_timeout(self.resolve_timeout(context))
        result = await self._execute(local)
        logger.debug("Test %r finished: %s", self._name, result.kind.value)

        observer.on_result(result)
        observer.flush()
        return result

    @abstractmethod
    async def _execute(self, context: ExecutionContext) -> TestResult:
        """Evaluate the computation and classify the outcome.

        *context* already carries the resolved timeout. Implementations
        must capture every evaluation-time error in the returned result.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, timeout={self._timeout!r})"

