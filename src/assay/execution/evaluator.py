"""BoundedEvaluator: run one computation under a deadline.

The computation runs on its own unit of concurrency (a daemon worker
thread for plain callables, an asyncio task for coroutine functions)
while the caller awaits the outcome. When the deadline passes first,
the evaluator signals cancellation and returns TimedOut without
waiting for the computation to acknowledge it. A thread computation
that ignores the signal keeps running in the background.
"""

from __future__ import annotations

import asyncio
import contextvars
import inspect
import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Union

logger = logging.getLogger(__name__)

# Exceptions that mean "someone stopped us", never an application error
INTERRUPTIONS: tuple[type[BaseException], ...] = (asyncio.CancelledError, KeyboardInterrupt)

_cancel_event: contextvars.ContextVar[threading.Event | None] = contextvars.ContextVar(
    "assay_cancel_event", default=None
)


@dataclass(frozen=True)
class Value:
    """The computation returned normally."""

    value: Any


@dataclass(frozen=True)
class Thrown:
    """The computation raised, or the wait itself was interrupted."""

    error: BaseException


@dataclass(frozen=True)
class TimedOut:
    """The deadline elapsed before the computation finished."""

    timeout: int


EvaluationOutcome = Union[Value, Thrown, TimedOut]


def cancellation_requested() -> bool:
    """Return True once the evaluation running this code has been cancelled.

    Intended for long-running thread computations that want to stop
    cooperatively after a timeout. Outside an evaluation it is always
    False.
    """
    event = _cancel_event.get()
    return event is not None and event.is_set()


def is_interruption(error: BaseException) -> bool:
    """Whether *error* is an external interruption rather than an app error."""
    return isinstance(error, INTERRUPTIONS)


def check_timeout(timeout: Any) -> int:
    """Validate a timeout in whole seconds.

    Raises:
        ValueError: If *timeout* is not a positive integer.
    """
    if isinstance(timeout, bool) or not isinstance(timeout, int) or timeout <= 0:
        raise ValueError(f"timeout must be a positive integer, got {timeout!r}")
    return timeout


class BoundedEvaluator:
    """Evaluates zero-argument computations with a time bound."""

    async def evaluate(
        self,
        computation: Callable[[], Any],
        timeout: int,
    ) -> EvaluationOutcome:
        """Run *computation* and wait at most *timeout* seconds for it.

        Args:
            computation: Zero-argument callable or coroutine function.
            timeout: Positive number of seconds to wait.

        Returns:
            Value, Thrown, or TimedOut. If the awaiting task is itself
            cancelled, the computation is cancelled too and the outcome
            is Thrown(CancelledError).

        Raises:
            ValueError: If *timeout* is not a positive integer.
            TypeError: If *computation* is not callable.
        """
        check_timeout(timeout)
        if not callable(computation):
            raise TypeError("computation must be callable")

        if inspect.iscoroutinefunction(computation):
            pending = asyncio.ensure_future(_run_coroutine(computation))
            cancel = pending.cancel
        else:
            pending, event = _start_thread(computation)

            def cancel() -> None:
                event.set()
                pending.cancel()

        logger.debug("Evaluation started (timeout=%ss)", timeout)
        try:
            done, _ = await asyncio.wait({pending}, timeout=timeout)
        except asyncio.CancelledError as exc:
            cancel()
            task = asyncio.current_task()
            if task is not None:
                task.uncancel()
            logger.debug("Evaluation interrupted while waiting")
            return Thrown(exc)

        if not done:
            cancel()
            logger.debug("Evaluation timed out after %ss", timeout)
            return TimedOut(timeout)

        try:
            outcome = pending.result()
        except asyncio.CancelledError as exc:
            # The computation cancelled itself; nothing cancelled this waiter.
            logger.debug("Computation raised CancelledError")
            return Thrown(exc)
        logger.debug("Evaluation finished: %s", type(outcome).__name__)
        return outcome


async def _run_coroutine(computation: Callable[[], Any]) -> EvaluationOutcome:
    try:
        return Value(await computation())
    except asyncio.CancelledError:
        raise
    except BaseException as exc:  # noqa: BLE001 - every raised condition is an outcome
        return Thrown(exc)


def _start_thread(
    computation: Callable[[], Any],
) -> tuple[asyncio.Future[EvaluationOutcome], threading.Event]:
    """Start *computation* on a daemon thread bound to the running loop.

    Daemon threads keep a runaway computation from blocking interpreter
    exit once its test has been reported as timed out.
    """
    loop = asyncio.get_running_loop()
    future: asyncio.Future[EvaluationOutcome] = loop.create_future()
    event = threading.Event()
    context = contextvars.copy_context()

    def settle(outcome: EvaluationOutcome) -> None:
        if not future.done():
            future.set_result(outcome)

    def target() -> None:
        _cancel_event.set(event)
        try:
            outcome: EvaluationOutcome = Value(computation())
        except BaseException as exc:  # noqa: BLE001 - every raised condition is an outcome
            outcome = Thrown(exc)
        try:
            loop.call_soon_threadsafe(settle, outcome)
        except RuntimeError:
            # Loop already closed; nobody is waiting for this outcome.
            logger.debug("Discarding outcome of abandoned evaluation")

    thread = threading.Thread(
        target=context.run,
        args=(target,),
        name="assay-evaluation",
        daemon=True,
    )
    thread.start()
    return future, event
