"""Assay execution utilities - bounded evaluator, context, and observers."""

from assay.execution.context import ExecutionContext
from assay.execution.evaluator import (
    BoundedEvaluator,
    EvaluationOutcome,
    Thrown,
    TimedOut,
    Value,
    cancellation_requested,
    is_interruption,
)
from assay.execution.observer import ConsoleObserver, Observer, SilentObserver

__all__ = [
    "BoundedEvaluator",
    "ConsoleObserver",
    "EvaluationOutcome",
    "ExecutionContext",
    "Observer",
    "SilentObserver",
    "Thrown",
    "TimedOut",
    "Value",
    "cancellation_requested",
    "is_interruption",
]
