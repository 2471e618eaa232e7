"""Exception-style tests and the classification engine.

An ExpectationSpec says which raised exceptions are acceptable (a type
predicate) and what their message must look like (an exact message or
a predicate). classify() compares a raised exception with a spec and
picks the precise result variant; ExceptionTest runs a computation and
feeds whatever it raised through classify().
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from assay.checks.base import Test, check_callable, default_formatter
from assay.checks.help import ExactMessage, HelpArg, PredicateHelp, TypeName, describe, type_arg
from assay.execution.evaluator import Thrown, TimedOut, is_interruption
from assay.models.result import (
    Formatter,
    NoExceptionFailure,
    Success,
    TestResult,
    TimeoutFailure,
    UnexpectedExceptionFailure,
    WrongExceptionAndMessageFailure,
    WrongExceptionMessageFailure,
    WrongExceptionTypeFailure,
    exception_message,
)

if TYPE_CHECKING:
    from assay.execution.context import ExecutionContext
    from assay.i18n.catalog import Renderer
    from assay.style import Style

logger = logging.getLogger(__name__)

MessagePredicate = Callable[[str], bool]


def accept_any_message(message: str) -> bool:
    return True


def _check_exception_type(value: Any) -> type[BaseException]:
    if value is None:
        raise TypeError("exception type cannot be None")
    if not isinstance(value, type) or not issubclass(value, BaseException):
        raise TypeError(f"{value!r} is not an exception type")
    return value


def _unique_types(types: Iterable[type[BaseException]]) -> tuple[type[BaseException], ...]:
    if types is None:
        raise TypeError("exception types cannot be None")
    if isinstance(types, type):
        types = (types,)
    unique: dict[type[BaseException], None] = {}
    for exc_type in types:
        unique[_check_exception_type(exc_type)] = None
    if not unique:
        raise ValueError("at least one exception type is required")
    return tuple(unique)


@dataclass(frozen=True)
class ExpectationSpec:
    """What an exception-style test accepts.

    Build instances with one_of(), single() or excluding() rather than
    directly. When message is set, message_predicate is never consulted.
    """

    types: tuple[type[BaseException], ...]
    excluded: bool = False
    message: str | None = None
    message_predicate: MessagePredicate = accept_any_message
    predicate_help: str | None = None
    type_names: tuple[str, ...] = field(init=False)

    def __post_init__(self) -> None:
        if self.message is not None and not isinstance(self.message, str):
            raise TypeError("message must be a string")
        check_callable(self.message_predicate, "message predicate")
        names = sorted({exc_type.__name__ for exc_type in self.types})
        object.__setattr__(self, "type_names", tuple(names))

    @classmethod
    def one_of(
        cls,
        types: Iterable[type[BaseException]],
        *,
        message: str | None = None,
        predicate: MessagePredicate | None = None,
        help: str | None = None,
    ) -> ExpectationSpec:
        """Accept an instance of any of *types* (subclasses included)."""
        return cls(
            types=_unique_types(types),
            message=message,
            message_predicate=predicate or accept_any_message,
            predicate_help=help,
        )

    @classmethod
    def single(
        cls,
        exc_type: type[BaseException],
        *,
        message: str | None = None,
        predicate: MessagePredicate | None = None,
        help: str | None = None,
    ) -> ExpectationSpec:
        """Accept an instance of *exc_type* (subclasses included)."""
        return cls.one_of(
            (_check_exception_type(exc_type),),
            message=message,
            predicate=predicate,
            help=help,
        )

    @classmethod
    def excluding(
        cls,
        exc_type: type[BaseException],
        *,
        message: str | None = None,
        predicate: MessagePredicate | None = None,
        help: str | None = None,
    ) -> ExpectationSpec:
        """Accept any exception that is not an instance of *exc_type*."""
        return cls(
            types=(_check_exception_type(exc_type),),
            excluded=True,
            message=message,
            message_predicate=predicate or accept_any_message,
            predicate_help=help,
        )

    def type_matches(self, error: BaseException) -> bool:
        matched = isinstance(error, self.types)
        return not matched if self.excluded else matched

    def message_matches(self, error: BaseException) -> bool:
        """Check the message requirement; the exact message takes precedence."""
        actual = exception_message(error)
        if self.message is not None:
            return actual == self.message
        return bool(self.message_predicate(actual))

    def description_key(self) -> str:
        if self.excluded:
            prefix = "exception.except"
        elif len(self.type_names) > 1:
            prefix = "exception.oneof"
        else:
            prefix = "exception"
        if self.message is not None:
            return f"{prefix}.with.message.description"
        if self.predicate_help is not None:
            return f"{prefix}.with.predicate.description"
        return f"{prefix}.description"

    def help_args(self) -> list[HelpArg]:
        args: list[HelpArg] = [
            TypeName(self.type_names[0]) if self.excluded else type_arg(self.type_names)
        ]
        if self.message is not None:
            args.append(ExactMessage(self.message))
        elif self.predicate_help is not None:
            args.append(PredicateHelp(self.predicate_help))
        return args

    def describe(self, renderer: Renderer, style: Style) -> str:
        """Render the one-sentence description of this expectation."""
        return describe(self.description_key(), self.help_args(), renderer, style)

    def message_detail(self, renderer: Renderer, style: Style) -> str | None:
        """Explain which message requirement failed, if it can be named."""
        if self.message is not None:
            return renderer.render(
                "detail.expected_exact_message", ExactMessage(self.message).format(renderer, style)
            )
        if self.predicate_help is not None:
            return renderer.render(
                "detail.expected_predicate", PredicateHelp(self.predicate_help).format(renderer, style)
            )
        return None


def classify(
    error: BaseException,
    spec: ExpectationSpec,
    description: str,
    renderer: Renderer,
    style: Style,
) -> TestResult:
    """Map a raised exception onto the result variant it deserves.

    Interruptions are always unexpected, whatever the spec accepts.
    """
    if is_interruption(error):
        return UnexpectedExceptionFailure(error, description)

    type_ok = spec.type_matches(error)
    try:
        message_ok = spec.message_matches(error)
    except Exception as exc:
        logger.debug("Message predicate raised %s", type(exc).__name__)
        return UnexpectedExceptionFailure(exc, description)

    if type_ok and message_ok:
        return Success()
    if not type_ok and not message_ok:
        return WrongExceptionAndMessageFailure(error, description)
    if not type_ok:
        return WrongExceptionTypeFailure(error, description)
    return WrongExceptionMessageFailure(error, description, spec.message_detail(renderer, style))


class ExceptionTest(Test):
    """Passes when the computation raises an exception the spec accepts.

    Args:
        name: Display name.
        computation: Zero-argument callable expected to raise.
        spec: Acceptable exception types and message requirement.
        formatter: Renders the value returned when nothing was raised.
        timeout: Optional per-test timeout override.
    """

    def __init__(
        self,
        name: str,
        computation: Callable[[], Any],
        spec: ExpectationSpec,
        *,
        formatter: Formatter = default_formatter,
        timeout: int | None = None,
    ) -> None:
        super().__init__(name, computation, timeout)
        if not isinstance(spec, ExpectationSpec):
            raise TypeError("spec must be an ExpectationSpec")
        self.spec = spec
        self.formatter = check_callable(formatter, "formatter")

    async def _execute(self, context: ExecutionContext) -> TestResult:
        description = self.spec.describe(context.renderer, context.style)
        outcome = await self.evaluator.evaluate(self.computation, context.timeout)

        if isinstance(outcome, TimedOut):
            return TimeoutFailure(outcome.timeout, context.render("expected", description))
        if isinstance(outcome, Thrown):
            return classify(outcome.error, self.spec, description, context.renderer, context.style)
        return NoExceptionFailure(outcome.value, self.formatter, description)
