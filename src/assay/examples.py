"""Example suites run by ``assay demo``.

The first suite exercises every test family with computations that
pass. The second deliberately fails in every way an exception-style
test can fail, to show each kind of report.

Run them from the command line::

    assay demo --lang es
"""

from __future__ import annotations

import asyncio
import math
import time

from assay.execution.evaluator import cancellation_requested
from assay.factory import (
    any_exception_but_not_implemented,
    assert_true,
    equal,
    equal_by,
    expect_exception,
    expect_exception_except,
    expect_exception_one_of,
    info,
    property_test,
    refute,
)
from assay.suite import TestSuite


class ReadError(RuntimeError):
    pass


class QueryError(RuntimeError):
    pass


class MissingFileError(ReadError):
    pass


def no_raise() -> str:
    return "Success"


def raise_value(message: str = "Illegal Argument") -> str:
    raise ValueError(message)


def raise_runtime(message: str = "Runtime Error") -> str:
    raise RuntimeError(message)


def raise_read(message: str = "Read Error") -> str:
    raise ReadError(message)


def raise_query(message: str = "Query Error") -> str:
    raise QueryError(message)


def raise_missing_file(message: str = "File Not Found") -> str:
    raise MissingFileError(message)


def raise_not_implemented(message: str = "Not Implemented") -> str:
    raise NotImplementedError(message)


def slow_raise_value(message: str = "Slow Illegal Argument", delay: float = 0.15) -> str:
    """Sleep in short steps, giving up early once the test has timed out."""
    deadline = time.monotonic() + delay
    while time.monotonic() < deadline:
        if cancellation_requested():
            return "cancelled"
        time.sleep(0.05)
    return raise_value(message)


def require_argument(arg: str | None) -> str:
    if arg is None:
        raise ValueError("Argument must not be null")
    return arg


async def fetch_answer() -> int:
    await asyncio.sleep(0.01)
    return 42


def is_even(value: int | None) -> bool:
    return value is not None and value % 2 == 0


LIBRARY_SUITE = TestSuite(
    "Core Testing Library Features",
    [
        equal("Simple Addition", lambda: 2 + 2, 4),
        equal("String Equality", lambda: "hello".upper(), "HELLO"),
        equal("None Equality", lambda: None, None),
        equal_by("String Ignore Case", lambda: "Python", "python", lambda a, b: a.lower() == b.lower()),
        assert_true("Is Positive", lambda: 5 > 0),
        refute("Is Not Negative", lambda: 5 < 0),
        refute("String Is Not Empty", lambda: len("Hello") == 0),
        property_test("Number Is Even", lambda: 10, is_even, help="value should be divisible by 2"),
        property_test("List Not Empty Property", lambda: [1, 2, 3], lambda items: len(items) > 0),
        equal("Coroutine Result", fetch_answer, 42),
        info("Exception-style tests"),
        expect_exception("Zero Division", lambda: 1 / 0, ZeroDivisionError),
        expect_exception(
            "Value Error with Message",
            lambda: require_argument(None),
            ValueError,
            message="Argument must not be null",
        ),
        expect_exception_one_of(
            "Index Error or Type Error",
            lambda: ["a"][1],
            (IndexError, TypeError),
        ),
        expect_exception_except("Any Except AttributeError", lambda: 1 / 0, AttributeError),
        any_exception_but_not_implemented("Any But NotImplementedError", lambda: 1 / 0),
        assert_true("Quick Calculation", lambda: math.pow(2, 10) == 1024, timeout=1),
    ],
)


EXCEPTION_REPORTING_SUITE = TestSuite(
    "Exception Test Error Reporting",
    [
        expect_exception("expect_exception: No Exception Raised", no_raise, ValueError),
        expect_exception("expect_exception: Wrong Exception Type", raise_runtime, ValueError),
        expect_exception(
            "expect_exception: Correct Type, Wrong Exact Message",
            lambda: raise_value("Actual message"),
            ValueError,
            message="Expected message",
        ),
        expect_exception(
            "expect_exception: Timeout",
            lambda: slow_raise_value("Irrelevant", 2),
            ValueError,
            timeout=1,
        ),
        expect_exception_one_of(
            "expect_exception_one_of: No Exception Raised",
            no_raise,
            (ReadError, QueryError),
        ),
        expect_exception_one_of(
            "expect_exception_one_of: Wrong Exception Type (Not in Set)",
            raise_value,
            (ReadError, QueryError),
        ),
        expect_exception_one_of(
            "expect_exception_one_of: Correct Type (Subclass), Wrong Exact Message",
            lambda: raise_missing_file("Actual missing file"),
            (ReadError, QueryError),
            message="Expected message",
        ),
        expect_exception_one_of(
            "expect_exception_one_of: Correct Type, Wrong Exact Message",
            lambda: raise_query("Actual query message"),
            (ReadError, QueryError),
            message="Expected message",
        ),
        expect_exception_one_of(
            "expect_exception_one_of: Correct Type, Failed Predicate",
            lambda: raise_read("Actual read message"),
            (ReadError, QueryError),
            predicate=lambda message: message.startswith("Expected"),
            help="starts with 'Expected'",
        ),
        expect_exception_one_of(
            "expect_exception_one_of: Timeout",
            lambda: slow_raise_value("Irrelevant type", 2),
            (ReadError, QueryError),
            timeout=1,
        ),
        expect_exception_except("expect_exception_except: No Exception Raised", no_raise, ReadError),
        expect_exception_except(
            "expect_exception_except: Excluded Type Raised",
            lambda: raise_read("Raising the excluded type"),
            ReadError,
        ),
        expect_exception_except(
            "expect_exception_except: Allowed Type, Wrong Exact Message",
            lambda: raise_query("Actual query message"),
            ReadError,
            message="Expected message",
        ),
        expect_exception_except(
            "expect_exception_except: Allowed Type, Failed Predicate",
            lambda: raise_query("Actual query message"),
            ReadError,
            predicate=lambda message: "Expected" in message,
            help="contains 'Expected'",
        ),
        expect_exception_except(
            "expect_exception_except: Timeout",
            lambda: slow_raise_value("Irrelevant", 2),
            ReadError,
            timeout=1,
        ),
        any_exception_but_not_implemented("any_but_not_implemented: No Exception Raised", no_raise),
        any_exception_but_not_implemented(
            "any_but_not_implemented: Excluded Type Raised",
            lambda: raise_not_implemented("Raising NotImplementedError"),
        ),
        any_exception_but_not_implemented(
            "any_but_not_implemented: Allowed Type, Wrong Exact Message",
            lambda: raise_value("Actual value message"),
            message="Expected message",
        ),
        any_exception_but_not_implemented(
            "any_but_not_implemented: Allowed Type, Failed Predicate",
            lambda: raise_runtime("Actual runtime message"),
            predicate=lambda message: message.startswith("X"),
            help="starts with X",
        ),
        any_exception_but_not_implemented(
            "any_but_not_implemented: Timeout",
            lambda: slow_raise_value("Irrelevant", 2),
            timeout=1,
        ),
    ],
)


SUITES = [LIBRARY_SUITE, EXCEPTION_REPORTING_SUITE]
