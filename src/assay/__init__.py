"""Assay - bounded-time assertion and exception tests."""

__version__ = "0.1.0"

from assay.checks import EqualityTest, ExceptionTest, ExpectationSpec, PropertyTest, Test
from assay.execution import ExecutionContext, cancellation_requested
from assay.factory import (
    ExceptionOptions,
    PropertyOptions,
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
from assay.models import EngineConfig, Language, ResultKind, TestResult, load_config
from assay.suite import Info, Results, RunReport, SuiteRunner, TestSuite

__all__ = [
    "EngineConfig",
    "EqualityTest",
    "ExceptionOptions",
    "ExceptionTest",
    "ExecutionContext",
    "ExpectationSpec",
    "Info",
    "Language",
    "PropertyOptions",
    "PropertyTest",
    "ResultKind",
    "Results",
    "RunReport",
    "SuiteRunner",
    "Test",
    "TestResult",
    "TestSuite",
    "__version__",
    "any_exception_but_not_implemented",
    "assert_true",
    "cancellation_requested",
    "equal",
    "equal_by",
    "expect_exception",
    "expect_exception_except",
    "expect_exception_one_of",
    "info",
    "load_config",
    "property_test",
    "refute",
]
