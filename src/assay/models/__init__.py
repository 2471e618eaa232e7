"""Assay data models - re-exports all public model classes."""

from assay.models.config import EngineConfig, Language, load_config
from assay.models.result import (
    EqualityFailure,
    Failure,
    NoExceptionFailure,
    PropertyFailure,
    ResultKind,
    Success,
    TestResult,
    TimeoutFailure,
    UnexpectedExceptionFailure,
    WrongExceptionAndMessageFailure,
    WrongExceptionMessageFailure,
    WrongExceptionTypeFailure,
)
from assay.models.summary import RunSummary, SuiteSummary

__all__ = [
    "EngineConfig",
    "EqualityFailure",
    "Failure",
    "Language",
    "NoExceptionFailure",
    "PropertyFailure",
    "ResultKind",
    "RunSummary",
    "Success",
    "SuiteSummary",
    "TestResult",
    "TimeoutFailure",
    "UnexpectedExceptionFailure",
    "WrongExceptionAndMessageFailure",
    "WrongExceptionMessageFailure",
    "WrongExceptionTypeFailure",
    "load_config",
]
