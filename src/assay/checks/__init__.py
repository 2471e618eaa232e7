"""Assay test families - equality, property, and exception-style checks."""

from assay.checks.base import Test
from assay.checks.equality import EqualityTest
from assay.checks.exceptions import ExceptionTest, ExpectationSpec, classify
from assay.checks.help import ExactMessage, PredicateHelp, TypeName, TypeNameList, describe
from assay.checks.property import PropertyTest

__all__ = [
    "EqualityTest",
    "ExactMessage",
    "ExceptionTest",
    "ExpectationSpec",
    "PredicateHelp",
    "PropertyTest",
    "Test",
    "TypeName",
    "TypeNameList",
    "classify",
    "describe",
]
