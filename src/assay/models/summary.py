"""Summary data models for suite and run reports.

These models encode the machine-readable output contract of a run:
per-suite statistics and the cross-suite rollup. They are designed
for JSON serialization; the live TestResult objects stay behind in
the Results they were computed from.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class SuiteSummary(BaseModel):
    """Statistics for one suite run."""

    model_config = {"extra": "forbid"}

    name: str
    passed: int = Field(ge=0)
    failed: int = Field(ge=0)
    total: int = Field(ge=0)
    success_rate: float = Field(ge=0.0, le=1.0)
    detail: str = ""
    outcomes: list[str] = Field(default_factory=list)


class RunSummary(BaseModel):
    """Cross-suite rollup of a complete run.

    success_rate is 1.0 when no tests were run at all.
    """

    model_config = {"extra": "forbid"}

    suites: list[SuiteSummary] = Field(default_factory=list)
    total_suites: int = 0
    total_tests: int = 0
    total_passed: int = 0
    total_failed: int = 0
    success_rate: float = 1.0

    @classmethod
    def from_suites(cls, suites: list[SuiteSummary]) -> RunSummary:
        """Build the rollup from per-suite summaries, preserving order."""
        total_tests = sum(s.total for s in suites)
        total_passed = sum(s.passed for s in suites)
        total_failed = sum(s.failed for s in suites)
        rate = 1.0 if total_tests == 0 else total_passed / total_tests
        return cls(
            suites=list(suites),
            total_suites=len(suites),
            total_tests=total_tests,
            total_passed=total_passed,
            total_failed=total_failed,
            success_rate=rate,
        )

    @property
    def successful(self) -> bool:
        """True when no test failed."""
        return self.total_failed == 0
