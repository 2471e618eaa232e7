"""Errors raised while loading suite files and configuration.

Configuration errors are collected from pydantic's ValidationError
into ConfigErrorDetail records, with a "did you mean" suggestion for
misspelled keys, so the CLI can print them one per line.
"""

from __future__ import annotations

import difflib
from dataclasses import dataclass
from pathlib import Path

from pydantic import ValidationError

from assay.models.config import EngineConfig

# All valid config keys, used for typo suggestions
VALID_CONFIG_FIELDS: list[str] = list(EngineConfig.model_fields.keys())


class SuiteLoadError(Exception):
    """A suite file could not be imported or defines no suites.

    Attributes:
        path: The file that failed to load.
        reason: Human-readable description of the problem.
    """

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


@dataclass
class ConfigErrorDetail:
    """A single configuration problem.

    Attributes:
        field: Dotted path of the offending key.
        message: Human-readable error description.
        type: Pydantic error type string (e.g. 'extra_forbidden').
        suggestion: 'Did you mean X?' hint for typos, or None.
    """

    field: str
    message: str
    type: str
    suggestion: str | None = None

    def __str__(self) -> str:
        text = f"{self.field}: {self.message}"
        if self.suggestion:
            text += f" ({self.suggestion})"
        return text


def _suggest(name: str) -> str | None:
    matches = difflib.get_close_matches(name, VALID_CONFIG_FIELDS, n=1, cutoff=0.6)
    return f"Did you mean '{matches[0]}'?" if matches else None


def config_error_details(exc: ValidationError) -> list[ConfigErrorDetail]:
    """Flatten a pydantic ValidationError into ConfigErrorDetail records."""
    details: list[ConfigErrorDetail] = []
    for error in exc.errors():
        loc = ".".join(str(part) for part in error.get("loc", ())) or "<root>"
        suggestion = None
        if error.get("type") == "extra_forbidden":
            suggestion = _suggest(loc.split(".")[-1])
        details.append(
            ConfigErrorDetail(
                field=loc,
                message=error.get("msg", "invalid value"),
                type=error.get("type", "value_error"),
                suggestion=suggestion,
            )
        )
    return details
