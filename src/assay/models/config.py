"""Engine configuration model for Assay.

Captures assay.yaml fields with sensible defaults for run-level
settings like the default timeout, message language, and output flags.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

CONFIG_FILENAME = "assay.yaml"

# Environment variable consulted when no config file sets a language
LANGUAGE_ENV_VAR = "ASSAY_LANG"


class Language(str, Enum):
    """Languages with a bundled message catalog."""

    en = "en"
    es = "es"
    fr = "fr"


class EngineConfig(BaseModel):
    """Run-level configuration shared read-only by every test.

    A test never mutates this object; it derives a copy carrying
    its own resolved timeout via with_timeout().
    """

    model_config = {"extra": "forbid", "frozen": True}

    timeout: int = Field(default=3, gt=0)
    language: Language = Language.en
    csv_output: bool = False
    logging: bool = True
    color: bool = True

    def with_timeout(self, timeout: int) -> EngineConfig:
        """Return a copy of this config with a different timeout.

        Raises:
            ValueError: If *timeout* is not a positive integer.
        """
        if isinstance(timeout, bool) or not isinstance(timeout, int) or timeout <= 0:
            raise ValueError(f"timeout must be a positive integer, got {timeout!r}")
        return self.model_copy(update={"timeout": timeout})


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from start (default: cwd) looking for assay.yaml.

    Args:
        start: Starting path (file or directory). Defaults to cwd.

    Returns:
        Path to the first assay.yaml found, or None.
    """
    current = (start or Path.cwd()).resolve()
    if current.is_file():
        current = current.parent
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if current == current.parent:
            return None
        current = current.parent


def load_config(path: Path | None = None) -> EngineConfig:
    """Load EngineConfig from assay.yaml. Returns defaults if not found.

    The ASSAY_LANG environment variable supplies the language when the
    file does not set one.

    Args:
        path: Explicit config file path. If None, uses find_config()
            to locate one.

    Returns:
        Validated EngineConfig instance.

    Raises:
        pydantic.ValidationError: If the file contains invalid settings.
    """
    if path is None:
        path = find_config()

    raw: Any = {}
    if path is not None and path.exists():
        import yaml

        loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
        if loaded is not None:
            raw = loaded

    env_language = os.environ.get(LANGUAGE_ENV_VAR)
    if isinstance(raw, dict) and "language" not in raw and env_language:
        raw = {**raw, "language": env_language.lower()}

    return EngineConfig.model_validate(raw)
