"""Message catalogs and the template renderer.

Each supported language has one YAML catalog bundled with the package.
Catalogs are loaded once, frozen into read-only mappings, and injected
into a Renderer; nothing mutates them at runtime.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from importlib import resources
from types import MappingProxyType
from typing import Any, Mapping

import yaml

from assay.models.config import Language

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = Language.en


@lru_cache(maxsize=None)
def load_catalog(language: Language | str) -> Mapping[str, str]:
    """Load the message catalog for *language* as a read-only mapping.

    Unknown languages fall back to the English catalog.

    Args:
        language: A Language member or its string value.

    Returns:
        Immutable key -> template mapping.
    """
    try:
        lang = Language(language)
    except ValueError:
        logger.warning("No catalog for language %r, falling back to English", language)
        lang = DEFAULT_LANGUAGE

    source = resources.files("assay.i18n").joinpath(f"{lang.value}.yaml")
    raw = yaml.safe_load(source.read_text(encoding="utf-8")) or {}
    return MappingProxyType({str(k): str(v) for k, v in raw.items()})


class Renderer:
    """Renders catalog templates with positional arguments.

    Lookup never fails: a missing key renders as the key itself, and
    a template that cannot be filled with the given arguments renders
    as a diagnostic string instead of raising.
    """

    def __init__(
        self,
        language: Language | str = DEFAULT_LANGUAGE,
        catalog: Mapping[str, str] | None = None,
    ) -> None:
        try:
            self.language = Language(language)
        except ValueError:
            self.language = DEFAULT_LANGUAGE
        self._catalog = catalog if catalog is not None else load_catalog(self.language)

    def template(self, key: str) -> str:
        """Return the raw template for *key*, or the key if absent."""
        return self._catalog.get(key, key)

    def render(self, key: str, *args: Any) -> str:
        """Render the template for *key* with positional *args*."""
        pattern = self.template(key)
        if not args:
            return pattern
        try:
            return pattern % args
        except (TypeError, ValueError, KeyError) as exc:
            return (
                f"ERROR: Formatting error for key '{key}' [{self.language.value}]: "
                f"{exc}. Pattern: '{pattern}', Args: {list(args)!r}"
            )

    def __repr__(self) -> str:
        return f"Renderer(language={self.language.value!r})"
