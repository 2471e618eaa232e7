"""Help arguments and expectation descriptions.

A help argument is a structured piece of "what was expected": a type
name, a list of alternative type names, an exact message, or the
human-readable text of a message predicate. describe() styles each
argument according to its kind and renders them into one localized
sentence.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from assay.i18n.catalog import Renderer
    from assay.style import Style


def _require_text(value: object, what: str) -> str:
    if value is None:
        raise TypeError(f"{what} cannot be None")
    if not isinstance(value, str):
        raise TypeError(f"{what} must be a string, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class TypeName:
    """A single exception type name, e.g. "ValueError"."""

    name: str

    def __post_init__(self) -> None:
        _require_text(self.name, "name")

    def format(self, renderer: Renderer, style: Style) -> str:
        return style.green(self.name)


@dataclass(frozen=True)
class TypeNameList:
    """Alternative exception type names joined with the localized "or"."""

    names: tuple[str, ...]

    def __init__(self, names: Iterable[str]) -> None:
        if names is None:
            raise TypeError("names cannot be None")
        names = tuple(names)
        if not names:
            raise ValueError("names cannot be empty")
        for name in names:
            if not _require_text(name, "type name"):
                raise ValueError("names cannot contain empty entries")
        object.__setattr__(self, "names", names)

    def format(self, renderer: Renderer, style: Style) -> str:
        connector = renderer.render("connector.or")
        return connector.join(style.green(name) for name in self.names)


@dataclass(frozen=True)
class ExactMessage:
    """An exact exception message; rendered quoted."""

    message: str

    def __post_init__(self) -> None:
        _require_text(self.message, "message")

    def format(self, renderer: Renderer, style: Style) -> str:
        return style.green(f'"{self.message}"')


@dataclass(frozen=True)
class PredicateHelp:
    """Human-readable text describing a message predicate."""

    text: str

    def __post_init__(self) -> None:
        _require_text(self.text, "text")

    def format(self, renderer: Renderer, style: Style) -> str:
        return style.green(self.text)


HelpArg = Union[TypeName, TypeNameList, ExactMessage, PredicateHelp]


def type_arg(names: Sequence[str]) -> HelpArg:
    """Return TypeName for one name, TypeNameList for several."""
    if len(names) == 1:
        return TypeName(names[0])
    return TypeNameList(names)


def describe(key: str, args: Sequence[HelpArg], renderer: Renderer, style: Style) -> str:
    """Render the template *key* with every help argument styled."""
    return renderer.render(key, *(arg.format(renderer, style) for arg in args))
