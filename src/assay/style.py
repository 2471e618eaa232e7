"""Text styling used when rendering result messages.

PlainStyle leaves text untouched. MarkupStyle wraps text in Rich
markup tags, escaping raw text exactly once so user values such as
exception messages can never inject markup of their own.
"""

from __future__ import annotations

from typing import Protocol

from rich.markup import escape


class Style(Protocol):
    """Coloring operations applied to message fragments."""

    def green(self, text: str) -> str: ...

    def red(self, text: str) -> str: ...

    def blue(self, text: str) -> str: ...

    def bold(self, text: str) -> str: ...

    def underline(self, text: str) -> str: ...

    @property
    def colored(self) -> bool: ...


class PlainStyle:
    """Style that returns every fragment unchanged."""

    colored = False

    def green(self, text: str) -> str:
        return text

    def red(self, text: str) -> str:
        return text

    def blue(self, text: str) -> str:
        return text

    def bold(self, text: str) -> str:
        return text

    def underline(self, text: str) -> str:
        return text


class _Markup(str):
    """A string that already holds Rich markup and must not be re-escaped."""

    __slots__ = ()


class MarkupStyle:
    """Style producing Rich console markup."""

    colored = True

    @staticmethod
    def _wrap(tag: str, text: str) -> str:
        body = text if isinstance(text, _Markup) else escape(str(text))
        return _Markup(f"[{tag}]{body}[/{tag}]")

    def green(self, text: str) -> str:
        return self._wrap("green", text)

    def red(self, text: str) -> str:
        return self._wrap("red", text)

    def blue(self, text: str) -> str:
        return self._wrap("blue", text)

    def bold(self, text: str) -> str:
        return self._wrap("bold", text)

    def underline(self, text: str) -> str:
        return self._wrap("underline", text)


def style_for(color: bool) -> Style:
    """Return the style matching the color flag."""
    return MarkupStyle() if color else PlainStyle()
