"""ExecutionContext: everything a test needs from its surroundings."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from rich.console import Console

from assay.execution.observer import ConsoleObserver, Observer, SilentObserver
from assay.i18n.catalog import Renderer
from assay.models.config import EngineConfig
from assay.style import Style, style_for


@dataclass(frozen=True)
class ExecutionContext:
    """Read-only run context shared by every test in a run.

    Tests never mutate it; a test that overrides the timeout works on
    a derived copy built by with_timeout().
    """

    config: EngineConfig = field(default_factory=EngineConfig)
    renderer: Renderer = field(default_factory=Renderer)
    observer: Observer = field(default_factory=SilentObserver)
    style: Style = field(default_factory=lambda: style_for(False))

    @classmethod
    def from_config(
        cls,
        config: EngineConfig | None = None,
        console: Console | None = None,
    ) -> ExecutionContext:
        """Build a context whose renderer and observer follow *config*."""
        config = config or EngineConfig()
        renderer = Renderer(config.language)
        style = style_for(config.color)
        observer: Observer
        if config.logging:
            observer = ConsoleObserver(renderer, style=style, console=console)
        else:
            observer = SilentObserver()
        return cls(config=config, renderer=renderer, observer=observer, style=style)

    @property
    def timeout(self) -> int:
        return self.config.timeout

    def with_timeout(self, timeout: int) -> ExecutionContext:
        """Return a copy of this context with a different default timeout."""
        if timeout == self.config.timeout:
            return self
        return replace(self, config=self.config.with_timeout(timeout))

    def render(self, key: str, *args: object) -> str:
        """Shortcut for self.renderer.render()."""
        return self.renderer.render(key, *args)
