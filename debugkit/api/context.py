"""Public debug context API."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING

from debugkit.api.render import RenderAPI

if TYPE_CHECKING:
    from debugkit.api.console import Console
    from debugkit.api.profiler import Profiler
    from debugkit.api.wireframe import Wireframe
    from debugkit.runtime.config import DebugToolsConfig


class DebugContext(ABC):
    """Owner of one profiler, console and wireframe, driven by the host loop."""

    render_api: RenderAPI | None

    @property
    @abstractmethod
    def profiler(self) -> Profiler:
        """Profiler owned by this context."""

    @property
    @abstractmethod
    def console(self) -> Console:
        """Console owned by this context."""

    @property
    @abstractmethod
    def wireframe(self) -> Wireframe:
        """Wireframe owned by this context."""

    @abstractmethod
    def initialize(self) -> bool:
        """Initialize every service and apply configuration."""

    @abstractmethod
    def begin_frame(self) -> None:
        """Open the per-frame profiler span."""

    @abstractmethod
    def end_frame(self, delta_seconds: float | None = None) -> float:
        """Close the frame span and update every service; return the delta used."""

    @abstractmethod
    def render(self, renderer: RenderAPI | None = None) -> None:
        """Render wireframe, profiler and console in that order."""

    @abstractmethod
    def shutdown(self) -> None:
        """Tear down every service in reverse order."""


def create_debug_context(
    *,
    config: DebugToolsConfig | None = None,
    render_api: RenderAPI | None = None,
    time_source: Callable[[], float] | None = None,
    timestamp_source: Callable[[], str] | None = None,
) -> DebugContext:
    """Create default debug context implementation."""
    from debugkit.runtime.context import RuntimeDebugContext

    return RuntimeDebugContext(
        config=config,
        render_api=render_api,
        time_source=time_source,
        timestamp_source=timestamp_source,
    )
