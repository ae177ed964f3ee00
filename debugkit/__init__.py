"""Runtime debug instrumentation: profiler, console and wireframe debug-draw."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from debugkit.api.context import DebugContext
    from debugkit.runtime.config import DebugToolsConfig


def create_debug_context(*, config: "DebugToolsConfig | None" = None) -> "DebugContext":
    """Create a debug context configured from ``config`` or the environment."""
    from debugkit.api.context import create_debug_context as api_create_debug_context
    from debugkit.runtime.config import load_debug_tools_config

    return api_create_debug_context(config=config or load_debug_tools_config())

__all__ = ["create_debug_context"]
