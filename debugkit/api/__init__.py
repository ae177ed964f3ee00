"""Public debug tools API contracts."""

from debugkit.api.console import (
    CommandBinding,
    CommandHandler,
    Console,
    ConsoleView,
    LogEntry,
    LogLevel,
    create_console,
)
from debugkit.api.context import DebugContext, create_debug_context
from debugkit.api.logging import DebugLoggingConfig, JsonFormatter
from debugkit.api.profiler import (
    DisplayMode,
    Profiler,
    ProfilerSnapshot,
    ProfileSample,
    create_profiler,
)
from debugkit.api.render import WHITE, Color, RenderAPI, Vec3, rgba_to_hex
from debugkit.api.wireframe import (
    ColliderKind,
    ColliderLike,
    SceneObjectLike,
    Wireframe,
    WireframeLine,
    create_wireframe,
)

__all__ = [
    "Color",
    "ColliderKind",
    "ColliderLike",
    "CommandBinding",
    "CommandHandler",
    "Console",
    "ConsoleView",
    "DebugContext",
    "DebugLoggingConfig",
    "DisplayMode",
    "JsonFormatter",
    "LogEntry",
    "LogLevel",
    "ProfileSample",
    "Profiler",
    "ProfilerSnapshot",
    "RenderAPI",
    "SceneObjectLike",
    "Vec3",
    "WHITE",
    "Wireframe",
    "WireframeLine",
    "create_console",
    "create_debug_context",
    "create_profiler",
    "create_wireframe",
    "rgba_to_hex",
]
