"""Debug tools runtime modules."""

from debugkit.runtime.commands import DebugCommands
from debugkit.runtime.config import DebugToolsConfig, load_debug_tools_config
from debugkit.runtime.console import RuntimeConsole
from debugkit.runtime.context import RuntimeDebugContext
from debugkit.runtime.logging import configure_debug_logging, setup_debug_logging
from debugkit.runtime.profiler import RuntimeProfiler, ScopedSpan
from debugkit.runtime.time import FrameClock, TimeContext
from debugkit.runtime.wireframe import RuntimeWireframe

__all__ = [
    "DebugCommands",
    "DebugToolsConfig",
    "FrameClock",
    "RuntimeConsole",
    "RuntimeDebugContext",
    "RuntimeProfiler",
    "RuntimeWireframe",
    "ScopedSpan",
    "TimeContext",
    "configure_debug_logging",
    "load_debug_tools_config",
    "setup_debug_logging",
]
