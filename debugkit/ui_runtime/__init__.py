"""Debug overlay renderers."""

from debugkit.ui_runtime.console_overlay import ConsoleOverlay
from debugkit.ui_runtime.profiler_overlay import ProfilerOverlay, color_for_time, format_time

__all__ = ["ConsoleOverlay", "ProfilerOverlay", "color_for_time", "format_time"]
