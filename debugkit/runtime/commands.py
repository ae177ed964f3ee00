"""Console commands that drive the profiler and wireframe services."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from debugkit.api.console import LogLevel
from debugkit.api.profiler import DisplayMode
from debugkit.runtime.console import RuntimeConsole
from debugkit.runtime.profiler import RuntimeProfiler
from debugkit.runtime.wireframe import RuntimeWireframe

_LOG = logging.getLogger("debugkit.commands")

_ON_VALUES = frozenset({"1", "on", "true", "yes"})
_OFF_VALUES = frozenset({"0", "off", "false", "no"})

DEBUG_COMMAND_NAMES: tuple[str, ...] = (
    "profile",
    "wireframe",
    "profiler_mode",
    "profiler_export",
    "profiler_clear",
    "log_filter",
)


def _on_off(label: bool) -> str:
    return "enabled" if label else "disabled"


class DebugCommands:
    """Command handlers bound to one console, profiler and wireframe trio."""

    def __init__(
        self,
        console: RuntimeConsole,
        profiler: RuntimeProfiler,
        wireframe: RuntimeWireframe,
    ) -> None:
        self._console = console
        self._profiler = profiler
        self._wireframe = wireframe

    def install(self) -> None:
        """Register every debug command on the console."""
        self._console.register_command("profile", self.toggle_profiler)
        self._console.register_command("wireframe", self.toggle_wireframe)
        self._console.register_command("profiler_mode", self.set_profiler_mode)
        self._console.register_command("profiler_export", self.export_profile)
        self._console.register_command("profiler_clear", self.clear_profile)
        self._console.register_command("log_filter", self.set_log_filter)
        _LOG.debug("debug_commands_installed count=%d", len(DEBUG_COMMAND_NAMES))

    def uninstall(self) -> None:
        for name in DEBUG_COMMAND_NAMES:
            self._console.unregister_command(name)

    def toggle_profiler(self, args: Sequence[str]) -> None:
        _ = args
        self._profiler.enabled = not self._profiler.enabled
        self._console.log_info(f"Profiler {_on_off(self._profiler.enabled)}")

    def toggle_wireframe(self, args: Sequence[str]) -> None:
        _ = args
        self._wireframe.toggle()
        self._console.log_info(f"Wireframe {_on_off(self._wireframe.enabled)}")

    def set_profiler_mode(self, args: Sequence[str]) -> None:
        if len(args) != 1:
            self._console.log_warning("Usage: profiler_mode <simple|detailed|graph>")
            return
        try:
            mode = DisplayMode.parse(args[0])
        except ValueError:
            self._console.log_warning(f"Unknown profiler mode: {args[0]}")
            return
        self._profiler.display_mode = mode
        self._console.log_info(f"Profiler mode: {mode.name.lower()}")

    def export_profile(self, args: Sequence[str]) -> None:
        if len(args) != 1:
            self._console.log_warning("Usage: profiler_export <path>")
            return
        path = Path(args[0])
        if path.suffix.lower() == ".csv":
            written = self._profiler.export_to_csv(path)
        else:
            written = self._profiler.export_to_json(path)
        if written is None:
            self._console.log_error(f"Profiler export failed: {path}")
            return
        self._console.log_info(f"Profiler data exported to {written}")

    def clear_profile(self, args: Sequence[str]) -> None:
        _ = args
        self._profiler.clear()
        self._console.log_info("Profiler data cleared")

    def set_log_filter(self, args: Sequence[str]) -> None:
        if len(args) != 2:
            self._console.log_warning("Usage: log_filter <level> <on|off>")
            return
        raw_level, raw_state = args
        try:
            level = LogLevel.parse(raw_level)
        except ValueError:
            self._console.log_warning(f"Unknown log level: {raw_level}")
            return
        state = raw_state.strip().lower()
        if state in _ON_VALUES:
            enabled = True
        elif state in _OFF_VALUES:
            enabled = False
        else:
            self._console.log_warning(f"Expected on or off, got: {raw_state}")
            return
        self._console.set_log_filter(level, enabled)
        self._console.log_info(f"Log level {level.value} {_on_off(enabled)}")
