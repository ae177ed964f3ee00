"""Command console with a bounded, time-decaying log."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from debugkit.api.console import (
    CommandBinding,
    CommandHandler,
    ConsoleView,
    LogEntry,
    LogLevel,
    default_timestamp,
)
from debugkit.api.render import RenderAPI
from debugkit.ui_runtime.console_overlay import ConsoleOverlay

_LOG = logging.getLogger("debugkit.console")
_MIRROR_LOG = logging.getLogger("debugkit.console.log")

DEFAULT_MAX_LOG_ENTRIES = 1000
DEFAULT_LOG_LIFETIME_S = 10.0
DEFAULT_MAX_HISTORY_SIZE = 100
DEFAULT_CONSOLE_HEIGHT = 300.0

_MIRROR_LEVELS: dict[LogLevel, int] = {
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.DEBUG: logging.DEBUG,
}


class RuntimeConsole:
    """Dispatch text commands and keep a level-filtered scrollback.

    Visibility only gates rendering and, unless ``expire_while_hidden`` is
    set, log aging. Commands run and entries are stored in either state.
    """

    def __init__(
        self,
        *,
        timestamp_source: Callable[[], str] | None = None,
        overlay: ConsoleOverlay | None = None,
        mirror_to_logging: bool = True,
        expire_while_hidden: bool = False,
    ) -> None:
        self._timestamp_source = timestamp_source or default_timestamp
        self._overlay = overlay or ConsoleOverlay()
        self.mirror_to_logging = bool(mirror_to_logging)
        self.expire_while_hidden = bool(expire_while_hidden)
        self._initialized = False
        self._visible = False
        self._quit_requested = False
        self._current_input = ""
        self._logs: list[LogEntry] = []
        self._history: list[str] = []
        self._history_index = -1
        self._commands: dict[str, CommandBinding] = {}
        self._filters: dict[LogLevel, bool] = {}
        self._max_log_entries = DEFAULT_MAX_LOG_ENTRIES
        self._log_lifetime = DEFAULT_LOG_LIFETIME_S
        self._max_history_size = DEFAULT_MAX_HISTORY_SIZE
        self._console_height = DEFAULT_CONSOLE_HEIGHT

    def initialize(self) -> bool:
        if self._initialized:
            return True
        self._visible = False
        self._initialized = True
        self._quit_requested = False
        self._current_input = ""
        self._history_index = -1
        self._max_log_entries = DEFAULT_MAX_LOG_ENTRIES
        self._log_lifetime = DEFAULT_LOG_LIFETIME_S
        self._max_history_size = DEFAULT_MAX_HISTORY_SIZE
        self._console_height = DEFAULT_CONSOLE_HEIGHT
        self._filters = {
            LogLevel.INFO: True,
            LogLevel.WARNING: True,
            LogLevel.ERROR: True,
            LogLevel.DEBUG: False,
        }
        self._register_builtin_commands()
        _LOG.debug("console_initialized commands=%d", len(self._commands))
        return True

    def shutdown(self) -> None:
        self._logs.clear()
        self._history.clear()
        self._history_index = -1
        self._commands.clear()
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def visible(self) -> bool:
        return self._visible

    @property
    def quit_requested(self) -> bool:
        return self._quit_requested

    def toggle(self) -> None:
        self._visible = not self._visible

    def show(self) -> None:
        self._visible = True

    def hide(self) -> None:
        self._visible = False

    @property
    def max_log_entries(self) -> int:
        return self._max_log_entries

    @max_log_entries.setter
    def max_log_entries(self, value: int) -> None:
        self._max_log_entries = max(1, int(value))
        self._trim_logs()

    @property
    def log_lifetime(self) -> float:
        return self._log_lifetime

    @log_lifetime.setter
    def log_lifetime(self, value: float) -> None:
        self._log_lifetime = float(value)

    @property
    def max_history_size(self) -> int:
        return self._max_history_size

    @max_history_size.setter
    def max_history_size(self, value: int) -> None:
        self._max_history_size = max(1, int(value))
        overflow = len(self._history) - self._max_history_size
        if overflow > 0:
            del self._history[:overflow]
            self._history_index = len(self._history)

    @property
    def console_height(self) -> float:
        return self._console_height

    @console_height.setter
    def console_height(self, value: float) -> None:
        self._console_height = max(0.0, float(value))

    def log(self, level: LogLevel, message: str) -> None:
        if not self._initialized:
            return
        self._logs.append(
            LogEntry(
                level=level,
                message=message,
                timestamp=self._timestamp_source(),
                remaining_lifetime=self._log_lifetime,
            )
        )
        self._trim_logs()
        if self.mirror_to_logging:
            _MIRROR_LOG.log(_MIRROR_LEVELS[level], "%s", message)

    def log_info(self, message: str) -> None:
        self.log(LogLevel.INFO, message)

    def log_warning(self, message: str) -> None:
        self.log(LogLevel.WARNING, message)

    def log_error(self, message: str) -> None:
        self.log(LogLevel.ERROR, message)

    def log_debug(self, message: str) -> None:
        self.log(LogLevel.DEBUG, message)

    @property
    def logs(self) -> tuple[LogEntry, ...]:
        return tuple(self._logs)

    def visible_logs(self) -> tuple[LogEntry, ...]:
        return tuple(entry for entry in self._logs if self.is_log_level_enabled(entry.level))

    def clear_logs(self) -> None:
        self._logs.clear()

    def set_log_filter(self, level: LogLevel, enabled: bool) -> None:
        self._filters[level] = bool(enabled)

    def is_log_level_enabled(self, level: LogLevel) -> bool:
        return self._filters.get(level, False)

    def register_command(self, name: str, handler: CommandHandler) -> None:
        self._commands[name] = CommandBinding(name=name, handler=handler, builtin=False)

    def unregister_command(self, name: str) -> None:
        self._commands.pop(name, None)

    def commands(self) -> list[str]:
        return sorted(self._commands)

    def command_binding(self, name: str) -> CommandBinding | None:
        return self._commands.get(name)

    def execute_command(self, raw_line: str) -> None:
        if not raw_line or not raw_line.strip():
            return
        self.add_to_history(raw_line)
        tokens = raw_line.split()
        name, args = tokens[0], tokens[1:]
        binding = self._commands.get(name)
        if binding is None:
            self.log_error(f"Unknown command: {name}")
            return
        try:
            binding.handler(args)
        except Exception as exc:  # pylint: disable=broad-exception-caught
            _LOG.exception("console_command_failed name=%s", name)
            self.log_error(f"Command '{name}' failed: {exc}")

    def process_input(self, text: str) -> None:
        self._current_input = text

    @property
    def current_input(self) -> str:
        return self._current_input

    def add_to_history(self, command: str) -> None:
        if not command:
            return
        if self._history and self._history[-1] == command:
            return
        self._history.append(command)
        overflow = len(self._history) - self._max_history_size
        if overflow > 0:
            del self._history[:overflow]
        self._history_index = len(self._history)

    @property
    def history(self) -> tuple[str, ...]:
        return tuple(self._history)

    @property
    def history_size(self) -> int:
        return len(self._history)

    def history_entry(self, index: int) -> str:
        if index < 0 or index >= len(self._history):
            return ""
        return self._history[index]

    def history_previous(self) -> str:
        """Step the recall cursor back and return that entry."""
        if not self._history:
            return ""
        self._history_index = max(0, self._history_index - 1)
        return self._history[self._history_index]

    def history_next(self) -> str:
        """Step the recall cursor forward; past the newest entry yields ''."""
        if not self._history:
            return ""
        self._history_index = min(len(self._history), self._history_index + 1)
        return self.history_entry(self._history_index)

    def clear_history(self) -> None:
        self._history.clear()
        self._history_index = -1

    def get_command_suggestions(self, partial: str) -> list[str]:
        return [name for name in sorted(self._commands) if name.startswith(partial)]

    def complete_command(self, partial: str) -> str:
        suggestions = self.get_command_suggestions(partial)
        if len(suggestions) == 1:
            return suggestions[0]
        return partial

    def update(self, delta_seconds: float) -> None:
        if not self._initialized:
            return
        if not self._visible and not self.expire_while_hidden:
            return
        for entry in self._logs:
            entry.remaining_lifetime -= delta_seconds
        self._logs = [entry for entry in self._logs if entry.remaining_lifetime > 0.0]

    def view(self) -> ConsoleView:
        return ConsoleView(
            entries=self.visible_logs(),
            current_input=self._current_input,
            height=self._console_height,
        )

    def render(self, renderer: RenderAPI | None) -> None:
        if not self._visible or not self._initialized or renderer is None:
            return
        self._overlay.draw(renderer, self.view())

    def _trim_logs(self) -> None:
        overflow = len(self._logs) - self._max_log_entries
        if overflow > 0:
            del self._logs[:overflow]

    def _register_builtin_commands(self) -> None:
        builtins: dict[str, CommandHandler] = {
            "help": self._cmd_help,
            "clear": self._cmd_clear,
            "echo": self._cmd_echo,
            "quit": self._cmd_quit,
        }
        for name, handler in builtins.items():
            self._commands[name] = CommandBinding(name=name, handler=handler, builtin=True)

    def _cmd_help(self, args: Sequence[str]) -> None:
        _ = args
        self.log_info("Available commands:")
        for name in self.commands():
            self.log_info(f"  {name}")

    def _cmd_clear(self, args: Sequence[str]) -> None:
        _ = args
        self.clear_logs()
        self.log_info("Console cleared")

    def _cmd_echo(self, args: Sequence[str]) -> None:
        self.log_info(" ".join(args))

    def _cmd_quit(self, args: Sequence[str]) -> None:
        _ = args
        self.log_info("Exiting...")
        self._quit_requested = True
