"""Public console API contracts."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Protocol

from debugkit.api.render import RenderAPI

CommandHandler = Callable[[Sequence[str]], None]


class LogLevel(StrEnum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    DEBUG = "debug"

    @classmethod
    def parse(cls, raw: str) -> LogLevel:
        """Resolve a level from its case-insensitive name."""
        value = str(raw).strip().lower()
        if value == "warn":
            return cls.WARNING
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"unknown log level: {raw}") from None


@dataclass(slots=True)
class LogEntry:
    """One console message with its remaining display lifetime in seconds."""

    level: LogLevel
    message: str
    timestamp: str
    remaining_lifetime: float


@dataclass(frozen=True, slots=True)
class CommandBinding:
    """Registered command handler tagged as builtin or user-defined."""

    name: str
    handler: CommandHandler
    builtin: bool = False


@dataclass(frozen=True, slots=True)
class ConsoleView:
    """Read-only console state consumed by the console overlay."""

    entries: tuple[LogEntry, ...]
    current_input: str
    height: float


class Console(Protocol):
    """Command console with a time-decaying log."""

    @property
    def visible(self) -> bool:
        """Whether ``render`` draws anything."""

    def initialize(self) -> bool:
        """Apply defaults and register builtin commands."""

    def shutdown(self) -> None:
        """Drop logs, history and commands."""

    def toggle(self) -> None:
        """Flip visibility."""

    def show(self) -> None:
        """Make the console visible."""

    def hide(self) -> None:
        """Hide the console."""

    def log(self, level: LogLevel, message: str) -> None:
        """Append a log entry."""

    def log_info(self, message: str) -> None:
        """Append an INFO entry."""

    def log_warning(self, message: str) -> None:
        """Append a WARNING entry."""

    def log_error(self, message: str) -> None:
        """Append an ERROR entry."""

    def log_debug(self, message: str) -> None:
        """Append a DEBUG entry."""

    def register_command(self, name: str, handler: CommandHandler) -> None:
        """Bind ``name`` to ``handler``, replacing any previous binding."""

    def unregister_command(self, name: str) -> None:
        """Remove the binding for ``name`` if present."""

    def execute_command(self, raw_line: str) -> None:
        """Parse and dispatch one command line."""

    def update(self, delta_seconds: float) -> None:
        """Age log entries and drop expired ones."""

    def render(self, renderer: RenderAPI | None) -> None:
        """Draw the console panel when visible."""

    def set_log_filter(self, level: LogLevel, enabled: bool) -> None:
        """Enable or disable display of one level."""

    def is_log_level_enabled(self, level: LogLevel) -> bool:
        """Return whether ``level`` is displayed."""

    def get_command_suggestions(self, partial: str) -> list[str]:
        """Return registered command names starting with ``partial``."""

    def complete_command(self, partial: str) -> str:
        """Return the sole suggestion, or ``partial`` unchanged."""


def default_timestamp() -> str:
    """Wall-clock ``HH:MM:SS.mmm`` stamp in local time."""
    now = datetime.now()
    return f"{now:%H:%M:%S}.{now.microsecond // 1000:03d}"


def create_console(*, timestamp_source: Callable[[], str] | None = None) -> Console:
    """Create default console implementation."""
    from debugkit.runtime.console import RuntimeConsole

    return RuntimeConsole(timestamp_source=timestamp_source)
