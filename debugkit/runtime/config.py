"""Debug tools configuration sourced from environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from debugkit.api.profiler import DisplayMode

_PREFIX = "DEBUGKIT_"


@dataclass(frozen=True, slots=True)
class ProfilerConfig:
    enabled: bool = True
    max_history: int = 1000
    min_time_ms: float = 0.001
    display_mode: DisplayMode = DisplayMode.SIMPLE


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    max_log_entries: int = 1000
    log_lifetime_s: float = 10.0
    max_history_size: int = 100
    expire_while_hidden: bool = False
    mirror_to_logging: bool = True


@dataclass(frozen=True, slots=True)
class WireframeConfig:
    enabled: bool = False
    line_width: float = 1.0
    auto_clear: bool = False


@dataclass(frozen=True, slots=True)
class DebugToolsConfig:
    """Immutable tunables applied by the debug context at initialization."""

    profiler: ProfilerConfig = ProfilerConfig()
    console: ConsoleConfig = ConsoleConfig()
    wireframe: WireframeConfig = WireframeConfig()
    log_level: str = "INFO"


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _int(
    name: str,
    default: int,
    *,
    minimum: int | None = None,
    env: Mapping[str, str] | None = None,
) -> int:
    raw = _raw(name, env=env)
    if raw is None:
        value = int(default)
    else:
        try:
            value = int(raw.strip())
        except ValueError:
            value = int(default)
    if minimum is None:
        return value
    return max(int(minimum), value)


def _float(
    name: str,
    default: float,
    *,
    minimum: float | None = None,
    env: Mapping[str, str] | None = None,
) -> float:
    raw = _raw(name, env=env)
    if raw is None:
        value = float(default)
    else:
        try:
            value = float(raw.strip())
        except ValueError:
            value = float(default)
    if minimum is None:
        return value
    return max(float(minimum), value)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def _display_mode(
    name: str, default: DisplayMode, *, env: Mapping[str, str] | None = None
) -> DisplayMode:
    raw = _text(name, default.name, env=env)
    try:
        return DisplayMode.parse(raw)
    except ValueError:
        return default


def resolve_log_level_name(
    default: str = "INFO", *, env: Mapping[str, str] | None = None
) -> str:
    """Resolve log level with the package-prefixed override first."""
    value = _raw(f"{_PREFIX}LOG_LEVEL", env=env)
    if value is None:
        value = _raw("LOG_LEVEL", env=env)
    if value is None or not value.strip():
        value = default
    return value.strip().upper()


def load_debug_tools_config(env: Mapping[str, str] | None = None) -> DebugToolsConfig:
    """Load immutable debug tools configuration from env vars."""
    defaults = DebugToolsConfig()
    profiler = ProfilerConfig(
        enabled=_flag(f"{_PREFIX}PROFILER_ENABLED", defaults.profiler.enabled, env=env),
        max_history=_int(
            f"{_PREFIX}PROFILER_MAX_HISTORY", defaults.profiler.max_history, minimum=1, env=env
        ),
        min_time_ms=_float(
            f"{_PREFIX}PROFILER_MIN_TIME_MS", defaults.profiler.min_time_ms, minimum=0.0, env=env
        ),
        display_mode=_display_mode(
            f"{_PREFIX}PROFILER_DISPLAY_MODE", defaults.profiler.display_mode, env=env
        ),
    )
    console = ConsoleConfig(
        max_log_entries=_int(
            f"{_PREFIX}CONSOLE_MAX_LOG_ENTRIES",
            defaults.console.max_log_entries,
            minimum=1,
            env=env,
        ),
        log_lifetime_s=_float(
            f"{_PREFIX}CONSOLE_LOG_LIFETIME_S",
            defaults.console.log_lifetime_s,
            minimum=0.0,
            env=env,
        ),
        max_history_size=_int(
            f"{_PREFIX}CONSOLE_MAX_HISTORY", defaults.console.max_history_size, minimum=1, env=env
        ),
        expire_while_hidden=_flag(
            f"{_PREFIX}CONSOLE_EXPIRE_WHILE_HIDDEN", defaults.console.expire_while_hidden, env=env
        ),
        mirror_to_logging=_flag(
            f"{_PREFIX}CONSOLE_MIRROR_LOGGING", defaults.console.mirror_to_logging, env=env
        ),
    )
    wireframe = WireframeConfig(
        enabled=_flag(f"{_PREFIX}WIREFRAME_ENABLED", defaults.wireframe.enabled, env=env),
        line_width=_float(
            f"{_PREFIX}WIREFRAME_LINE_WIDTH", defaults.wireframe.line_width, minimum=0.0, env=env
        ),
        auto_clear=_flag(f"{_PREFIX}WIREFRAME_AUTO_CLEAR", defaults.wireframe.auto_clear, env=env),
    )
    return DebugToolsConfig(
        profiler=profiler,
        console=console,
        wireframe=wireframe,
        log_level=resolve_log_level_name(defaults.log_level, env=env),
    )
