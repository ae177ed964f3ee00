from __future__ import annotations

import pytest

from debugkit.api import (
    WHITE,
    ColliderKind,
    DisplayMode,
    LogLevel,
    ProfileSample,
    WireframeLine,
    create_console,
    create_debug_context,
    create_profiler,
    create_wireframe,
    rgba_to_hex,
)
from debugkit.runtime import RuntimeConsole, RuntimeDebugContext, RuntimeProfiler, RuntimeWireframe


def test_rgba_to_hex_clamps_and_drops_alpha() -> None:
    assert rgba_to_hex((1.0, 0.0, 0.5, 0.1)) == "#ff0080"
    assert rgba_to_hex((2.0, -1.0, 1.0, 1.0)) == "#ff00ff"


def test_display_mode_parse_accepts_names_and_numbers() -> None:
    assert DisplayMode.parse("graph") is DisplayMode.GRAPH
    assert DisplayMode.parse(" Detailed ") is DisplayMode.DETAILED
    assert DisplayMode.parse("0") is DisplayMode.SIMPLE
    assert DisplayMode.parse(2) is DisplayMode.GRAPH
    with pytest.raises(ValueError):
        DisplayMode.parse("fancy")


def test_log_level_parse_is_case_insensitive() -> None:
    assert LogLevel.parse("DEBUG") is LogLevel.DEBUG
    assert LogLevel.parse("warn") is LogLevel.WARNING
    with pytest.raises(ValueError):
        LogLevel.parse("trace")


def test_profile_sample_average_guards_zero_calls() -> None:
    assert ProfileSample(name="idle").average_time == 0.0
    assert ProfileSample(name="busy", total_time=9.0, call_count=3).average_time == 3.0


def test_wireframe_line_defaults_to_white() -> None:
    line = WireframeLine(start=(0.0, 0.0, 0.0), end=(1.0, 0.0, 0.0))
    assert line.color == WHITE
    assert ColliderKind("circle") is ColliderKind.CIRCLE


def test_factories_return_runtime_implementations() -> None:
    assert isinstance(create_profiler(), RuntimeProfiler)
    assert isinstance(create_console(), RuntimeConsole)
    assert isinstance(create_wireframe(), RuntimeWireframe)
    assert isinstance(create_debug_context(), RuntimeDebugContext)
