from __future__ import annotations

import logging

from debugkit.api.console import LogLevel
from debugkit.api.profiler import DisplayMode
from debugkit.diagnostics.json_codec import loads
from debugkit.runtime.commands import DEBUG_COMMAND_NAMES, DebugCommands
from debugkit.runtime.console import RuntimeConsole
from debugkit.runtime.profiler import CSV_HEADER, RuntimeProfiler
from debugkit.runtime.wireframe import RuntimeWireframe
from tests.debugkit.conftest import ManualClock, fixed_timestamp


def _services() -> tuple[RuntimeConsole, RuntimeProfiler, RuntimeWireframe, ManualClock]:
    clock = ManualClock()
    console = RuntimeConsole(timestamp_source=fixed_timestamp, mirror_to_logging=False)
    profiler = RuntimeProfiler(time_source=clock)
    wireframe = RuntimeWireframe()
    console.initialize()
    profiler.initialize()
    wireframe.initialize()
    DebugCommands(console, profiler, wireframe).install()
    return console, profiler, wireframe, clock


def _last(console: RuntimeConsole) -> tuple[LogLevel, str]:
    entry = console.logs[-1]
    return entry.level, entry.message


def test_install_registers_every_command() -> None:
    console, *_ = _services()
    for name in DEBUG_COMMAND_NAMES:
        binding = console.command_binding(name)
        assert binding is not None
        assert binding.builtin is False


def test_install_logs_under_commands_logger(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="debugkit.commands")
    _services()

    records = [record for record in caplog.records if record.name == "debugkit.commands"]
    assert [record.getMessage() for record in records] == [
        f"debug_commands_installed count={len(DEBUG_COMMAND_NAMES)}"
    ]


def test_uninstall_removes_commands() -> None:
    console, profiler, wireframe, _ = _services()
    DebugCommands(console, profiler, wireframe).uninstall()

    assert console.commands() == ["clear", "echo", "help", "quit"]


def test_profile_and_wireframe_toggles() -> None:
    console, profiler, wireframe, _ = _services()

    console.execute_command("profile")
    assert profiler.enabled is False
    assert _last(console) == (LogLevel.INFO, "Profiler disabled")

    console.execute_command("wireframe")
    assert wireframe.enabled is True
    assert _last(console) == (LogLevel.INFO, "Wireframe enabled")


def test_profiler_mode_switches_and_validates() -> None:
    console, profiler, _, _ = _services()

    console.execute_command("profiler_mode detailed")
    assert profiler.display_mode is DisplayMode.DETAILED
    assert _last(console) == (LogLevel.INFO, "Profiler mode: detailed")

    console.execute_command("profiler_mode sparkly")
    assert _last(console) == (LogLevel.WARNING, "Unknown profiler mode: sparkly")
    assert profiler.display_mode is DisplayMode.DETAILED

    console.execute_command("profiler_mode")
    assert _last(console) == (LogLevel.WARNING, "Usage: profiler_mode <simple|detailed|graph>")


def test_profiler_export_picks_format_by_suffix(tmp_path) -> None:
    console, profiler, _, clock = _services()
    profiler.start_profile("update")
    clock.advance(0.002)
    profiler.end_profile("update")

    csv_path = tmp_path / "profile.csv"
    json_path = tmp_path / "profile.json"
    console.execute_command(f"profiler_export {csv_path}")
    console.execute_command(f"profiler_export {json_path}")

    assert csv_path.read_text(encoding="utf-8").splitlines()[0] == CSV_HEADER
    assert loads(json_path.read_bytes())["profiles"][0]["name"] == "update"
    assert _last(console) == (LogLevel.INFO, f"Profiler data exported to {json_path}")


def test_profiler_export_failure_is_reported(tmp_path) -> None:
    console, *_ = _services()

    console.execute_command(f"profiler_export {tmp_path}")

    assert _last(console) == (LogLevel.ERROR, f"Profiler export failed: {tmp_path}")


def test_profiler_clear_command() -> None:
    console, profiler, _, _ = _services()
    profiler.update_profile_data("update", 3.0)

    console.execute_command("profiler_clear")

    assert profiler.all_profile_data() == {}
    assert _last(console) == (LogLevel.INFO, "Profiler data cleared")


def test_log_filter_command() -> None:
    console, *_ = _services()

    console.execute_command("log_filter debug on")
    assert console.is_log_level_enabled(LogLevel.DEBUG) is True
    assert _last(console) == (LogLevel.INFO, "Log level debug enabled")

    console.execute_command("log_filter INFO off")
    assert console.is_log_level_enabled(LogLevel.INFO) is False

    console.execute_command("log_filter loud on")
    assert _last(console) == (LogLevel.WARNING, "Unknown log level: loud")

    console.execute_command("log_filter debug maybe")
    assert _last(console) == (LogLevel.WARNING, "Expected on or off, got: maybe")

    console.execute_command("log_filter debug")
    assert _last(console) == (LogLevel.WARNING, "Usage: log_filter <level> <on|off>")
