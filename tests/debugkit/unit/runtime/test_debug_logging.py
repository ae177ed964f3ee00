from __future__ import annotations

import logging
import sys

from debugkit.api.logging import DebugLoggingConfig, JsonFormatter
from debugkit.diagnostics.json_codec import loads
from debugkit.runtime.logging import (
    configure_debug_logging,
    setup_debug_logging,
    stop_debug_logging,
)


def test_setup_debug_logging_adds_handler_when_missing(monkeypatch) -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    try:
        root.handlers.clear()
        root.setLevel(logging.NOTSET)
        monkeypatch.setenv("DEBUGKIT_LOG_LEVEL", "DEBUG")
        setup_debug_logging()
        assert root.handlers
        assert root.level == logging.DEBUG
    finally:
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


def test_setup_debug_logging_does_not_override_existing_handlers() -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    sentinel = logging.NullHandler()
    try:
        root.handlers.clear()
        root.addHandler(sentinel)
        root.setLevel(logging.WARNING)
        setup_debug_logging()
        assert root.handlers == [sentinel]
        assert root.level == logging.WARNING
    finally:
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


def test_configure_debug_logging_streams_json_to_file(tmp_path) -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    log_path = tmp_path / "logs" / "debug.jsonl"
    try:
        configure_debug_logging(
            DebugLoggingConfig(level_name="info", file_path=str(log_path), file_format="json")
        )
        logging.getLogger("debugkit.profiler").info(
            "profiler_export_written path=%s", "x.csv", extra={"samples": 3}
        )
        stop_debug_logging()

        payload = loads(log_path.read_text(encoding="utf-8").splitlines()[0])
        assert payload["level"] == "INFO"
        assert payload["logger"] == "debugkit.profiler"
        assert payload["msg"] == "profiler_export_written path=x.csv"
        assert payload["fields"]["samples"] == 3
    finally:
        stop_debug_logging()
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


def test_json_formatter_includes_exception_text() -> None:
    try:
        raise ValueError("broken")
    except ValueError:
        record = logging.getLogger("debugkit.console").makeRecord(
            "debugkit.console",
            logging.ERROR,
            __file__,
            1,
            "console_command_failed name=%s",
            ("boom",),
            sys.exc_info(),
        )

    payload = loads(JsonFormatter().format(record))
    assert payload["msg"] == "console_command_failed name=boom"
    assert "ValueError: broken" in payload["exc_info"]
    assert "fields" not in payload
