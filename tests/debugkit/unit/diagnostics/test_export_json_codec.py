from __future__ import annotations

from pathlib import PurePosixPath

from debugkit.diagnostics.json_codec import dumps_bytes, dumps_text, loads


def test_dumps_text_is_compact_by_default() -> None:
    assert dumps_text({"a": 1, "b": [1.5]}) == '{"a":1,"b":[1.5]}'


def test_dumps_bytes_pretty_sorted_with_newline() -> None:
    raw = dumps_bytes({"b": 2, "a": 1}, pretty=True, sort_keys=True, newline=True)

    assert raw.endswith(b"\n")
    assert raw.index(b'"a"') < raw.index(b'"b"')
    assert b"\n  " in raw


def test_loads_round_trips_floats_exactly() -> None:
    value = 0.1 + 0.2
    assert loads(dumps_text({"x": value}))["x"] == value


def test_default_hook_serializes_unknown_values() -> None:
    assert dumps_text({"path": PurePosixPath("/tmp/x")}, default=str) == '{"path":"/tmp/x"}'
