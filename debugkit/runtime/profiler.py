"""Named-span profiler with running statistics and frame timing."""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from dataclasses import replace
from pathlib import Path
from time import perf_counter
from types import TracebackType
from typing import Any

from debugkit.api.profiler import DisplayMode, ProfilerSnapshot, ProfileSample
from debugkit.api.render import RenderAPI
from debugkit.diagnostics.json_codec import dumps_text
from debugkit.diagnostics.ring_buffer import RingBuffer
from debugkit.runtime.errors import EXPORT_ERRORS, log_recoverable
from debugkit.ui_runtime.profiler_overlay import ProfilerOverlay

_LOG = logging.getLogger("debugkit.profiler")

DEFAULT_MAX_HISTORY = 1000
DEFAULT_MIN_TIME_MS = 0.001
FRAME_SPAN_NAME = "Frame"
CSV_HEADER = "Name,Total Time,Average Time,Min Time,Max Time,Call Count,Last Time"


class ScopedSpan:
    """Context manager that closes its span on every exit path."""

    __slots__ = ("_profiler", "_name")

    def __init__(self, profiler: RuntimeProfiler, name: str) -> None:
        self._profiler = profiler
        self._name = name

    def __enter__(self) -> ScopedSpan:
        self._profiler.start_profile(self._name)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._profiler.end_profile(self._name)


class _NoopSpan:
    """Shared scope handed out while profiling is off."""

    __slots__ = ()

    def __enter__(self) -> _NoopSpan:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        return None


_NOOP_SPAN = _NoopSpan()


class RuntimeProfiler:
    """Aggregate wall-clock span durations per name.

    Spans are keyed by name only, so opening a span that is already open
    restarts it. Durations below ``min_time`` milliseconds are dropped
    entirely rather than clamped.
    """

    def __init__(
        self,
        *,
        time_source: Callable[[], float] | None = None,
        overlay: ProfilerOverlay | None = None,
    ) -> None:
        self._time_source = time_source or perf_counter
        self._overlay = overlay or ProfilerOverlay()
        self._enabled = False
        self._initialized = False
        self._display_mode = DisplayMode.SIMPLE
        self._min_time = DEFAULT_MIN_TIME_MS
        self._profiles: dict[str, ProfileSample] = {}
        self._active: dict[str, float] = {}
        self._frame_times = RingBuffer[float](capacity=DEFAULT_MAX_HISTORY)
        self._total_frame_time = 0.0
        self._frame_count = 0

    def initialize(self) -> bool:
        if self._initialized:
            return True
        self._profiles.clear()
        self._active.clear()
        self._frame_times = RingBuffer[float](capacity=DEFAULT_MAX_HISTORY)
        self._total_frame_time = 0.0
        self._frame_count = 0
        self._enabled = True
        self._initialized = True
        self._display_mode = DisplayMode.SIMPLE
        self._min_time = DEFAULT_MIN_TIME_MS
        _LOG.debug("profiler_initialized max_history=%d", DEFAULT_MAX_HISTORY)
        return True

    def shutdown(self) -> None:
        self._profiles.clear()
        self._active.clear()
        self._frame_times.clear()
        self._total_frame_time = 0.0
        self._frame_count = 0
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self._enabled = bool(value)
        if not self._enabled:
            # Spans open across a disabled period would record its length.
            self._active.clear()

    @property
    def display_mode(self) -> DisplayMode:
        return self._display_mode

    @display_mode.setter
    def display_mode(self, value: DisplayMode | int | str) -> None:
        self._display_mode = DisplayMode.parse(value)

    @property
    def max_history(self) -> int:
        return self._frame_times.capacity

    @max_history.setter
    def max_history(self, value: int) -> None:
        self._frame_times.resize(max(1, int(value)))

    @property
    def min_time(self) -> float:
        return self._min_time

    @min_time.setter
    def min_time(self, value: float) -> None:
        self._min_time = float(value)

    def start_profile(self, name: str) -> None:
        if not self._enabled or not self._initialized:
            return
        self._active[name] = self._time_source()

    def end_profile(self, name: str) -> None:
        if not self._enabled or not self._initialized:
            return
        started = self._active.pop(name, None)
        if started is None:
            return
        elapsed_ms = (self._time_source() - started) * 1000.0
        self.update_profile_data(name, elapsed_ms)

    def scope(self, name: str) -> ScopedSpan | _NoopSpan:
        if not self._enabled or not self._initialized:
            return _NOOP_SPAN
        return ScopedSpan(self, name)

    def profiled(
        self, name: str | None = None
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
            span_name = name or fn.__qualname__

            @functools.wraps(fn)
            def wrapper(*args: Any, **kwargs: Any) -> Any:
                with self.scope(span_name):
                    return fn(*args, **kwargs)

            return wrapper

        return decorator

    def update_profile_data(self, name: str, elapsed_ms: float) -> None:
        if elapsed_ms < self._min_time:
            return
        sample = self._profiles.get(name)
        if sample is None:
            sample = ProfileSample(name=name)
            self._profiles[name] = sample
        sample.total_time += elapsed_ms
        sample.call_count += 1
        sample.last_time = elapsed_ms
        if sample.call_count == 1:
            sample.min_time = elapsed_ms
            sample.max_time = elapsed_ms
        else:
            sample.min_time = min(sample.min_time, elapsed_ms)
            sample.max_time = max(sample.max_time, elapsed_ms)

    def update(self, delta_seconds: float) -> None:
        if not self._enabled or not self._initialized:
            return
        frame_ms = float(delta_seconds) * 1000.0
        self._frame_times.append(frame_ms)
        self._total_frame_time += frame_ms
        self._frame_count += 1

    def on_frame_start(self) -> None:
        self.start_profile(FRAME_SPAN_NAME)

    def on_frame_end(self) -> None:
        self.end_profile(FRAME_SPAN_NAME)

    def render(self, renderer: RenderAPI | None) -> None:
        if not self._enabled or not self._initialized or renderer is None:
            return
        self._overlay.draw(renderer, self.snapshot(), self._display_mode)

    def get_profile_data(self, name: str) -> ProfileSample | None:
        return self._profiles.get(name)

    def all_profile_data(self) -> dict[str, ProfileSample]:
        return dict(self._profiles)

    def active_spans(self) -> tuple[str, ...]:
        return tuple(self._active)

    def total_time(self) -> float:
        return sum(sample.total_time for sample in self._profiles.values())

    def average_fps(self) -> float:
        frame_times = self._frame_times.snapshot()
        if not frame_times:
            return 0.0
        total_ms = sum(frame_times)
        if total_ms <= 0.0:
            return 0.0
        return len(frame_times) / (total_ms / 1000.0)

    @property
    def frame_count(self) -> int:
        return self._frame_count

    @property
    def total_frame_time(self) -> float:
        return self._total_frame_time

    def frame_times(self) -> list[float]:
        return self._frame_times.snapshot()

    def clear(self) -> None:
        self._profiles.clear()
        self._active.clear()
        self._frame_times.clear()
        self._total_frame_time = 0.0
        self._frame_count = 0

    def reset_profile(self, name: str) -> None:
        self._profiles.pop(name, None)

    def snapshot(self) -> ProfilerSnapshot:
        return ProfilerSnapshot(
            frame_count=self._frame_count,
            average_fps=self.average_fps(),
            total_time=self.total_time(),
            samples=tuple(replace(sample) for sample in self._sorted_samples()),
            frame_times_ms=tuple(self._frame_times.snapshot()),
        )

    def export_to_csv(self, path: str | Path) -> Path | None:
        out_path = Path(path)
        rows = [CSV_HEADER]
        for sample in self._sorted_samples():
            rows.append(
                f"{sample.name},{sample.total_time},{sample.average_time},"
                f"{sample.min_time},{sample.max_time},{sample.call_count},"
                f"{sample.last_time}"
            )
        try:
            out_path.parent.mkdir(parents=True, exist_ok=True)
            out_path.write_text("\n".join(rows) + "\n", encoding="utf-8")
        except EXPORT_ERRORS:
            log_recoverable(_LOG, "profiler_export_failed path=%s", out_path, level=logging.WARNING)
            return None
        _LOG.info("profiler_export_written path=%s samples=%d", out_path, len(rows) - 1)
        return out_path

    def export_to_json(self, path: str | Path) -> Path | None:
        out_path = Path(path)
        profiles = [
            {
                "name": sample.name,
                "totalTime": sample.total_time,
                "averageTime": sample.average_time,
                "minTime": sample.min_time,
                "maxTime": sample.max_time,
                "callCount": sample.call_count,
                "lastTime": sample.last_time,
            }
            for sample in self._sorted_samples()
        ]
        payload = {
            "profiles": profiles,
            "frameCount": self._frame_count,
            "averageFPS": self.average_fps(),
        }
        try:
            text = dumps_text(payload, pretty=True, newline=True)
            out_path.parent.mkdir(parents=True, exist_ok=True)
            out_path.write_text(text, encoding="utf-8")
        except EXPORT_ERRORS:
            log_recoverable(_LOG, "profiler_export_failed path=%s", out_path, level=logging.WARNING)
            return None
        _LOG.info("profiler_export_written path=%s samples=%d", out_path, len(profiles))
        return out_path

    def _sorted_samples(self) -> list[ProfileSample]:
        return [self._profiles[name] for name in sorted(self._profiles)]
