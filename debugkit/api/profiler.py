"""Public profiler API contracts."""

from __future__ import annotations

from collections.abc import Callable
from contextlib import AbstractContextManager
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Any, Protocol

from debugkit.api.render import RenderAPI


class DisplayMode(IntEnum):
    """Profiler overlay views. Selecting one never alters collected data."""

    SIMPLE = 0
    DETAILED = 1
    GRAPH = 2

    @classmethod
    def parse(cls, raw: str | int) -> DisplayMode:
        """Resolve a mode from its name or numeric value."""
        if isinstance(raw, int):
            return cls(raw)
        value = str(raw).strip()
        if value.isdigit():
            return cls(int(value))
        try:
            return cls[value.upper()]
        except KeyError:
            raise ValueError(f"unknown display mode: {raw}") from None


@dataclass(slots=True)
class ProfileSample:
    """Running statistics for one span name. Times are milliseconds."""

    name: str
    total_time: float = 0.0
    call_count: int = 0
    min_time: float = 0.0
    max_time: float = 0.0
    last_time: float = 0.0

    @property
    def average_time(self) -> float:
        if self.call_count <= 0:
            return 0.0
        return self.total_time / self.call_count


@dataclass(frozen=True, slots=True)
class ProfilerSnapshot:
    """Read-only profiler view consumed by overlays."""

    frame_count: int
    average_fps: float
    total_time: float
    samples: tuple[ProfileSample, ...]
    frame_times_ms: tuple[float, ...]


class Profiler(Protocol):
    """Named-span profiler contract."""

    enabled: bool
    display_mode: DisplayMode

    def initialize(self) -> bool:
        """Reset state and enable profiling. No-op when already initialized."""

    def shutdown(self) -> None:
        """Drop all collected state."""

    def start_profile(self, name: str) -> None:
        """Open a named span."""

    def end_profile(self, name: str) -> None:
        """Close a named span and aggregate its duration."""

    def scope(self, name: str) -> AbstractContextManager[Any]:
        """Return a context manager timing its body under ``name``."""

    def profiled(
        self, name: str | None = None
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Return a decorator timing each call of the wrapped function."""

    def update(self, delta_seconds: float) -> None:
        """Record one frame duration."""

    def render(self, renderer: RenderAPI | None) -> None:
        """Draw the overlay for the current display mode."""

    def on_frame_start(self) -> None:
        """Open the per-frame span."""

    def on_frame_end(self) -> None:
        """Close the per-frame span."""

    def average_fps(self) -> float:
        """Average FPS over the frame-time history."""

    def get_profile_data(self, name: str) -> ProfileSample | None:
        """Return aggregated statistics for ``name``."""

    def clear(self) -> None:
        """Reset samples, open spans and frame history."""

    def reset_profile(self, name: str) -> None:
        """Remove one named sample."""

    def export_to_csv(self, path: str | Path) -> Path | None:
        """Write samples as CSV. Return None when the file cannot be written."""

    def export_to_json(self, path: str | Path) -> Path | None:
        """Write samples as JSON. Return None when the file cannot be written."""

    def snapshot(self) -> ProfilerSnapshot:
        """Return a read-only view of the current statistics."""


def create_profiler(*, time_source: Callable[[], float] | None = None) -> Profiler:
    """Create default profiler implementation."""
    from debugkit.runtime.profiler import RuntimeProfiler

    return RuntimeProfiler(time_source=time_source)
