"""Frame timing primitives for the debug context."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from time import monotonic


@dataclass(frozen=True, slots=True)
class TimeContext:
    """Per-frame timing handed to the debug services."""

    frame_index: int
    delta_seconds: float
    elapsed_seconds: float


class FrameClock:
    """Monotonic frame clock with bounded frame deltas."""

    def __init__(
        self,
        *,
        time_source: Callable[[], float] | None = None,
        max_delta_seconds: float = 0.25,
    ) -> None:
        if max_delta_seconds <= 0.0:
            raise ValueError("max_delta_seconds must be > 0")
        self._time_source = time_source or monotonic
        self._max_delta_seconds = max_delta_seconds
        self._last_seconds: float | None = None
        self._elapsed_seconds = 0.0
        self._frame_index = 0

    @property
    def frame_index(self) -> int:
        return self._frame_index

    def next(self) -> TimeContext:
        """Advance the clock and return the next frame context.

        The first call yields a zero delta; later deltas are clamped to
        ``[0, max_delta_seconds]`` so a stalled host does not flood the
        frame-time history with one huge sample.
        """
        now = self._time_source()
        if self._last_seconds is None:
            delta = 0.0
        else:
            delta = min(max(0.0, now - self._last_seconds), self._max_delta_seconds)
        self._last_seconds = now
        self._elapsed_seconds += delta
        self._frame_index += 1
        return TimeContext(
            frame_index=self._frame_index,
            delta_seconds=delta,
            elapsed_seconds=self._elapsed_seconds,
        )

    def prime(self) -> None:
        """Anchor the next delta at the current time."""
        self._last_seconds = self._time_source()

    def reset(self) -> None:
        self._last_seconds = None
        self._elapsed_seconds = 0.0
        self._frame_index = 0
