"""Profiler statistics overlay renderer."""

from __future__ import annotations

from dataclasses import dataclass

from debugkit.api.profiler import DisplayMode, ProfilerSnapshot
from debugkit.api.render import Color, RenderAPI, rgba_to_hex

GREEN: Color = (0.0, 1.0, 0.0, 1.0)
YELLOW: Color = (1.0, 1.0, 0.0, 1.0)
RED: Color = (1.0, 0.0, 0.0, 1.0)
_TEXT_COLOR = "#e5e7eb"


def format_time(time_ms: float) -> str:
    """Format milliseconds, switching to seconds from one second upward."""
    if time_ms < 1000.0:
        return f"{time_ms:.2f}ms"
    return f"{time_ms / 1000.0:.2f}s"


def color_for_time(time_ms: float) -> Color:
    """Traffic-light color for a span duration in milliseconds."""
    if time_ms < 1.0:
        return GREEN
    if time_ms < 5.0:
        return YELLOW
    return RED


@dataclass(frozen=True, slots=True)
class ProfilerOverlay:
    """Render profiler statistics using RenderAPI primitives."""

    key_prefix: str = "debug:profiler"
    x: float = 12.0
    y: float = 12.0
    width: float = 440.0
    line_height: float = 18.0
    font_size: float = 15.0
    graph_height: float = 80.0
    graph_target_ms: float = 16.7
    graph_budget_ms: float = 33.3
    z_bg: float = 5000.0
    z_text: float = 5001.0

    def draw(
        self,
        renderer: RenderAPI,
        snapshot: ProfilerSnapshot,
        mode: DisplayMode = DisplayMode.SIMPLE,
    ) -> None:
        """Draw the overlay view selected by ``mode``."""
        rows = self._rows(snapshot, mode)
        height = 12.0 + len(rows) * self.line_height
        if mode is DisplayMode.GRAPH:
            height += self.graph_height + 8.0
        renderer.add_rect(
            f"{self.key_prefix}:bg",
            self.x,
            self.y,
            self.width,
            height,
            "#111827",
            z=self.z_bg,
            static=False,
        )
        text_x = self.x + 10.0
        text_y = self.y + 8.0
        for idx, (line, color) in enumerate(rows):
            renderer.add_text(
                f"{self.key_prefix}:line:{idx}",
                line,
                text_x,
                text_y + idx * self.line_height,
                font_size=self.font_size,
                color=color,
                anchor="top-left",
                z=self.z_text,
                static=False,
            )
        if mode is DisplayMode.GRAPH:
            self._draw_graph(renderer, snapshot, top=text_y + len(rows) * self.line_height)

    def lines(
        self, snapshot: ProfilerSnapshot, mode: DisplayMode = DisplayMode.SIMPLE
    ) -> list[str]:
        """Return the text rows ``draw`` emits for ``mode``."""
        return [line for line, _ in self._rows(snapshot, mode)]

    def _rows(self, snapshot: ProfilerSnapshot, mode: DisplayMode) -> list[tuple[str, str]]:
        rows = [
            (f"FPS: {snapshot.average_fps:.1f}", _TEXT_COLOR),
            (f"Frame Count: {snapshot.frame_count}", _TEXT_COLOR),
        ]
        if mode is DisplayMode.SIMPLE:
            for sample in snapshot.samples:
                rows.append(
                    (
                        f"{sample.name}: {format_time(sample.last_time)} "
                        f"(avg: {format_time(sample.average_time)})",
                        rgba_to_hex(color_for_time(sample.last_time)),
                    )
                )
        elif mode is DisplayMode.DETAILED:
            rows.append((f"Total Time: {format_time(snapshot.total_time)}", _TEXT_COLOR))
            for sample in snapshot.samples:
                rows.append((f"{sample.name}:", rgba_to_hex(color_for_time(sample.average_time))))
                rows.append((f"  Last: {format_time(sample.last_time)}", _TEXT_COLOR))
                rows.append((f"  Avg:  {format_time(sample.average_time)}", _TEXT_COLOR))
                rows.append((f"  Min:  {format_time(sample.min_time)}", _TEXT_COLOR))
                rows.append((f"  Max:  {format_time(sample.max_time)}", _TEXT_COLOR))
                rows.append((f"  Calls: {sample.call_count}", _TEXT_COLOR))
        return rows

    def _graph_color(self, frame_ms: float) -> Color:
        if frame_ms <= self.graph_target_ms:
            return GREEN
        if frame_ms <= self.graph_budget_ms:
            return YELLOW
        return RED

    def _draw_graph(self, renderer: RenderAPI, snapshot: ProfilerSnapshot, *, top: float) -> None:
        # Screen-space polyline, oldest frame on the left.
        frame_times = snapshot.frame_times_ms
        if len(frame_times) < 2:
            return
        left = self.x + 10.0
        step = (self.width - 20.0) / (len(frame_times) - 1)
        bottom = top + self.graph_height
        points: list[tuple[float, float, float]] = []
        for idx, frame_ms in enumerate(frame_times):
            ratio = min(1.0, max(0.0, frame_ms / self.graph_budget_ms))
            points.append((left + idx * step, bottom - ratio * self.graph_height, self.z_text))
        for idx in range(len(points) - 1):
            renderer.add_line(
                points[idx],
                points[idx + 1],
                self._graph_color(frame_times[idx + 1]),
                width=1.0,
                depth_test=False,
                culling=False,
                screen_space=True,
            )
