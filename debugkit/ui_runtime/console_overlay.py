"""Drop-down console panel renderer."""

from __future__ import annotations

from dataclasses import dataclass

from debugkit.api.console import ConsoleView, LogLevel
from debugkit.api.render import RenderAPI

_LEVEL_COLORS: dict[LogLevel, str] = {
    LogLevel.INFO: "#e5e7eb",
    LogLevel.WARNING: "#facc15",
    LogLevel.ERROR: "#f87171",
    LogLevel.DEBUG: "#9ca3af",
}


def format_entry(level: LogLevel, timestamp: str, message: str) -> str:
    return f"[{timestamp}] {level.value.upper()}: {message}"


@dataclass(frozen=True, slots=True)
class ConsoleOverlay:
    """Render the newest console entries above an input prompt."""

    key_prefix: str = "debug:console"
    x: float = 0.0
    y: float = 0.0
    width: float = 960.0
    line_height: float = 18.0
    font_size: float = 15.0
    prompt: str = "> "
    z_bg: float = 6000.0
    z_text: float = 6001.0

    def draw(self, renderer: RenderAPI, view: ConsoleView) -> None:
        """Draw the panel for the current console view."""
        renderer.add_rect(
            f"{self.key_prefix}:bg",
            self.x,
            self.y,
            self.width,
            view.height,
            "#0b1220",
            z=self.z_bg,
            static=False,
        )
        text_x = self.x + 10.0
        prompt_y = self.y + view.height - self.line_height - 6.0
        for idx, (line, color) in enumerate(self._rows(view)):
            renderer.add_text(
                f"{self.key_prefix}:line:{idx}",
                line,
                text_x,
                self.y + 6.0 + idx * self.line_height,
                font_size=self.font_size,
                color=color,
                anchor="top-left",
                z=self.z_text,
                static=False,
            )
        renderer.add_text(
            f"{self.key_prefix}:input",
            f"{self.prompt}{view.current_input}",
            text_x,
            prompt_y,
            font_size=self.font_size,
            color="#ffffff",
            anchor="top-left",
            z=self.z_text,
            static=False,
        )

    def visible_line_count(self, height: float) -> int:
        # One row is reserved for the input prompt.
        return max(0, int((height - 12.0) // self.line_height) - 1)

    def _rows(self, view: ConsoleView) -> list[tuple[str, str]]:
        capacity = self.visible_line_count(view.height)
        if capacity == 0:
            return []
        entries = view.entries[-capacity:]
        return [
            (
                format_entry(entry.level, entry.timestamp, entry.message),
                _LEVEL_COLORS[entry.level],
            )
            for entry in entries
        ]
