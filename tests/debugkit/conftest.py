from __future__ import annotations

from dataclasses import dataclass


class FakeRenderer:
    def __init__(self) -> None:
        self.lines: list[tuple[tuple, tuple, tuple, dict]] = []
        self.rects: list[dict] = []
        self.texts: list[dict] = []
        self.calls: list[str] = []

    def add_line(
        self, start, end, color, *, width=1.0, depth_test=True, culling=False, screen_space=False
    ) -> None:
        self.calls.append("line")
        hints = {
            "width": width,
            "depth_test": depth_test,
            "culling": culling,
            "screen_space": screen_space,
        }
        self.lines.append((start, end, color, hints))

    def add_rect(self, key, x, y, w, h, color, z=0.0, static=False) -> None:
        self.calls.append("rect")
        self.rects.append({"key": key, "x": x, "y": y, "w": w, "h": h, "color": color, "z": z})

    def add_text(
        self,
        key,
        text,
        x,
        y,
        font_size=18.0,
        color="#ffffff",
        anchor="top-left",
        z=2.0,
        static=False,
    ) -> None:
        self.calls.append("text")
        self.texts.append({"key": key, "text": text, "x": x, "y": y, "color": color, "z": z})

    def text_values(self) -> list[str]:
        return [item["text"] for item in self.texts]


class ManualClock:
    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def fixed_timestamp() -> str:
    return "12:00:00.000"


@dataclass(frozen=True, slots=True)
class FakeCollider:
    kind: str
    size: tuple[float, ...] = (1.0, 1.0)
    radius: float = 0.5


@dataclass(slots=True)
class FakeSceneObject:
    position: tuple[float, ...] | None = (0.0, 0.0)
    scale: tuple[float, ...] = (1.0, 1.0)
    collider: FakeCollider | None = None
