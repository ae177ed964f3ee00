"""Renderer contract consumed by the debug tools."""

from __future__ import annotations

from typing import Protocol

Vec3 = tuple[float, float, float]
Color = tuple[float, float, float, float]

WHITE: Color = (1.0, 1.0, 1.0, 1.0)


class RenderAPI(Protocol):
    """Drawing capabilities the host renderer exposes to debug overlays."""

    def add_line(
        self,
        start: Vec3,
        end: Vec3,
        color: Color,
        *,
        width: float = 1.0,
        depth_test: bool = True,
        culling: bool = False,
        screen_space: bool = False,
    ) -> None:
        """Draw one colored line segment.

        Points are world space by default. With ``screen_space`` they use the
        overlay coordinates of ``add_rect``, with z as the layer.
        """

    def add_rect(
        self,
        key: str | None,
        x: float,
        y: float,
        w: float,
        h: float,
        color: str,
        z: float = 0.0,
        static: bool = False,
    ) -> None:
        """Draw or update a screen-space rectangle primitive."""

    def add_text(
        self,
        key: str | None,
        text: str,
        x: float,
        y: float,
        font_size: float = 18.0,
        color: str = "#ffffff",
        anchor: str = "top-left",
        z: float = 2.0,
        static: bool = False,
    ) -> None:
        """Draw or update a screen-space text primitive."""


def rgba_to_hex(color: Color) -> str:
    """Convert a float RGBA color to a ``#rrggbb`` string (alpha dropped)."""
    channels = []
    for value in color[:3]:
        clamped = min(1.0, max(0.0, float(value)))
        channels.append(int(round(clamped * 255.0)))
    return "#{:02x}{:02x}{:02x}".format(*channels)
