"""Wireframe debug-draw line accumulator."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

import numpy as np

from debugkit.api.render import WHITE, Color, RenderAPI, Vec3
from debugkit.api.wireframe import ColliderKind, SceneObjectLike, WireframeLine
from debugkit.rendering.wireframe_primitives import (
    box_segments,
    circle_segments,
    cylinder_segments,
    sphere_segments,
)

_LOG = logging.getLogger("debugkit.wireframe")

DEFAULT_LINE_WIDTH = 1.0
UNIT_SIZE: Vec3 = (1.0, 1.0, 1.0)


def _vec3(values: Sequence[float], fill: float) -> Vec3:
    components = [float(value) for value in values]
    while len(components) < 3:
        components.append(fill)
    return (components[0], components[1], components[2])


def _rgba(color: Sequence[float]) -> Color:
    return (float(color[0]), float(color[1]), float(color[2]), float(color[3]))


class RuntimeWireframe:
    """Collect debug line segments and submit them to a renderer.

    Shapes are tessellated on insertion. Lines persist across frames until
    ``clear`` is called, or until the next ``render`` when ``auto_clear`` is on.
    """

    def __init__(self, *, auto_clear: bool = False) -> None:
        self._lines: list[WireframeLine] = []
        self._initialized = False
        self._enabled = False
        self.line_width = DEFAULT_LINE_WIDTH
        self.depth_test = True
        self.culling = False
        self.auto_clear = bool(auto_clear)

    def initialize(self) -> bool:
        if self._initialized:
            return True
        self._enabled = False
        self.line_width = DEFAULT_LINE_WIDTH
        self.depth_test = True
        self.culling = False
        self._initialized = True
        _LOG.debug("wireframe_initialized auto_clear=%s", self.auto_clear)
        return True

    def shutdown(self) -> None:
        self._lines.clear()
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

    def toggle(self) -> None:
        self._enabled = not self._enabled

    def add_line(self, start: Vec3, end: Vec3, color: Color = WHITE) -> None:
        self._lines.append(
            WireframeLine(start=_vec3(start, 0.0), end=_vec3(end, 0.0), color=_rgba(color))
        )

    def add_box(self, center: Vec3, size: Vec3, color: Color = WHITE) -> None:
        self._extend(box_segments(center, size), color)

    def add_circle(
        self, center: Vec3, radius: float, color: Color = WHITE, segments: int = 32
    ) -> None:
        self._extend(circle_segments(center, radius, segments), color)

    def add_sphere(
        self,
        center: Vec3,
        radius: float,
        color: Color = WHITE,
        rings: int = 8,
        segments: int = 16,
    ) -> None:
        self._extend(sphere_segments(center, radius, rings, segments), color)

    def add_cylinder(
        self,
        center: Vec3,
        radius: float,
        height: float,
        color: Color = WHITE,
        segments: int = 16,
    ) -> None:
        self._extend(cylinder_segments(center, radius, height, segments), color)

    def add_entity_wireframe(self, scene_object: SceneObjectLike, color: Color = WHITE) -> None:
        raw_position = getattr(scene_object, "position", None)
        if raw_position is None:
            return
        position = _vec3(raw_position, 0.0)
        scale = _vec3(getattr(scene_object, "scale", UNIT_SIZE), 1.0)
        collider = getattr(scene_object, "collider", None)
        if collider is None:
            self.add_box(position, scale, color)
            return
        try:
            kind = ColliderKind(collider.kind)
        except ValueError:
            _LOG.debug("wireframe_unknown_collider kind=%r", collider.kind)
            kind = ColliderKind.POLYGON
        if kind is ColliderKind.BOX:
            size = _vec3(collider.size, 1.0)
            scaled = (size[0] * scale[0], size[1] * scale[1], size[2] * scale[2])
            self.add_box(position, scaled, color)
        elif kind is ColliderKind.CIRCLE:
            self.add_circle(position, float(collider.radius) * scale[0], color)
        else:
            # Polygons and unknown kinds are outlined by their scaled unit box.
            self.add_box(position, scale, color)

    def add_all_entities_wireframes(
        self, scene_objects: Iterable[SceneObjectLike], color: Color = WHITE
    ) -> None:
        for scene_object in scene_objects:
            self.add_entity_wireframe(scene_object, color)

    @property
    def lines(self) -> tuple[WireframeLine, ...]:
        return tuple(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def clear(self) -> None:
        self._lines.clear()

    def clear_lines(self) -> None:
        self.clear()

    def update(self, delta_seconds: float) -> None:
        _ = delta_seconds

    def render(self, renderer: RenderAPI | None) -> None:
        if not self._enabled or not self._initialized or renderer is None:
            return
        for line in self._lines:
            renderer.add_line(
                line.start,
                line.end,
                line.color,
                width=self.line_width,
                depth_test=self.depth_test,
                culling=self.culling,
            )
        if self.auto_clear:
            self._lines.clear()

    def _extend(self, segments: np.ndarray, color: Color) -> None:
        rgba = _rgba(color)
        for start, end in segments.tolist():
            self._lines.append(
                WireframeLine(
                    start=(start[0], start[1], start[2]),
                    end=(end[0], end[1], end[2]),
                    color=rgba,
                )
            )
