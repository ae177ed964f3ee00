"""Public wireframe debug-draw API contracts."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol

from debugkit.api.render import WHITE, Color, RenderAPI, Vec3


class ColliderKind(StrEnum):
    BOX = "box"
    CIRCLE = "circle"
    POLYGON = "polygon"


@dataclass(frozen=True, slots=True)
class WireframeLine:
    """One colored world-space segment."""

    start: Vec3
    end: Vec3
    color: Color = WHITE


class ColliderLike(Protocol):
    """Collision shape attached to a scene object."""

    @property
    def kind(self) -> ColliderKind | str: ...

    @property
    def size(self) -> Sequence[float]: ...

    @property
    def radius(self) -> float: ...


class SceneObjectLike(Protocol):
    """Scene entity exposing a transform and an optional collider.

    ``position`` and ``scale`` hold two or three components; missing
    components default to ``z = 0`` and ``scale_z = 1``. A ``None``
    position marks an object without a transform.
    """

    @property
    def position(self) -> Sequence[float] | None: ...

    @property
    def scale(self) -> Sequence[float]: ...

    @property
    def collider(self) -> ColliderLike | None: ...


class Wireframe(Protocol):
    """Line-based debug geometry accumulator."""

    @property
    def enabled(self) -> bool:
        """Whether ``render`` submits lines."""

    def initialize(self) -> bool:
        """Apply render defaults."""

    def shutdown(self) -> None:
        """Drop all lines and mark uninitialized."""

    def toggle(self) -> None:
        """Flip ``enabled``."""

    def add_line(self, start: Vec3, end: Vec3, color: Color = WHITE) -> None:
        """Append one segment."""

    def add_box(self, center: Vec3, size: Vec3, color: Color = WHITE) -> None:
        """Append the 12 edges of an axis-aligned box."""

    def add_circle(
        self, center: Vec3, radius: float, color: Color = WHITE, segments: int = 32
    ) -> None:
        """Append a closed circle in the XY plane."""

    def add_sphere(
        self,
        center: Vec3,
        radius: float,
        color: Color = WHITE,
        rings: int = 8,
        segments: int = 16,
    ) -> None:
        """Append latitude rings and meridians of a UV sphere."""

    def add_cylinder(
        self,
        center: Vec3,
        radius: float,
        height: float,
        color: Color = WHITE,
        segments: int = 16,
    ) -> None:
        """Append end rings and struts of a Y-axis cylinder."""

    def add_entity_wireframe(self, scene_object: SceneObjectLike, color: Color = WHITE) -> None:
        """Append the collider outline of one scene object."""

    def add_all_entities_wireframes(
        self, scene_objects: Iterable[SceneObjectLike], color: Color = WHITE
    ) -> None:
        """Append outlines for every object in ``scene_objects``."""

    def clear(self) -> None:
        """Drop all lines."""

    def update(self, delta_seconds: float) -> None:
        """Per-frame hook."""

    def render(self, renderer: RenderAPI | None) -> None:
        """Submit every line to ``renderer``."""


def create_wireframe() -> Wireframe:
    """Create default wireframe implementation."""
    from debugkit.runtime.wireframe import RuntimeWireframe

    return RuntimeWireframe()
