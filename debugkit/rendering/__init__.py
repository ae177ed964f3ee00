"""Wireframe geometry builders."""

from debugkit.rendering.wireframe_primitives import (
    box_segments,
    circle_segments,
    cylinder_segments,
    sphere_segments,
)

__all__ = ["box_segments", "circle_segments", "cylinder_segments", "sphere_segments"]
