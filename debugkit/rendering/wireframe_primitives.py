"""Line-segment geometry builders for wireframe debug shapes.

Every builder returns a ``(N, 2, 3)`` float64 array: ``N`` segments, each a
start and end point. Degenerate parameters produce empty or collapsed
segments rather than raising.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

_BOX_CORNER_SIGNS = np.array(
    [
        (-1.0, -1.0, -1.0),
        (1.0, -1.0, -1.0),
        (1.0, 1.0, -1.0),
        (-1.0, 1.0, -1.0),
        (-1.0, -1.0, 1.0),
        (1.0, -1.0, 1.0),
        (1.0, 1.0, 1.0),
        (-1.0, 1.0, 1.0),
    ],
    dtype=np.float64,
)

# Bottom face, top face, then vertical edges.
BOX_EDGES = np.array(
    [
        (0, 1), (1, 2), (2, 3), (3, 0),
        (4, 5), (5, 6), (6, 7), (7, 4),
        (0, 4), (1, 5), (2, 6), (3, 7),
    ],
    dtype=np.intp,
)


def _empty() -> np.ndarray:
    return np.zeros((0, 2, 3), dtype=np.float64)


def _center(center: Sequence[float]) -> np.ndarray:
    return np.asarray(center, dtype=np.float64).reshape(3)


def _closed_loop(points: np.ndarray) -> np.ndarray:
    """Pair each point with its successor, wrapping the last to the first."""
    return np.stack((points, np.roll(points, -1, axis=0)), axis=1)


def box_corners(center: Sequence[float], size: Sequence[float]) -> np.ndarray:
    """Return the 8 corners ``center ± size / 2`` in edge-table order."""
    half = np.asarray(size, dtype=np.float64).reshape(3) * 0.5
    return _center(center) + _BOX_CORNER_SIGNS * half


def box_segments(center: Sequence[float], size: Sequence[float]) -> np.ndarray:
    """Build the 12 edges of an axis-aligned box."""
    corners = box_corners(center, size)
    return corners[BOX_EDGES]


def circle_points(
    center: Sequence[float], radius: float, segments: int, *, plane: str = "xy", offset: float = 0.0
) -> np.ndarray:
    """Sample ``segments`` points on a circle in ``plane`` ("xy" or "xz")."""
    if segments <= 0:
        return np.zeros((0, 3), dtype=np.float64)
    angles = np.arange(segments, dtype=np.float64) * (2.0 * np.pi / segments)
    points = np.zeros((segments, 3), dtype=np.float64)
    points[:, 0] = radius * np.cos(angles)
    if plane == "xy":
        points[:, 1] = radius * np.sin(angles)
        points[:, 2] = offset
    elif plane == "xz":
        points[:, 1] = offset
        points[:, 2] = radius * np.sin(angles)
    else:
        raise ValueError(f"unsupported circle plane: {plane}")
    return points + _center(center)


def circle_segments(center: Sequence[float], radius: float, segments: int = 32) -> np.ndarray:
    """Build a closed circle loop in the XY plane."""
    if segments <= 0:
        return _empty()
    return _closed_loop(circle_points(center, radius, segments))


def sphere_segments(
    center: Sequence[float], radius: float, rings: int = 8, segments: int = 16
) -> np.ndarray:
    """Build a UV sphere: ``rings`` latitude loops then meridian strips.

    Yields ``rings * segments + segments * (rings - 1)`` segments. ``rings``
    is clamped to at least 2 so the pole-to-pole step stays finite.
    """
    if segments <= 0:
        return _empty()
    rings = max(2, int(rings))
    origin = _center(center)
    phis = np.arange(rings, dtype=np.float64) * (np.pi / (rings - 1))
    thetas = np.arange(segments, dtype=np.float64) * (2.0 * np.pi / segments)

    # grid[ring, segment] is the surface point at (phi, theta).
    sin_phi = np.sin(phis)[:, None]
    grid = np.empty((rings, segments, 3), dtype=np.float64)
    grid[..., 0] = radius * sin_phi * np.cos(thetas)[None, :]
    grid[..., 1] = radius * np.cos(phis)[:, None]
    grid[..., 2] = radius * sin_phi * np.sin(thetas)[None, :]
    grid += origin

    latitude = np.stack((grid, np.roll(grid, -1, axis=1)), axis=2).reshape(-1, 2, 3)
    meridians = np.stack((grid[:-1], grid[1:]), axis=2).transpose(1, 0, 2, 3).reshape(-1, 2, 3)
    return np.concatenate((latitude, meridians), axis=0)


def cylinder_segments(
    center: Sequence[float], radius: float, height: float, segments: int = 16
) -> np.ndarray:
    """Build a Y-axis cylinder: top ring, bottom ring, then vertical struts."""
    if segments <= 0:
        return _empty()
    half = height * 0.5
    top = circle_points(center, radius, segments, plane="xz", offset=half)
    bottom = circle_points(center, radius, segments, plane="xz", offset=-half)
    struts = np.stack((top, bottom), axis=1)
    return np.concatenate((_closed_loop(top), _closed_loop(bottom), struts), axis=0)
