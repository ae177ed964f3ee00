from __future__ import annotations

import math

import pytest

from debugkit.api.render import WHITE
from debugkit.runtime.wireframe import RuntimeWireframe
from tests.debugkit.conftest import FakeCollider, FakeRenderer, FakeSceneObject

RED = (1.0, 0.0, 0.0, 1.0)


def _wireframe(**kwargs) -> RuntimeWireframe:
    wireframe = RuntimeWireframe(**kwargs)
    wireframe.initialize()
    return wireframe


def _points(wireframe: RuntimeWireframe) -> list[tuple[float, float, float]]:
    out: list[tuple[float, float, float]] = []
    for line in wireframe.lines:
        out.append(line.start)
        out.append(line.end)
    return out


def test_initialize_defaults() -> None:
    wireframe = _wireframe()

    assert wireframe.enabled is False
    assert wireframe.line_width == 1.0
    assert wireframe.depth_test is True
    assert wireframe.culling is False
    assert wireframe.auto_clear is False


def test_add_line_appends_even_while_disabled() -> None:
    wireframe = _wireframe()
    wireframe.add_line((0.0, 0.0, 0.0), (1.0, 2.0, 3.0))

    assert wireframe.line_count == 1
    assert wireframe.lines[0].end == (1.0, 2.0, 3.0)
    assert wireframe.lines[0].color == WHITE


def test_shape_line_counts() -> None:
    wireframe = _wireframe()
    wireframe.add_box((0.0, 0.0, 0.0), (2.0, 2.0, 2.0))
    assert wireframe.line_count == 12

    wireframe.clear()
    wireframe.add_circle((0.0, 0.0, 0.0), 1.0)
    assert wireframe.line_count == 32

    wireframe.clear_lines()
    wireframe.add_sphere((0.0, 0.0, 0.0), 1.0)
    assert wireframe.line_count == 240

    wireframe.clear()
    wireframe.add_cylinder((0.0, 0.0, 0.0), 1.0, 2.0)
    assert wireframe.line_count == 48


def test_unit_box_endpoints_are_exact() -> None:
    wireframe = _wireframe()
    wireframe.add_box((0.0, 0.0, 0.0), (2.0, 2.0, 2.0), RED)

    for point in _points(wireframe):
        assert all(abs(component) == 1.0 for component in point)
    assert all(line.color == RED for line in wireframe.lines)


def test_degenerate_shapes_do_not_raise() -> None:
    wireframe = _wireframe()
    wireframe.add_circle((0.0, 0.0, 0.0), 1.0, segments=0)
    wireframe.add_cylinder((0.0, 0.0, 0.0), 1.0, 1.0, segments=-3)
    assert wireframe.line_count == 0

    wireframe.add_circle((0.0, 0.0, 0.0), 0.0, segments=4)
    wireframe.add_box((1.0, 1.0, 1.0), (0.0, 0.0, 0.0))
    assert wireframe.line_count == 16


def test_render_submits_lines_with_hints() -> None:
    wireframe = _wireframe()
    wireframe.add_line((0.0, 0.0, 0.0), (1.0, 0.0, 0.0), RED)
    renderer = FakeRenderer()

    wireframe.render(renderer)
    assert renderer.lines == []

    wireframe.toggle()
    wireframe.line_width = 2.5
    wireframe.depth_test = False
    wireframe.render(renderer)
    wireframe.render(None)

    assert renderer.lines == [
        (
            (0.0, 0.0, 0.0),
            (1.0, 0.0, 0.0),
            RED,
            {"width": 2.5, "depth_test": False, "culling": False, "screen_space": False},
        )
    ]
    assert wireframe.line_count == 1


def test_auto_clear_empties_lines_after_render() -> None:
    wireframe = _wireframe(auto_clear=True)
    wireframe.enabled = True
    wireframe.add_box((0.0, 0.0, 0.0), (1.0, 1.0, 1.0))
    renderer = FakeRenderer()

    wireframe.render(renderer)
    assert len(renderer.lines) == 12
    assert wireframe.line_count == 0


def test_update_does_not_touch_lines() -> None:
    wireframe = _wireframe()
    wireframe.add_line((0.0, 0.0, 0.0), (1.0, 0.0, 0.0))
    wireframe.update(1.0)
    assert wireframe.line_count == 1


def test_entity_box_collider_scales_size() -> None:
    wireframe = _wireframe()
    entity = FakeSceneObject(
        position=(10.0, 0.0), scale=(2.0, 0.5), collider=FakeCollider(kind="box", size=(2.0, 4.0))
    )
    wireframe.add_entity_wireframe(entity)

    assert wireframe.line_count == 12
    xs = sorted({point[0] for point in _points(wireframe)})
    ys = sorted({point[1] for point in _points(wireframe)})
    zs = sorted({point[2] for point in _points(wireframe)})
    assert xs == [8.0, 12.0]
    assert ys == [-1.0, 1.0]
    assert zs == [-0.5, 0.5]


def test_entity_circle_collider_uses_scale_x() -> None:
    wireframe = _wireframe()
    entity = FakeSceneObject(
        position=(1.0, 2.0), scale=(3.0, 1.0), collider=FakeCollider(kind="circle", radius=0.5)
    )
    wireframe.add_entity_wireframe(entity)

    assert wireframe.line_count == 32
    for x, y, z in _points(wireframe):
        assert math.hypot(x - 1.0, y - 2.0) == pytest.approx(1.5)
        assert z == 0.0


def test_entity_polygon_and_bare_objects_use_scale_box() -> None:
    wireframe = _wireframe()
    wireframe.add_entity_wireframe(
        FakeSceneObject(position=(0.0, 0.0, 0.0), scale=(4.0, 4.0, 4.0), collider=FakeCollider("polygon"))
    )
    wireframe.add_entity_wireframe(FakeSceneObject(position=(0.0, 0.0), scale=(4.0, 4.0)))

    points = _points(wireframe)
    assert wireframe.line_count == 24
    assert {point[0] for point in points} == {-2.0, 2.0}
    assert {point[2] for point in points[:24]} == {-2.0, 2.0}
    assert {point[2] for point in points[24:]} == {-0.5, 0.5}


def test_entity_unknown_collider_kind_falls_back_to_scale_box() -> None:
    wireframe = _wireframe()
    wireframe.add_all_entities_wireframes(
        [FakeSceneObject(position=(0.0, 0.0), scale=(2.0, 2.0), collider=FakeCollider("capsule"))]
    )

    assert wireframe.line_count == 12
    assert {point[0] for point in _points(wireframe)} == {-1.0, 1.0}


def test_entities_without_position_are_skipped() -> None:
    wireframe = _wireframe()
    wireframe.add_all_entities_wireframes(
        [
            FakeSceneObject(position=None),
            FakeSceneObject(position=(0.0, 0.0)),
            FakeSceneObject(position=(5.0, 5.0), collider=FakeCollider("circle")),
        ],
        RED,
    )

    assert wireframe.line_count == 12 + 32
    assert all(line.color == RED for line in wireframe.lines)


def test_shutdown_clears_lines() -> None:
    wireframe = _wireframe()
    wireframe.add_line((0.0, 0.0, 0.0), (1.0, 0.0, 0.0))
    wireframe.shutdown()

    assert wireframe.line_count == 0
    assert wireframe.initialized is False
