import pytest

from deltamesh.camera import Camera, Size, Vector
from deltamesh.sheet import (
    GRID_STROKE_RADIUS,
    SheetState,
    grid_layout,
    is_size_changed,
)


def make_camera(scale=2.0, width=100.0, height=80.0, x=3.0, y=-4.0):
    camera = Camera(size=Size(width, height), pos=Vector(x, y))
    camera.set_scale(scale)
    return camera


def test_move_without_press_returns_none():
    state = SheetState()
    assert state.mouse_move(make_camera(), Vector(10.0, 10.0)) is None


def test_drag_keeps_grabbed_world_point_under_cursor():
    camera = make_camera()
    state = SheetState()
    start = Vector(10.0, 20.0)
    grabbed = camera.view_to_world(start)
    state.mouse_press(camera, start)
    cursor = Vector(35.0, 7.0)
    new_pos = state.mouse_move(camera, cursor)
    moved = make_camera(x=new_pos.x, y=new_pos.y)
    view = moved.world_to_view(grabbed)
    assert view.x == pytest.approx(cursor.x)
    assert view.y == pytest.approx(cursor.y)


def test_drag_without_motion_keeps_position():
    camera = make_camera()
    state = SheetState()
    state.mouse_press(camera, Vector(5.0, 5.0))
    assert state.mouse_move(camera, Vector(5.0, 5.0)) == camera.pos


def test_release_ends_drag():
    camera = make_camera()
    state = SheetState()
    state.mouse_press(camera, Vector(5.0, 5.0))
    assert state.is_dragging
    state.mouse_release()
    assert not state.is_dragging
    assert state.mouse_move(camera, Vector(9.0, 9.0)) is None


def test_wheel_keeps_world_point_under_cursor():
    camera = make_camera()
    state = SheetState()
    cursor = Vector(70.0, 15.0)
    world = camera.view_to_world(cursor)
    zoomed = state.mouse_wheel_scrolled(camera, camera.size, 20.0, cursor)
    view = zoomed.world_to_view(world)
    assert view.x == pytest.approx(cursor.x)
    assert view.y == pytest.approx(cursor.y)
    assert zoomed.scale == pytest.approx(camera.scale * (1.0 + 20.0 / camera.size.height))
    assert zoomed.i_scale == pytest.approx(1.0 / zoomed.scale)


def test_wheel_does_not_modify_original_camera():
    camera = make_camera()
    SheetState().mouse_wheel_scrolled(camera, camera.size, 40.0, Vector(1.0, 2.0))
    assert camera.scale == 2.0
    assert camera.pos == Vector(3.0, -4.0)


def test_wheel_ignores_non_pixel_scroll():
    camera = make_camera()
    assert SheetState().mouse_wheel_scrolled(camera, camera.size, None, Vector(1.0, 2.0)) is None


def test_size_change_detection():
    camera = make_camera()
    assert not is_size_changed(camera, Size(100.0, 80.0))
    assert not is_size_changed(camera, Size(100.005, 80.005))
    assert is_size_changed(camera, Size(101.0, 80.0))
    assert is_size_changed(camera, Size(100.0, 79.0))


def test_no_grid_when_zoomed_out():
    assert grid_layout(make_camera(scale=20.0), 100.0, 80.0) is None
    assert grid_layout(make_camera(scale=5.0), 100.0, 80.0) is None


def test_grid_opacity_is_capped():
    layout = grid_layout(make_camera(scale=200.0), 100.0, 80.0)
    assert layout.opacity == 1.0
    assert layout.stroke_radius == GRID_STROKE_RADIUS


def test_grid_opacity_fades_in():
    layout = grid_layout(make_camera(scale=45.0), 100.0, 80.0)
    assert layout.opacity == pytest.approx(0.5)


def test_grid_lines_sit_on_integer_world_coordinates():
    camera = make_camera(scale=32.0, width=256.0, height=192.0, x=0.0, y=0.0)
    layout = grid_layout(camera, 256.0, 192.0)
    assert len(layout.vertical) >= 2
    assert len(layout.horizontal) >= 2
    for x in layout.vertical:
        world_x = camera.view_to_world(Vector(x, 0.0)).x
        assert world_x == pytest.approx(round(world_x))
        assert 0.0 <= x <= 256.0
    for y in layout.horizontal:
        world_y = camera.view_to_world(Vector(0.0, y)).y
        assert world_y == pytest.approx(round(world_y))
        assert 0.0 <= y <= 192.0
    spacing = {round(b - a, 6) for a, b in zip(layout.vertical, layout.vertical[1:])}
    assert spacing == {32.0}


def test_grid_line_count_matches_visible_units():
    camera = make_camera(scale=32.0, width=64.0, height=64.0, x=0.0, y=0.0)
    layout = grid_layout(camera, 64.0, 64.0)
    assert layout.vertical == pytest.approx([0.0, 32.0, 64.0])
    assert layout.horizontal == pytest.approx([0.0, 32.0, 64.0])