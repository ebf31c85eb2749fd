import math

import pytest

from uyta.camera_controller import (
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Camera2D,
    CameraController,
    lerp,
)
from uyta.tutorial import Tutorial


@pytest.mark.parametrize("start,end", [(0.0, 10.0), (-3.5, 7.25), (4.0, 4.0)])
def test_lerp_endpoints(start, end):
    assert lerp(start, end, 0.0) == start
    assert lerp(start, end, 1.0) == end


def test_lerp_midpoint_between_ends():
    value = lerp(2.0, 8.0, 0.5)
    assert 2.0 < value < 8.0
    assert math.isclose(value - 2.0, 8.0 - value)


def test_default_offset_is_screen_centre():
    controller = CameraController()
    assert controller.camera.offset == (SCREEN_WIDTH / 2, SCREEN_HEIGHT / 2)
    assert controller.camera.target == (0.0, 0.0)
    assert controller.position == (0.0, 0.0)
    assert controller.speed == 500.0


@pytest.mark.parametrize(
    "camera",
    [
        Camera2D(),
        Camera2D(target=(30.0, -12.0), offset=(640.0, 360.0), zoom=2.0),
        Camera2D(target=(5.0, 5.0), offset=(100.0, 50.0), zoom=0.5, rotation=37.0),
    ],
)
def test_screen_world_round_trip(camera):
    for point in [(0.0, 0.0), (123.0, -45.5), (-800.0, 300.0)]:
        back = camera.screen_to_world(camera.world_to_screen(point))
        assert back[0] == pytest.approx(point[0])
        assert back[1] == pytest.approx(point[1])


def test_target_maps_to_offset():
    camera = Camera2D(target=(10.0, 20.0), offset=(300.0, 200.0), zoom=3.0, rotation=15.0)
    screen = camera.world_to_screen(camera.target)
    assert screen[0] == pytest.approx(300.0)
    assert screen[1] == pytest.approx(200.0)


def test_no_keys_keeps_position_and_tutorial():
    controller = CameraController()
    tutorial = Tutorial()
    controller.update_position(set(), 0.05, tutorial)
    assert controller.position == (0.0, 0.0)
    assert tutorial.steps[0].completed is False


def test_moving_right_completes_first_step():
    controller = CameraController()
    tutorial = Tutorial()
    controller.update_position({"d"}, 0.1, tutorial)
    assert controller.position[0] == pytest.approx(controller.speed * 0.1)
    assert controller.position[1] == 0.0
    assert tutorial.steps[0].completed is True


def test_later_key_on_axis_wins():
    controller = CameraController()
    controller.update_position({"a", "d", "w", "s"}, 0.1, Tutorial())
    assert controller.position[0] > 0
    assert controller.position[1] > 0


def test_diagonal_movement_is_normalised():
    controller = CameraController()
    controller.update_position({"w", "a"}, 0.02, Tutorial())
    x, y = controller.position
    assert x < 0 and y < 0
    assert math.hypot(x, y) == pytest.approx(controller.speed * 0.02)


def test_target_trails_position():
    controller = CameraController()
    controller.update_position({"s"}, 0.02, Tutorial())
    assert 0.0 < controller.camera.target[1] < controller.position[1]


def test_target_reaches_position_when_amount_is_one():
    controller = CameraController()
    controller.update_position({"d"}, 0.1, Tutorial())
    assert controller.camera.target[0] == pytest.approx(controller.position[0])


def test_resize_recentres_offset():
    controller = CameraController()
    controller.update_position(set(), 0.01, Tutorial(), resized_to=(800, 600))
    assert controller.camera.offset == (400.0, 300.0)