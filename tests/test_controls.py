import pytest

from doomcaster.config import Config
from doomcaster.controls import (
    Controls,
    FunctionKeyAction,
    movement_speed,
    movement_target,
)
from doomcaster.player import Player


def test_movement_speed_walk_and_run():
    config = Config()
    walk = movement_speed(config, False)
    assert walk == config.player.move_speed
    assert movement_speed(config, True) == pytest.approx(walk * 1.5)


def test_no_keys_stays_put():
    player = Player(x=100.0, y=120.0)
    assert movement_target(player, set(), 5.0) == (100.0, 120.0)


def test_forward_and_backward_at_angle_zero():
    player = Player(x=100.0, y=120.0, angle=0.0)
    fx, fy = movement_target(player, {"Forward"}, 5.0)
    assert fx == pytest.approx(105.0)
    assert fy == pytest.approx(120.0)
    bx, by = movement_target(player, {"Backward"}, 5.0)
    assert bx == pytest.approx(95.0)
    assert by == pytest.approx(120.0)


def test_later_action_overrides_earlier():
    player = Player(x=100.0, y=120.0, angle=0.0)
    both = movement_target(player, {"Forward", "Backward"}, 5.0)
    assert both == movement_target(player, {"Backward"}, 5.0)


def test_strafe_left_and_right_are_opposite():
    player = Player(x=100.0, y=120.0, angle=0.0)
    lx, ly = movement_target(player, {"Left"}, 5.0)
    rx, ry = movement_target(player, {"Right"}, 5.0)
    assert lx == pytest.approx(100.0)
    assert ly == pytest.approx(125.0)
    assert (lx + rx) / 2 == pytest.approx(player.x)
    assert (ly + ry) / 2 == pytest.approx(player.y)


def test_step_keeps_distance_equal_to_speed():
    player = Player(x=50.0, y=60.0, angle=37.0)
    x, y = movement_target(player, {"Forward"}, 4.0)
    assert ((x - 50.0) ** 2 + (y - 60.0) ** 2) ** 0.5 == pytest.approx(4.0)


def test_first_mouse_frame_only_records_position():
    player = Player(angle=10.0)
    turn = Controls().look(player, (300, 200), 0.3, 5, (800, 450))
    assert turn == 0.0
    assert player.angle == 10.0
    assert player.last_mouse_pos == (300, 200)
    assert player.first_mouse_frame is False


def test_mouse_look_turns_and_recentres():
    controls = Controls()
    player = Player(angle=0.0)
    controls.look(player, (800, 450), 0.3, 5, (800, 450))
    turn = controls.look(player, (810, 450), 0.3, 5, (800, 450))
    assert turn == pytest.approx(3.0)
    assert player.angle == pytest.approx(turn)
    assert player.last_mouse_pos == (800, 450)


def test_function_keys_fire_on_press_only():
    controls = Controls()
    assert controls.function_keys(True, False, False) == [
        FunctionKeyAction.TOGGLE_FLASHLIGHT
    ]
    assert controls.function_keys(True, False, False) == []
    assert controls.function_keys(False, False, False) == []
    assert controls.function_keys(True, False, False) == [
        FunctionKeyAction.TOGGLE_FLASHLIGHT
    ]


def test_save_and_load_keys():
    controls = Controls()
    assert controls.function_keys(False, True, True) == [
        FunctionKeyAction.QUICK_SAVE,
        FunctionKeyAction.QUICK_LOAD,
    ]
    assert controls.function_keys(False, True, True) == []