from paddle_sim.geometry import (
    Rect,
    clamp,
    clamp_x,
    clamp_y,
    field_to_screen,
    touches_horizontal_wall,
    touches_vertical_wall,
)


def test_clamp():
    assert clamp(0, 10, -3) == 0
    assert clamp(0, 10, 4) == 4
    assert clamp(0, 10, 12) == 10


def test_clamp_into_field_accounts_for_size():
    assert clamp_x(99.0, 2.0) == 98.0
    assert clamp_y(-1.0, 10.0) == 0.0
    assert clamp_y(95.0, 10.0) == 90.0


def test_wall_touch_includes_the_boundary():
    assert touches_horizontal_wall(0.0, 2.0)
    assert touches_horizontal_wall(98.0, 2.0)
    assert not touches_horizontal_wall(1.0, 2.0)
    assert touches_vertical_wall(-0.5, 2.0)
    assert touches_vertical_wall(99.0, 2.0)
    assert not touches_vertical_wall(50.0, 2.0)


def test_field_to_screen_scales_each_axis():
    rect = Rect(50.0, 25.0, 2.0, 10.0)
    assert field_to_screen(rect, (800, 400)) == (400, 100, 16, 40)
