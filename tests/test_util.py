import pytest

from foxgame.util import VIEW_SIZE, Rect, Vec2, approach_target


def test_vec2_add_sub_inverse():
    a, b = Vec2(1.5, -2.0), Vec2(3.0, 4.25)
    assert (a + b) - b == a


def test_vec2_scalar_mul_matches_addition():
    a = Vec2(3.0, -7.0)
    assert a * 2 == a + a
    assert 2 * a == a + a


def test_vec2_floor():
    assert Vec2(1.5, -0.5).floor() == Vec2(1.0, -1.0)


def test_vec2_round_half_away_from_zero():
    assert Vec2(0.5, -0.5).round() == Vec2(1.0, -1.0)


def test_vec2_clamp_and_splat():
    v = Vec2(-10.0, 500.0).clamp(Vec2.splat(0.0), Vec2.splat(255.0))
    assert v == Vec2(0.0, 255.0)


def test_view_size_in_tiles():
    assert (VIEW_SIZE / 16).floor() == Vec2(22, 14)


def test_rect_contains_edges():
    r = Rect(0.0, 0.0, 16.0, 16.0)
    assert r.contains(Vec2(16.0, 16.0))
    assert r.contains(Vec2(0.0, 0.0))
    assert not r.contains(Vec2(16.5, 8.0))


def test_rect_overlaps_is_symmetric():
    a = Rect(0.0, 0.0, 10.0, 10.0)
    b = Rect(5.0, 5.0, 10.0, 10.0)
    c = Rect(20.0, 20.0, 1.0, 1.0)
    assert a.overlaps(b) and b.overlaps(a)
    assert not a.overlaps(c) and not c.overlaps(a)


def test_rect_offset_keeps_size():
    r = Rect(1.0, 2.0, 3.0, 4.0)
    moved = r.offset(Vec2(10.0, 20.0))
    assert moved.size() == r.size()
    assert moved.point() == r.point() + Vec2(10.0, 20.0)


def test_rect_center():
    assert Rect(0.0, 0.0, 16.0, 16.0).center() == Vec2(8.0, 8.0)


@pytest.mark.parametrize(
    "value,step,target",
    [(0.0, 1.0, 0.5), (5.0, 1.0, 0.0), (-3.0, 0.25, 2.0), (1.0, 0.1, 1.0)],
)
def test_approach_target_never_overshoots(value, step, target):
    result = approach_target(value, step, target)
    assert abs(result - target) <= abs(value - target)
    assert abs(result - value) <= step + 1e-9


def test_approach_target_reaches_target():
    assert approach_target(0.0, 1.0, 0.5) == 0.5
    assert approach_target(0.5, 1.0, 0.5) == 0.5