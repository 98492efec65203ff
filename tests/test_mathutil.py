import math

import pytest

from kiamkit.mathutil import (
    EPSILON,
    PI,
    BBox1,
    about_equal,
    about_zero,
    cbrt,
    clipped,
    cube,
    deg,
    float_is_ok,
    in_range,
    near_equal,
    near_zero,
    num_len,
    pround,
    rad,
    round_int,
    round_to_level,
    safe_acos,
    safe_asin,
    safe_log,
    safe_log2,
    safe_log10,
    safe_sqrt,
    sign,
    sign_about,
    sign_near,
    sqr,
    val_to_range,
)


@pytest.mark.parametrize("x", [0.0, 1.5, -30.0, 180.0, 720.25])
def test_rad_deg_roundtrip(x):
    assert deg(rad(x)) == pytest.approx(x)


def test_rad_of_half_turn_is_pi():
    assert rad(180.0) == pytest.approx(PI)
    assert deg(PI) == pytest.approx(180.0)


@pytest.mark.parametrize("k", [0, 1, 5, 42])
def test_round_int_halves_away_from_zero(k):
    assert round_int(k + 0.4) == k
    assert round_int(k + 0.5) == k + 1
    assert round_int(-(k + 0.5)) == -(k + 1)


@pytest.mark.parametrize("a", [0.3, 2.7, 123.456, 1e6 + 0.2])
def test_round_int_symmetric(a):
    assert round_int(-a) == -round_int(a)


def test_pround_value_and_idempotence():
    assert pround(123456.0, 3) == pytest.approx(123000.0)
    assert pround(0, 3) == 0
    for a in (3.14159, 0.000271828, -98765.4):
        once = pround(a, 4)
        assert pround(once, 4) == pytest.approx(once)
        assert abs(once - a) <= abs(a) * 10 ** -3


@pytest.mark.parametrize("k", [1, 2, 5, 12])
def test_num_len_powers_of_ten(k):
    assert num_len(10 ** k) == k + 1
    assert num_len(10 ** k - 1) == k
    assert num_len(-(10 ** k)) == num_len(10 ** k)


def test_num_len_zero():
    assert num_len(0) == num_len(7)


@pytest.mark.parametrize("x", [-3.5, -1.0, 0.25, 9.0])
def test_sign_times_abs(x):
    assert sign(x) * abs(x) == x


def test_sign_of_zero():
    assert sign(0.0) == 0


@pytest.mark.parametrize("x", [0.0, 0.5, 2.0, 1e10])
def test_safe_sqrt_inverse(x):
    assert safe_sqrt(x) ** 2 == pytest.approx(x)


def test_safe_sqrt_negative_raises():
    with pytest.raises(ValueError):
        safe_sqrt(-1e-3)


@pytest.mark.parametrize("x", [-27.0, -0.5, 0.0, 8.0, 1000.0])
def test_cbrt_inverse(x):
    assert cbrt(x) ** 3 == pytest.approx(x)


@pytest.mark.parametrize("fn", [safe_log, safe_log10, safe_log2])
@pytest.mark.parametrize("bad", [0.0, -1.0, math.inf])
def test_logs_reject_out_of_domain(fn, bad):
    with pytest.raises(ValueError):
        fn(bad)


@pytest.mark.parametrize("k", [0, 1, 3, 10])
def test_log_identities(k):
    assert safe_log2(2.0 ** k) == pytest.approx(k)
    assert safe_log10(10.0 ** k) == pytest.approx(k)
    assert safe_log(math.e ** k) == pytest.approx(k)


@pytest.mark.parametrize("x", [-1.0, -0.3, 0.0, 0.7, 1.0])
def test_asin_acos_inverse(x):
    assert math.sin(safe_asin(x)) == pytest.approx(x)
    assert math.cos(safe_acos(x)) == pytest.approx(x)


@pytest.mark.parametrize("fn", [safe_asin, safe_acos])
def test_asin_acos_out_of_range(fn):
    with pytest.raises(ValueError):
        fn(1.0001)


def test_sqr_and_cube_parity():
    assert sqr(3) == 9
    for x in (1.5, 4, 0.2):
        assert sqr(-x) == sqr(x)
        assert cube(-x) == -cube(x)
        assert cube(x) == pytest.approx(sqr(x) * x)


@pytest.mark.parametrize("fn", [clipped, val_to_range])
def test_clip_to_range(fn):
    assert fn(-5.0, 0.0, 10.0) == 0.0
    assert fn(15.0, 0.0, 10.0) == 10.0
    assert fn(3.5, 0.0, 10.0) == 3.5


def test_in_range_inclusive():
    assert in_range(0.0, 0.0, 1.0)
    assert in_range(1.0, 0.0, 1.0)
    assert not in_range(1.01, 0.0, 1.0)


@pytest.mark.parametrize("v", [7.0, 12.4, 0.1, -7.0, -12.6])
def test_round_to_level_invariants(v):
    level = 5.0
    r = round_to_level(v, level)
    assert (r / level) == pytest.approx(round(r / level))
    assert abs(r - v) <= level / 2


def test_round_to_level_values():
    assert round_to_level(7, 5) == 5
    assert round_to_level(-7.0, 5.0) == -5.0


def test_round_to_level_zero_level_raises():
    with pytest.raises(ValueError):
        round_to_level(1.0, 0)


def test_float_is_ok():
    assert float_is_ok(1.0)
    assert not float_is_ok(math.inf)
    assert not float_is_ok(math.nan)


def test_tolerant_comparisons():
    assert near_zero(EPSILON)
    assert not near_zero(2 * EPSILON)
    assert near_equal(1.0, 1.0 + EPSILON / 2)
    assert not near_equal(1.0, 1.0 + 2 * EPSILON)
    assert about_equal(1.0, 1.05, 0.1)
    assert not about_zero(0.2, 0.1)


@pytest.mark.parametrize("tol", [0.1, 1.0, EPSILON])
def test_sign_about(tol):
    assert sign_about(tol, tol) == sign(tol)
    assert sign_about(-tol, tol) == sign(-tol)
    assert sign_about(tol / 2, tol) == sign(0.0)


def test_sign_near():
    assert sign_near(EPSILON / 2) == sign(0.0)
    assert sign_near(-2 * EPSILON) == sign(-1.0)


def test_bbox_point_constructor_is_dot():
    box = BBox1(4.0)
    assert box.is_dot()
    assert box.not_empty()
    assert box.vmin == box.vmax == 4.0


def test_bbox_include_point_and_box():
    box = BBox1(1.0, 2.0)
    box.include(5.0)
    assert box == BBox1(1.0, 5.0)
    box.include(BBox1(-3.0, 0.0))
    assert box == BBox1(-3.0, 5.0)
    assert box.includes(0.0)
    assert box.includes(BBox1(-1.0, 4.0))
    assert not box.includes(BBox1(-1.0, 6.0))


def test_bbox_intersection():
    a = BBox1(0.0, 10.0)
    b = BBox1(5.0, 20.0)
    assert a.intersects(b)
    a.intersect(b)
    assert a == BBox1(5.0, 10.0)
    assert not BBox1(0.0, 1.0).intersects(BBox1(2.0, 3.0))


def test_bbox_empty_after_disjoint_intersect():
    a = BBox1(0.0, 1.0)
    a.intersect(BBox1(2.0, 3.0))
    assert not a.not_empty()


def test_bbox_translate_keeps_diag():
    box = BBox1(2.0, 6.0)
    moved = box.translated(3.0)
    assert moved == BBox1(5.0, 9.0)
    assert moved.diag() == box.diag()
    box.translate(3.0)
    assert box == moved
    assert BBox1(2.0, 6.0).center() == 4.0