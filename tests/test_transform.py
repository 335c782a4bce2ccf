import math

import pytest

from rasterlab.transform import rotate, round_half_up, scale, translate

SQUARE = [(100, 100), (200, 100), (200, 200), (100, 200)]
TRIANGLE = [(150, 100), (300, 300), (450, 100)]


def test_round_half_up_halves():
    assert round_half_up(2.5) == 3
    assert round_half_up(-2.5) == -2


@pytest.mark.parametrize("value", [0.0, 1.2, -1.2, 7.49, -7.51, 10.0])
def test_round_half_up_is_nearest(value):
    assert abs(round_half_up(value) - value) <= 0.5


@pytest.mark.parametrize("shape", [SQUARE, TRIANGLE])
def test_translate_round_trip(shape):
    assert translate(translate(shape, 37, -12), -37, 12) == shape


def test_translate_moves_every_point():
    moved = translate(TRIANGLE, 5, 9)
    for (x, y), (mx, my) in zip(TRIANGLE, moved):
        assert (mx - x, my - y) == (5, 9)


def test_translate_accepts_generator():
    assert translate(((x, y) for x, y in SQUARE), 0, 0) == SQUARE


@pytest.mark.parametrize("shape", [SQUARE, TRIANGLE])
def test_scale_identity(shape):
    assert scale(shape, 1, 1) == shape


def test_scale_up_then_down():
    assert scale(scale(SQUARE, 4, 2), 0.25, 0.5) == SQUARE


def test_scale_fractional_factors():
    assert scale(TRIANGLE, 1.3, 0.7) == [(195, 70), (390, 210), (585, 70)]


@pytest.mark.parametrize("shape", [SQUARE, TRIANGLE])
def test_rotate_zero_is_identity(shape):
    assert rotate(shape, 0) == shape


def test_rotate_quarter_turn():
    assert rotate([(100, 0)], 90) == [(0, 100)]


def test_rotate_round_trip():
    assert rotate(rotate(TRIANGLE, 30), -30) == pytest.approx(TRIANGLE, abs=1)


@pytest.mark.parametrize("degrees", [15, 45, 120, 270])
def test_rotate_preserves_distance_from_origin(degrees):
    for (x, y), (rx, ry) in zip(SQUARE, rotate(SQUARE, degrees)):
        assert abs(math.hypot(rx, ry) - math.hypot(x, y)) < 1