import pytest

from rasterlab.koch import koch_points, koch_segments


@pytest.mark.parametrize("level", [0, 1, 2, 3])
def test_segment_count(level):
    assert len(koch_segments(0, 200, 550, 200, level)) == 4 ** (level + 1)


@pytest.mark.parametrize("level", [0, 2])
def test_segments_are_connected(level):
    segments = koch_segments(0, 200, 550, 200, level)
    assert segments[0][0] == (0, 200)
    assert segments[-1][1] == (550, 200)
    for (_, end), (start, _) in zip(segments, segments[1:]):
        assert end == start


def test_points_match_segments():
    segments = koch_segments(10, 10, 400, 300, 1)
    points = koch_points(10, 10, 400, 300, 1)
    assert len(points) == len(segments) + 1
    assert list(zip(points, points[1:])) == segments


def test_level_zero_base_curve():
    points = koch_points(0, 200, 550, 200, 0)
    assert points[0] == (0, 200)
    assert points[1] == (183, 200)
    assert points[2] == (274, 41)
    assert points[3] == (366, 200)
    assert points[4] == (550, 200)


def test_negative_level_acts_as_zero():
    assert koch_segments(0, 0, 90, 0, -2) == koch_segments(0, 0, 90, 0, 0)


def test_level_one_first_sub_curve_is_truncated():
    points = koch_points(0, 200, 550, 200, 1)
    assert points[:5] == [(0, 200), (61, 200), (91, 147), (122, 200), (183, 200)]