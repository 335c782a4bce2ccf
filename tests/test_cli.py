import pytest

from rasterlab.cli import main
from rasterlab.clipping import Window, clip_polygon
from rasterlab.transform import rotate, scale

SQUARE_ARGS = [
    "--vertex", "-10", "0",
    "--vertex", "10", "0",
    "--vertex", "10", "10",
    "--vertex", "-10", "10",
]


def _lines(capsys):
    return capsys.readouterr().out.splitlines()


def test_clip_left_edge_only(capsys):
    assert main(["clip", "--window", "0", "0", "20", "20", "--edge", "left", *SQUARE_ARGS]) == 0
    assert _lines(capsys) == ["0 0", "10 0", "10 10", "0 10"]


def test_clip_all_edges_matches_library(capsys):
    main(["clip", "--window", "-5", "2", "5", "8", *SQUARE_ARGS])
    square = [(-10, 0), (10, 0), (10, 10), (-10, 10)]
    expected = [f"{x} {y}" for x, y in clip_polygon(square, Window(-5, 2, 5, 8))]
    assert _lines(capsys) == expected


def test_translate(capsys):
    main(["translate", "3", "-2", "--vertex", "1", "1", "--vertex", "4", "5"])
    assert _lines(capsys) == ["4 -1", "7 3"]


def test_scale_matches_library(capsys):
    main(["scale", "1.5", "2", "--vertex", "3", "3", "--vertex", "5", "1"])
    expected = [f"{x} {y}" for x, y in scale([(3, 3), (5, 1)], 1.5, 2.0)]
    assert _lines(capsys) == expected


def test_rotate_matches_library(capsys):
    main(["rotate", "90", "--vertex", "10", "0", "--vertex", "0", "10"])
    expected = [f"{x} {y}" for x, y in rotate([(10, 0), (0, 10)], 90.0)]
    assert _lines(capsys) == expected


def test_missing_vertex_is_an_error():
    with pytest.raises(SystemExit) as excinfo:
        main(["translate", "1", "1"])
    assert excinfo.value.code == 2


def test_reversed_window_is_an_error():
    with pytest.raises(SystemExit) as excinfo:
        main(["clip", "--window", "10", "0", "0", "10", *SQUARE_ARGS])
    assert excinfo.value.code == 2