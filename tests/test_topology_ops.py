import numpy as np
import pytest

from thickline.ops import as_points, cumulative_arclength, drop_consecutive_duplicates, point_polyline_distance
from thickline.topology._validation import _assert_xy
from thickline.topology.loop import close_and_orient, open_ring, orientation, signed_area, simplify_collinear

SQUARE_CCW = np.array([[0., 0.], [1., 0.], [1., 1.], [0., 1.]])


def test_signed_area_and_orientation():
    assert signed_area(SQUARE_CCW) == pytest.approx(1.0)
    assert orientation(SQUARE_CCW) == "CCW"
    assert signed_area(SQUARE_CCW[::-1]) == pytest.approx(-1.0)
    assert orientation(SQUARE_CCW[::-1]) == "CW"


def test_signed_area_needs_three_points():
    with pytest.raises(ValueError):
        signed_area(SQUARE_CCW[:2])


def test_open_ring_drops_closing_point():
    closed = np.vstack((SQUARE_CCW, SQUARE_CCW[:1]))
    assert open_ring(closed).shape == (4, 2)
    assert open_ring(SQUARE_CCW).shape == (4, 2)


def test_close_and_orient():
    cw = close_and_orient(SQUARE_CCW, desired="CW")
    assert orientation(cw) == "CW"
    assert np.array_equal(cw, SQUARE_CCW[::-1])
    assert close_and_orient(SQUARE_CCW, desired="CCW") is SQUARE_CCW
    with pytest.raises(ValueError):
        close_and_orient(SQUARE_CCW, desired="left")


def test_simplify_collinear():
    ring = np.array([[0., 0.], [1., 0.], [2., 0.], [2., 2.], [2., 2.], [0., 2.], [0., 1.]])
    out = simplify_collinear(ring, 1e-9)
    assert out.shape == (4, 2)
    assert signed_area(out) == pytest.approx(4.0)


def test_simplify_collinear_collapses_flat_ring():
    flat = np.array([[0., 0.], [1., 0.], [2., 0.]])
    assert simplify_collinear(flat, 1e-9).shape[0] < 3


def test_as_points_variants():
    assert as_points([(0, 0), (1, 2)]).dtype == np.float64
    pts = as_points([[0, 1], [2, 3]], y=[[4, 5], [6, 7]])
    assert np.array_equal(pts[:, 0], [0, 1, 2, 3])
    assert np.array_equal(pts[:, 1], [4, 5, 6, 7])
    assert as_points([]).shape == (0, 2)


@pytest.mark.parametrize("bad", [[(0, 0), (1, np.nan)], [(0, 0, 0)], [(0, np.inf), (1, 1)]])
def test_as_points_rejects_malformed(bad):
    with pytest.raises(ValueError):
        as_points(bad)


def test_as_points_xy_length_mismatch():
    with pytest.raises(ValueError):
        as_points([0, 1, 2], y=[0, 1])


def test_drop_consecutive_duplicates():
    pts = np.array([[0., 0.], [0., 0.], [1., 0.], [1., 0.], [0., 0.]])
    out = drop_consecutive_duplicates(pts)
    assert np.array_equal(out, [[0., 0.], [1., 0.], [0., 0.]])


def test_cumulative_arclength():
    s = cumulative_arclength(np.array([[0., 0.], [3., 4.], [3., 4.], [3., 6.]]))
    assert np.allclose(s, [0., 5., 5., 7.])


def test_point_polyline_distance():
    line = np.array([[0., 0.], [10., 0.]])
    assert point_polyline_distance((5., 3.), line) == pytest.approx(3.0)
    assert point_polyline_distance((-3., 4.), line) == pytest.approx(5.0)
    d = point_polyline_distance(np.array([[5., -2.], [13., 4.]]), line)
    assert np.allclose(d, [2.0, 5.0])


def test_point_polyline_distance_degenerate():
    dot = np.array([[1., 1.], [1., 1.]])
    assert point_polyline_distance((4., 5.), dot) == pytest.approx(5.0)
    assert point_polyline_distance((4., 5.), dot[:1]) == pytest.approx(5.0)


def test_assert_xy_messages():
    with pytest.raises(ValueError, match=r"query must have shape \(N, 2\)"):
        _assert_xy(np.zeros((3, 3)), name="query")
    with pytest.raises(ValueError, match="2 non-finite row"):
        _assert_xy(np.array([[0., 1.], [np.nan, 0.], [1., np.inf]]), check_finite=True)
    _assert_xy(np.zeros((0, 2)), check_finite=True)


def test_point_polyline_distance_rejects_bad_query():
    with pytest.raises(ValueError, match="query"):
        point_polyline_distance(np.zeros((2, 3)), np.zeros((2, 2)))
