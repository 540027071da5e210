import math

import numpy as np
import pytest

from thickline import InsufficientPoints, InvalidThickness, Region, Ring, outline, outline_xy, to_patch_xy
from thickline.clip import union_all
from thickline.offset import primitive_shapes
from thickline.ops import drop_consecutive_duplicates, point_polyline_distance


def disk_area(radius, n):
    return 0.5 * n * radius ** 2 * math.sin(2 * math.pi / n)


def sample_points(region, n=1500, seed=0, pad=0.5):
    xmin, ymin, xmax, ymax = region.bounds
    rng = np.random.default_rng(seed)
    return np.column_stack((
        rng.uniform(xmin - pad, xmax + pad, n),
        rng.uniform(ymin - pad, ymax + pad, n),
    ))


def assert_matches_buffer(region, points, thickness, n_vertices=200):
    r = 0.5 * thickness
    slack = r * (1.0 - math.cos(math.pi / n_vertices)) + 1e-9
    q = sample_points(region)
    d = point_polyline_distance(q, np.asarray(points, dtype=float))
    inside = region.contains(q)
    assert inside[d < r - slack].all()
    assert not inside[d > r + slack].any()


# Scenario A
def test_horizontal_capsule():
    region = outline([(0, 0), (10, 0)], 2)
    assert region.num_rings == 1
    assert region.rings[0].orientation == "CW"
    assert region.area == pytest.approx(20 + math.pi, abs=0.3)
    xmin, ymin, xmax, ymax = region.bounds
    assert (xmin, ymin, xmax, ymax) == pytest.approx((-1, -1, 11, 1), abs=1e-6)


# Scenario B
def test_vertical_capsule():
    region = outline([(0, 0), (0, 10)], 1)
    assert region.num_rings == 1
    assert region.area == pytest.approx(10 + math.pi / 4, abs=0.15)


# Scenario C
def test_bent_line_is_one_ring():
    points = [(0, 0), (5, 5), (10, 0)]
    region = outline(points, 0.5)
    assert len(region.outers) == 1
    assert not region.holes
    assert region.area > 0
    assert_matches_buffer(region, points, 0.5)


# Scenario D / P4
def test_duplicate_points_match_deduplicated():
    with_dup = outline([(0, 0), (0, 0), (5, 0)], 1)
    plain = outline([(0, 0), (5, 0)], 1)
    assert with_dup.num_rings == plain.num_rings == 1
    assert with_dup.area == pytest.approx(plain.area, abs=1e-9)
    q = sample_points(plain)
    d = point_polyline_distance(q, np.array([[0., 0.], [5., 0.]]))
    far = np.abs(d - 0.5) > 1e-3
    assert np.array_equal(with_dup.contains(q[far]), plain.contains(q[far]))


def test_duplicate_runs_match_deduplicated():
    pts = np.array([[0., 0.], [0., 0.], [0., 0.], [3., 1.], [3., 1.], [5., -1.], [8., 0.], [8., 0.]])
    deduped = drop_consecutive_duplicates(pts)
    assert deduped.shape == (4, 2)
    with_runs = outline(pts, 0.8)
    plain = outline(deduped, 0.8)
    assert with_runs.num_rings == plain.num_rings
    assert with_runs.area == pytest.approx(plain.area, rel=1e-6)
    q = sample_points(plain, seed=5)
    d = point_polyline_distance(q, deduped)
    far = np.abs(d - 0.4) > 1e-3
    assert np.array_equal(with_runs.contains(q[far]), plain.contains(q[far]))


# Scenario E / P5
@pytest.mark.parametrize("thickness", [0.0, -1.0, float("nan"), float("inf"), True, "wide", None])
def test_invalid_thickness(thickness):
    with pytest.raises(InvalidThickness):
        outline([(0, 0), (10, 0)], thickness)


def test_thickness_checked_before_points():
    with pytest.raises(InvalidThickness):
        outline([], 0.0)


def test_no_points():
    with pytest.raises(InsufficientPoints):
        outline([], 1.0)


def test_single_point_rejected_when_disabled():
    with pytest.raises(InsufficientPoints) as exc:
        outline([(1, 1)], 1.0, config={"input": {"allow_single_point": False}})
    assert exc.value.context == {"n_points": 1}


def test_single_point_is_a_dot():
    region = outline([(1, 2)], 2.0)
    assert region.num_rings == 1
    assert region.area == pytest.approx(disk_area(1.0, 200))
    assert region.contains((1.5, 2.5))
    assert not region.contains((2.0, 3.0))


def test_repeated_single_point_is_a_dot():
    region = outline([(1, 2), (1, 2), (1, 2)], 2.0)
    assert region.num_rings == 1
    assert region.area == pytest.approx(disk_area(1.0, 200))


# P1
@pytest.mark.parametrize("n_vertices", [64, 200])
@pytest.mark.parametrize("length, thickness", [(10.0, 2.0), (3.0, 0.4), (1.0, 5.0)])
def test_capsule_area(n_vertices, length, thickness):
    angle = 0.7
    end = (length * math.cos(angle), length * math.sin(angle))
    region = outline([(1.0, -2.0), (1.0 + end[0], -2.0 + end[1])], thickness,
                     config={"disk": {"n_vertices": n_vertices}})
    exact = length * thickness + math.pi * (thickness / 2) ** 2
    assert region.num_rings == 1
    assert region.area == pytest.approx(exact, rel=0.01)


@pytest.mark.parametrize(
    "start, end, thickness",
    [
        ((0.0, 0.0), (1.0, 0.0), 1e-6),
        ((1000.0, 0.0), (1001.0, 0.0), 1e-5),
        ((1000.0, 0.0), (1001.0, 0.0), 1e-7),
        ((0.0, 0.0), (1e-3 * math.cos(0.7), 1e-3 * math.sin(0.7)), 1e-4),
        ((1e6, 0.0), (1e6 + 8.0, 6.0), 2.0),
    ],
)
def test_capsule_area_across_scales(start, end, thickness):
    region = outline([start, end], thickness)
    length = math.hypot(end[0] - start[0], end[1] - start[1])
    exact = length * thickness + math.pi * (thickness / 2) ** 2
    assert region.num_rings == 1
    assert region.area == pytest.approx(exact, rel=0.01)


# P2
@pytest.mark.parametrize(
    "points, thickness",
    [
        ([(0, 0), (4, 1), (6, -2), (9, 0)], 1.0),
        ([(0, 0), (3, 0), (3, 0.5), (0, 0.5)], 0.3),
        ([(-2, 1), (2, 1.5)], 3.0),
    ],
)
def test_containment_matches_distance(points, thickness):
    region = outline(points, thickness)
    assert_matches_buffer(region, points, thickness)


# P3
def test_shape_order_does_not_matter():
    points = np.array([[0., 0.], [4., 1.], [6., -2.], [9., 0.]])
    shapes = primitive_shapes(points, 1.0, 64)
    ordered = union_all(shapes)
    perm = np.random.default_rng(7).permutation(len(shapes))
    shuffled = union_all([shapes[k] for k in perm])
    assert shuffled.area == pytest.approx(ordered.area, rel=1e-6)
    q = sample_points(ordered, seed=3)
    d = point_polyline_distance(q, points)
    far = np.abs(d - 0.5) > 1e-2
    assert np.array_equal(shuffled.contains(q[far]), ordered.contains(q[far]))


def test_parallel_config_matches_serial():
    points = [(0, 0), (2, 1), (4, 0), (6, 1), (8, 0)]
    serial = outline(points, 0.8)
    tree = outline(points, 0.8, config={"union": {"parallel": True, "threads": 2}})
    assert tree.num_rings == serial.num_rings
    assert tree.area == pytest.approx(serial.area, rel=1e-6)


def test_closed_loop_has_hole():
    points = [(0, 0), (4, 0), (4, 4), (0, 4), (0, 0)]
    region = outline(points, 1.0)
    assert len(region.outers) == 1
    assert len(region.holes) == 1
    assert not region.contains((2.0, 2.0))
    assert region.contains((0.0, 2.0))
    expected = 25.0 - (4.0 - math.pi) * 0.25 - 9.0
    assert region.area == pytest.approx(expected, abs=0.01)


def test_input_not_modified():
    points = np.array([[0., 0.], [0., 0.], [3., 1.]])
    before = points.copy()
    outline(points, 1.0)
    assert np.array_equal(points, before)


def test_outline_xy_single_contour():
    x_out, y_out = outline_xy([0, 10], [0, 0], 2)
    assert x_out.shape == y_out.shape
    assert not np.isnan(x_out).any()
    assert (x_out[0], y_out[0]) == (x_out[-1], y_out[-1])


def test_to_patch_xy_separates_rings():
    a = Ring([(0, 0), (0, 1), (1, 1), (1, 0)])
    b = Ring([(5, 5), (5, 6), (6, 6)])
    x, y = to_patch_xy(Region((a, b)))
    assert x.shape == (5 + 4 + 1,)
    assert np.isnan(x[5]) and np.isnan(y[5])
    assert np.isnan(x).sum() == 1
    empty_x, empty_y = to_patch_xy(Region())
    assert empty_x.size == empty_y.size == 0
