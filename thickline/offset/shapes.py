# -*- coding: utf-8 -*-
# Thickline/thickline/offset/shapes.py

"""
Project: Thickline
Date: 10/18/2026

Purpose
-------
Shape generator: builds the primitive closed shapes whose union is the thick line.

Main Tasks
----------
    1. One joint disk (regular n-gon inscribed in the circle of radius thickness/2)
       per polyline point; endpoints double as round caps.
    2. One rectangle [a_i, a_{i+1}, b_{i+1}, b_i] per non-degenerate segment.
    3. Assemble all primitives as Rings: disks first, then rectangles.

Notes
-----
- Every disk uses the same angle table, so all disks share vertex density and
  identical centers produce identical rings.
- Shape count is exactly (#points) + (#non-degenerate segments).
"""

from typing import List
import numpy as np

from ..clip.region import Ring
from ..topology._validation import _assert_xy
from .rails import rails

__all__ = ["unit_circle", "joint_disk", "joint_disks", "segment_rectangles", "primitive_shapes"]


def unit_circle(n_vertices: int) -> np.ndarray:
    """
    Return (n_vertices, 2) points on the unit circle at angles 2*pi*k/n, k = 0..n-1.
    """
    if n_vertices < 3:
        raise ValueError("A disk needs at least 3 vertices (got {}).".format(n_vertices))
    ang = np.linspace(0.0, 2.0 * np.pi, int(n_vertices) + 1)[:-1]
    return np.column_stack((np.cos(ang), np.sin(ang)))


def joint_disk(center, radius: float, n_vertices: int = 200) -> Ring:
    """
    Regular polygon approximating the circle of `radius` around `center`.
    """
    c = np.asarray(center, dtype=np.float64).reshape(2)
    return Ring(c + float(radius) * unit_circle(n_vertices))


def joint_disks(points: np.ndarray, radius: float, n_vertices: int = 200) -> List[Ring]:
    """
    One disk per polyline point, duplicates included.
    """
    _assert_xy(points)
    circle = float(radius) * unit_circle(n_vertices)
    return [Ring(p + circle) for p in points]


def segment_rectangles(points: np.ndarray, thickness: float) -> List[Ring]:
    """
    One straight-sided body per non-degenerate segment, square-cut at both ends.
    """
    r = rails(points, thickness)
    quads = np.stack((r.a_start, r.a_end, r.b_end, r.b_start), axis=1)
    return [Ring(q) for q in quads]


def primitive_shapes(points: np.ndarray, thickness: float, n_vertices: int = 200) -> List[Ring]:
    """
    All primitives for a polyline: joint disks followed by segment rectangles.
    """
    return joint_disks(points, 0.5 * float(thickness), n_vertices) + segment_rectangles(points, thickness)
