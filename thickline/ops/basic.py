# -*- coding: utf-8 -*-
# Thickline/thickline/ops/basic.py

"""
Project: Thickline
Date: 10/18/2026

Purpose
-------
Foundational 2D polyline utilities for outline preprocessing. Coerce caller input into
a float64 (N,2) array, deduplicate consecutive points, and compute cumulative arclength.

Main Tasks
----------
    1. Accept array-likes of pairs or separate x/y vectors and return an (N,2) array.
    2. Sanitize with consecutive-duplicate removal.
    3. Provide cumulative arclength (S[0]=0, S[-1]=L).

Notes
-----
- Functions assume Cartesian coordinates (x, y) and never re-order points.
- Caller-owned arrays are never modified; a copy is returned when conversion happens.
"""

from typing import Optional, Sequence
import numpy as np

from ..topology._validation import _assert_xy

__all__ = [
    "as_points",
    "drop_consecutive_duplicates",
    "cumulative_arclength",
]


def as_points(points, y: Optional[Sequence[float]] = None) -> np.ndarray:
    """
    Coerce caller input into a finite float64 array of shape (N, 2).

    Args
    ----
    points : array-like
        Sequence of (x, y) pairs, or the x-coordinates when `y` is given.
        Vectors of any shape are flattened in order, as with `x(:)`.
    y : array-like, optional
        y-coordinates matching `points` element by element.

    Returns
    -------
    np.ndarray
        Array of shape (N, 2); N may be 0.

    Raises
    ------
    ValueError
        If shapes are inconsistent or coordinates are not finite.
    """
    if y is not None:
        xs = np.asarray(points, dtype=np.float64).ravel()
        ys = np.asarray(y, dtype=np.float64).ravel()
        if xs.shape != ys.shape:
            raise ValueError("x and y must have the same number of elements, got {} and {}.".format(
                xs.size, ys.size))
        pts = np.column_stack((xs, ys))
    else:
        pts = np.asarray(points, dtype=np.float64)
        if pts.size == 0:
            pts = pts.reshape(0, 2)
    _assert_xy(pts, check_finite=True)
    return pts


def drop_consecutive_duplicates(pts: np.ndarray, tol: float = 0.0) -> np.ndarray:
    """
    Remove exact (or tolerance-close) consecutive duplicates.

    Args
    ----
    pts : np.ndarray
        Input polyline points, shape (N, 2).
    tol : float, optional
        Absolute tolerance for equality (`np.allclose` with rtol=0). Default: 0.0.

    Returns
    -------
    np.ndarray
        Filtered points retaining original order.
    """
    _assert_xy(pts)
    if pts.shape[0] <= 1:
        return pts
    keep = [0]
    for i in range(1, pts.shape[0]):
        if not np.allclose(pts[i], pts[keep[-1]], atol=tol, rtol=0.0):
            keep.append(i)
    return pts[np.array(keep, dtype=int)]


def cumulative_arclength(points: np.ndarray) -> np.ndarray:
    """
    Compute cumulative arclength of a polyline.

    Returns an array S with S[0] = 0 and S[-1] = total length.
    """
    _assert_xy(points)
    if points.shape[0] == 0:
        return np.zeros(0)
    seg = np.linalg.norm(points[1:] - points[:-1], axis=1)
    return np.concatenate(([0.0], np.cumsum(seg)))
