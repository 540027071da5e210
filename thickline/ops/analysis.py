# -*- coding: utf-8 -*-
# Thickline/thickline/ops/analysis.py

"""
Project: Thickline
Date: 10/18/2026

Purpose
-------
Distance queries against an open polyline. The thick-line region is, by definition,
the set of points whose distance to the polyline is at most thickness/2, so this is
the reference the outline is checked against.
"""

import numpy as np
from ..topology._validation import _assert_xy

__all__ = ["point_polyline_distance"]


def point_polyline_distance(query, points: np.ndarray) -> np.ndarray:
    """
    Minimum Euclidean distance from each query point to an open polyline.

    Args
    ----
    query : array-like
        One point (2,) or a batch (M, 2).
    points : np.ndarray
        Polyline vertices (N, 2), N >= 1. Zero-length segments are allowed.

    Returns
    -------
    np.ndarray
        Distances of shape (M,), or a scalar for a single query point.
    """
    q = np.asarray(query, dtype=np.float64)
    single = q.ndim == 1
    q = np.atleast_2d(q)
    _assert_xy(q, name="query")
    _assert_xy(points)
    if points.shape[0] == 0:
        raise ValueError("Polyline has no points.")

    # Vertex distances cover single-point polylines and degenerate segments.
    best = np.min(np.linalg.norm(q[:, None, :] - points[None, :, :], axis=2), axis=1)
    if points.shape[0] >= 2:
        a = points[:-1]
        d = points[1:] - a
        L2 = np.einsum("ij,ij->i", d, d)
        ok = L2 > 0.0
        if ok.any():
            a, d, L2 = a[ok], d[ok], L2[ok]
            rel = q[:, None, :] - a[None, :, :]
            t = np.clip(np.einsum("mkj,kj->mk", rel, d) / L2[None, :], 0.0, 1.0)
            foot = a[None, :, :] + t[:, :, None] * d[None, :, :]
            dist = np.linalg.norm(q[:, None, :] - foot, axis=2)
            best = np.minimum(best, dist.min(axis=1))
    return best[0] if single else best
