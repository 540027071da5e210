# -*- coding: utf-8 -*-
# Thickline/thickline/clip/winding.py

"""
Project: Thickline
Date: 10/18/2026

Purpose
-------
Vectorized winding numbers of query points with respect to a set of directed edges.

Notes
-----
- Half-open crossing rule (y0 <= y < y1 upward, y1 <= y < y0 downward) so a vertex
  shared by two edges is counted once.
- CCW loops wind +1 around their interior, CW loops -1.
- Points exactly on an edge get an arbitrary but deterministic answer; the union
  engine never asks about such points because shared edges are matched by key first.
"""

import numpy as np

__all__ = ["winding_numbers"]

_CHUNK = 1024


def winding_numbers(query: np.ndarray, starts: np.ndarray, ends: np.ndarray) -> np.ndarray:
    """
    Winding number of every query point.

    Parameters
    ----------
    query : np.ndarray
        (M, 2) query points.
    starts, ends : np.ndarray
        (E, 2) edge start and end points.

    Returns
    -------
    np.ndarray
        (M,) integer winding numbers.
    """
    q = np.asarray(query, dtype=np.float64)
    out = np.zeros(q.shape[0], dtype=np.int64)
    if starts.shape[0] == 0 or q.shape[0] == 0:
        return out

    x0, y0 = starts[:, 0][None, :], starts[:, 1][None, :]
    x1, y1 = ends[:, 0][None, :], ends[:, 1][None, :]
    for lo in range(0, q.shape[0], _CHUNK):
        px = q[lo:lo + _CHUNK, 0][:, None]
        py = q[lo:lo + _CHUNK, 1][:, None]
        is_left = (x1 - x0) * (py - y0) - (px - x0) * (y1 - y0)
        up = (y0 <= py) & (y1 > py) & (is_left > 0.0)
        down = (y0 > py) & (y1 <= py) & (is_left < 0.0)
        out[lo:lo + _CHUNK] = up.sum(axis=1) - down.sum(axis=1)
    return out
