# -*- coding: utf-8 -*-
# Thickline/thickline/topology/loop.py

"""
Project: Thickline
Date: 10/18/2026

Purpose:
--------
This module owns *ring-level* concerns:
   - Opening explicitly closed loops (rings never repeat their first point),
   - Signed area and orientation (CW/CCW),
   - Canonical orientation with stable, deterministic behavior,
   - Removal of repeated and collinear vertices left behind by edge splitting.

Notes:
------------
   - Pure NumPy; no logging, plotting, or file I/O.
   - Functions are side-effect free and return new arrays.
   - Works with arrays shaped (N, 2). The edge last -> first is always implied.
"""

import numpy as np
from ._validation import _assert_xy, _is_exactly_closed


# -----------------------
# Public API
# -----------------------
def open_ring(points: np.ndarray, tol: float = 0.0) -> np.ndarray:
    """
    Drop the duplicated closing vertex if the loop is explicitly closed.

    Parameters
    ----------
    points : np.ndarray
        (N, 2) array representing an open or closed loop.
    tol : float
        Absolute tolerance for endpoint equality.

    Returns
    -------
    np.ndarray
        Open loop of shape (M, 2), where M is N or N-1.
    """
    _assert_xy(points)
    if _is_exactly_closed(points, tol):
        return points[:-1]
    return points


def signed_area(ring: np.ndarray) -> float:
    """
    Shoelace signed area for a polygonal loop.

    Conventions
    -----------
    - Positive area => counter-clockwise (CCW) orientation.
    - The last point is implicitly connected to the first.

    Raises
    ------
    ValueError
        If input is not (N, 2) or N < 3.
    """
    _assert_xy(ring)
    if ring.shape[0] < 3:
        raise ValueError("Need at least 3 points to compute area.")
    x = ring[:, 0]
    y = ring[:, 1]
    # Roll by -1 to represent edges (i -> i+1), implicitly connects last->first
    area2 = np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))
    return 0.5 * float(area2)


def orientation(ring: np.ndarray) -> str:
    """
    Return "CCW" if the loop is counter-clockwise, else "CW".

    Zero area (degenerate loops) is treated as "CW" by convention.
    """
    return "CCW" if signed_area(ring) > 0.0 else "CW"


def close_and_orient(points: np.ndarray,
                     desired: str = "CW",
                     tol_close: float = 0.0) -> np.ndarray:
    """
    Return an open loop with the desired orientation ("CCW" or "CW").

    The only reordering performed is a full reversal when needed; no re-sorting.

    Raises
    ------
    ValueError
        If `desired` is not one of {"CCW","CW"} or the loop has < 3 points.
    """
    if desired not in ("CCW", "CW"):
        raise ValueError("desired must be 'CCW' or 'CW'.")
    P = open_ring(points, tol=tol_close)
    if P.shape[0] < 3:
        raise ValueError("Need at least 3 points to form a loop.")
    if orientation(P) == desired:
        return P
    return P[::-1].copy()


def simplify_collinear(ring: np.ndarray, tol: float) -> np.ndarray:
    """
    Remove repeated vertices and vertices lying on the straight line through their
    neighbours (spikes that fold back onto themselves are removed too).

    Parameters
    ----------
    ring : np.ndarray
        Open (N, 2) loop.
    tol : float
        Absolute distance below which a vertex counts as lying on its neighbours' chord.

    Returns
    -------
    np.ndarray
        Open loop; may have fewer than 3 rows when the input collapses entirely.
    """
    _assert_xy(ring)
    pts = [tuple(p) for p in ring]
    changed = True
    while changed and len(pts) >= 3:
        changed = False
        out = []
        n = len(pts)
        for i in range(n):
            prev = out[-1] if out else pts[i - 1]
            cur = pts[i]
            nxt = pts[(i + 1) % n]
            ax, ay = cur[0] - prev[0], cur[1] - prev[1]
            bx, by = nxt[0] - prev[0], nxt[1] - prev[1]
            if ax * ax + ay * ay <= tol * tol:
                changed = True
                continue
            chord = (bx * bx + by * by) ** 0.5
            if chord <= tol or abs(ax * by - ay * bx) <= tol * chord:
                changed = True
                continue
            out.append(cur)
        pts = out
    if not pts:
        return np.empty((0, 2), dtype=np.float64)
    return np.asarray(pts, dtype=np.float64)
