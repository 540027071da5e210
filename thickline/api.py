# -*- coding: utf-8 -*-
# Thickline/thickline/api.py

"""
Project: Thickline
Date: 10/18/2026

Purpose
-------
Thin façade for turning a polyline and a width into a fillable outline. Exposes
three helpers: (1) `outline` for the region itself, (2) `outline_xy` for callers that
keep x and y in separate vectors, and (3) `to_patch_xy` to hand any region to a
patch-style renderer.

Pipeline
--------
validate thickness / points → rails + primitives (disks, rectangles) → CW-normalized
union fold → Region

Notes
-----
- Thickness and point count are validated before any geometry is built.
- Consecutive duplicate points are kept for the disks but produce no rectangle.
- Self-overlapping polylines are returned as the union the engine computes; render
  the result with a nonzero winding rule.
"""

from typing import Any, Dict, Optional, Tuple
import logging
import math
import numpy as np

from .clip.region import Region
from .clip.union import default_eps, union_all
from .config import resolve_config
from .errors import InsufficientPoints, InvalidThickness
from .offset.rails import segment_frames
from .offset.shapes import primitive_shapes
from .ops.basic import as_points, cumulative_arclength

__all__ = [
    "outline",
    "outline_xy",
    "to_patch_xy",
]

logger = logging.getLogger(__name__)


# --------
# Helpers
# --------
def _check_thickness(thickness) -> float:
    if isinstance(thickness, bool):
        raise InvalidThickness("Thickness must be a real number.", {"thickness": thickness})
    try:
        t = float(thickness)
    except (TypeError, ValueError):
        raise InvalidThickness("Thickness must be a real number.", {"thickness": thickness})
    if not math.isfinite(t) or t <= 0.0:
        raise InvalidThickness("Thickness must be positive and finite.", {"thickness": t})
    return t


def _check_count(pts: np.ndarray, cfg: Dict[str, Any]) -> None:
    minimum = 1 if cfg["input"]["allow_single_point"] else 2
    if pts.shape[0] < minimum:
        raise InsufficientPoints(
            "Need at least {} point(s) to build an outline.".format(minimum),
            {"n_points": int(pts.shape[0])},
        )


def _outline_points(pts: np.ndarray, thickness: float, cfg: Dict[str, Any]) -> Region:
    frames = segment_frames(pts)
    n_skipped = int(frames.degenerate.sum())
    if n_skipped:
        logger.debug("[outline] Skipping %d zero-length segment(s).", n_skipped)

    shapes = primitive_shapes(pts, thickness, cfg["disk"]["n_vertices"])
    eps = default_eps(*shapes, eps_rel=cfg["union"]["eps_rel"])
    logger.debug("[outline] Union tolerance eps=%.3g", eps)
    region = union_all(
        shapes,
        eps=eps,
        parallel=cfg["union"]["parallel"],
        threads=cfg["union"]["threads"],
    )
    logger.info(
        "[outline] %d point(s), length=%.6g, %d shape(s) -> %d ring(s), area=%.6g",
        pts.shape[0], float(cumulative_arclength(pts)[-1]), len(shapes), region.num_rings, region.area,
    )
    return region


# -------------
# Public API
# -------------
def outline(points, thickness: float, *, config: Optional[Dict[str, Any]] = None) -> Region:
    """
    Region covered by all points within thickness/2 of the polyline.

    Args
    ----
    points : array-like
        Ordered (x, y) pairs, shape (N, 2). Not modified.
    thickness : float
        Full line width; must be positive and finite.
    config : dict, optional
        Overrides for `thickline.config.DEFAULTS`.

    Returns
    -------
    Region
        Outer rings CW, holes CCW.

    Raises
    ------
    InvalidThickness
        If thickness is zero, negative, NaN or infinite.
    InsufficientPoints
        If there are no points (or a single point with `input.allow_single_point=False`).
    UnionFailure
        If the union engine cannot rebuild a consistent boundary.
    ValueError
        If `points` is not an (N, 2) array of finite numbers.
    """
    cfg = resolve_config(config)
    t = _check_thickness(thickness)
    pts = as_points(points)
    _check_count(pts, cfg)
    return _outline_points(pts, t, cfg)


def to_patch_xy(region: Region) -> Tuple[np.ndarray, np.ndarray]:
    """
    Flatten a region into NaN-separated coordinate vectors.

    Each ring becomes one explicitly closed contour; contours are separated by a
    single NaN in both vectors.

    Returns
    -------
    (x, y) : Tuple[np.ndarray, np.ndarray]
        1D arrays of equal length (empty for an empty region).
    """
    parts = []
    for k, ring in enumerate(region.rings):
        if k:
            parts.append(np.array([[np.nan, np.nan]]))
        parts.append(ring.closed())
    if not parts:
        return np.zeros(0), np.zeros(0)
    xy = np.vstack(parts)
    return xy[:, 0].copy(), xy[:, 1].copy()


def outline_xy(x, y, thickness: float, *,
               config: Optional[Dict[str, Any]] = None) -> Tuple[np.ndarray, np.ndarray]:
    """
    Outline of the polyline given as separate x and y vectors, as NaN-separated vectors.

    Args
    ----
    x, y : array-like
        Coordinates of equal element count; vectors of any shape are read in order.
    thickness : float
        Full line width.
    config : dict, optional
        Overrides for `thickline.config.DEFAULTS`.

    Returns
    -------
    (x_out, y_out) : Tuple[np.ndarray, np.ndarray]
        See `to_patch_xy`.
    """
    cfg = resolve_config(config)
    t = _check_thickness(thickness)
    pts = as_points(x, y)
    _check_count(pts, cfg)
    return to_patch_xy(_outline_points(pts, t, cfg))
