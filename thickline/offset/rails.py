# -*- coding: utf-8 -*-
# Thickline/thickline/offset/rails.py

"""
Project: Thickline
Date: 10/18/2026

Purpose
-------
Geometry preprocessor: per-segment frames (direction, length, unit normal) and the two
offset rails at +/- thickness/2 on either side of every non-degenerate segment.

Conventions
-----------
- Segment i joins points i and i+1.
- n = normalize(rotate90(p[i+1] - p[i])), rotate90(x, y) = (-y, x), so rail "a" lies
  on the left of the direction of travel and rail "b" on the right.
- A segment whose length is exactly zero has no normal; it is flagged degenerate and
  excluded from the rails.
"""

from dataclasses import dataclass
import numpy as np

from ..topology._validation import _assert_xy

__all__ = ["SegmentFrames", "Rails", "segment_frames", "rails"]


@dataclass(frozen=True)
class SegmentFrames:
    """
    Per-segment quantities for a polyline with N points (N-1 segments).

    Attributes
    ----------
    direction : np.ndarray
        (N-1, 2) raw differences p[i+1] - p[i].
    length : np.ndarray
        (N-1,) segment lengths.
    normal : np.ndarray
        (N-1, 2) unit normals; rows of degenerate segments are zero.
    degenerate : np.ndarray
        (N-1,) bool mask of zero-length segments.
    """
    direction: np.ndarray
    length: np.ndarray
    normal: np.ndarray
    degenerate: np.ndarray


@dataclass(frozen=True)
class Rails:
    """
    Rail endpoints for the K non-degenerate segments, in polyline order.

    `a_start[k]`/`a_end[k]` are the left offsets of the segment's first/second point,
    `b_start[k]`/`b_end[k]` the right offsets; `index[k]` is the segment's index in
    the polyline.
    """
    index: np.ndarray
    a_start: np.ndarray
    a_end: np.ndarray
    b_start: np.ndarray
    b_end: np.ndarray

    def __len__(self) -> int:
        return int(self.index.shape[0])


def segment_frames(points: np.ndarray) -> SegmentFrames:
    """
    Compute direction, length and unit normal of every segment.

    Args
    ----
    points : np.ndarray
        Polyline vertices, shape (N, 2). N may be 0 or 1 (no segments).

    Returns
    -------
    SegmentFrames
    """
    _assert_xy(points)
    d = np.diff(points, axis=0)
    length = np.hypot(d[:, 0], d[:, 1])
    degenerate = length == 0.0
    safe = np.where(degenerate, 1.0, length)
    normal = np.column_stack((-d[:, 1], d[:, 0])) / safe[:, None]
    normal[degenerate] = 0.0
    return SegmentFrames(direction=d, length=length, normal=normal, degenerate=degenerate)


def rails(points: np.ndarray, thickness: float) -> Rails:
    """
    Offset the endpoints of every non-degenerate segment by +/- thickness/2 along its normal.

    Args
    ----
    points : np.ndarray
        Polyline vertices, shape (N, 2).
    thickness : float
        Full line width (> 0; validated by the caller).

    Returns
    -------
    Rails
        Rail endpoints; empty arrays when there is no usable segment.
    """
    frames = segment_frames(points)
    idx = np.flatnonzero(~frames.degenerate)
    off = 0.5 * float(thickness) * frames.normal[idx]
    p0 = points[idx]
    p1 = points[idx + 1]
    return Rails(
        index=idx,
        a_start=p0 + off,
        a_end=p1 + off,
        b_start=p0 - off,
        b_end=p1 - off,
    )
