# -*- coding: utf-8 -*-
# Thickline/thickline/clip/intersect.py

"""
Project: Thickline
Date: 10/18/2026

Purpose
-------
Find every contact between two polygon boundaries and split both edge sets there, so
that afterwards two edges either coincide exactly (same vertex ids) or meet only at
shared vertices.

Main Tasks
----------
    1. VertexPool: merge points closer than eps into one vertex id (grid hashing).
    2. Vertex-on-edge contacts: a vertex of one boundary within eps of the interior
       of an edge of the other boundary splits that edge at the vertex.
    3. Proper crossings: interior/interior intersections split both edges.
    4. Emit each boundary as (K, 2) directed vertex-id pairs, zero-length pieces dropped.

Notes
-----
- Only edges whose bounding box meets the other boundary's bounding box are tested.
- Contacts at an edge's own endpoints are left to the pool, which merges the points.
- Collinear overlaps fall out of rule 2: both overlapping edges get split at each
  other's endpoints and the overlapping pieces end up with identical ids.
"""

from typing import Dict, List, Tuple
import math
import numpy as np

__all__ = ["VertexPool", "split_boundaries"]


class VertexPool:
    """
    Deduplicating store of 2D vertices.

    Parameters
    ----------
    eps : float
        Points closer than `eps` map to the same id (the first point inserted wins).
    """

    def __init__(self, eps: float):
        if not (eps > 0.0):
            raise ValueError("eps must be > 0 (got {}).".format(eps))
        self.eps = float(eps)
        self._cells: Dict[Tuple[int, int], List[int]] = {}
        self._xy: List[Tuple[float, float]] = []

    def __len__(self) -> int:
        return len(self._xy)

    def add(self, x: float, y: float) -> int:
        """Return the id of the vertex within eps of (x, y), creating it if needed."""
        cx = int(math.floor(x / self.eps))
        cy = int(math.floor(y / self.eps))
        best, best_d2 = -1, self.eps * self.eps
        for gx in (cx - 1, cx, cx + 1):
            for gy in (cy - 1, cy, cy + 1):
                for vid in self._cells.get((gx, gy), ()):
                    vx, vy = self._xy[vid]
                    d2 = (vx - x) * (vx - x) + (vy - y) * (vy - y)
                    if d2 <= best_d2:
                        best, best_d2 = vid, d2
        if best >= 0:
            return best
        vid = len(self._xy)
        self._xy.append((float(x), float(y)))
        self._cells.setdefault((cx, cy), []).append(vid)
        return vid

    def add_many(self, pts: np.ndarray) -> np.ndarray:
        """Pool an (N, 2) array; exact repeats are collapsed before the grid lookup."""
        if pts.shape[0] == 0:
            return np.zeros(0, dtype=np.int64)
        uniq, inverse = np.unique(pts, axis=0, return_inverse=True)
        ids = np.fromiter((self.add(x, y) for x, y in uniq), dtype=np.int64, count=uniq.shape[0])
        return ids[np.asarray(inverse).ravel()]

    def coords(self) -> np.ndarray:
        return np.asarray(self._xy, dtype=np.float64).reshape(-1, 2)


def _bbox(starts: np.ndarray, ends: np.ndarray) -> np.ndarray:
    both = np.concatenate((starts, ends))
    return np.concatenate((both.min(axis=0), both.max(axis=0)))


def _edges_near_box(starts: np.ndarray, ends: np.ndarray, box: np.ndarray, eps: float) -> np.ndarray:
    """Indices of edges whose bounding box meets `box` grown by eps."""
    lo = np.minimum(starts, ends)
    hi = np.maximum(starts, ends)
    ok = (hi[:, 0] >= box[0] - eps) & (lo[:, 0] <= box[2] + eps) \
        & (hi[:, 1] >= box[1] - eps) & (lo[:, 1] <= box[3] + eps)
    return np.flatnonzero(ok)


def _vertex_contacts(s: np.ndarray, e: np.ndarray, pts: np.ndarray, eps: float):
    """
    Points lying within eps of an edge interior.

    Returns
    -------
    (edge_idx, t, point_idx)
        Parallel arrays; `t` is the projection parameter along the edge.
    """
    d = e - s
    L = np.hypot(d[:, 0], d[:, 1])[:, None]
    rel = pts[None, :, :] - s[:, None, :]
    with np.errstate(divide="ignore", invalid="ignore"):
        t = (rel[..., 0] * d[:, 0][:, None] + rel[..., 1] * d[:, 1][:, None]) / (L * L)
        dist = np.abs(d[:, 0][:, None] * rel[..., 1] - d[:, 1][:, None] * rel[..., 0]) / L
    hit = (L > eps) & (dist <= eps) & (t * L > eps) & ((1.0 - t) * L > eps)
    ei, pj = np.nonzero(hit)
    return ei, t[ei, pj], pj


def _crossings(s1: np.ndarray, e1: np.ndarray, s2: np.ndarray, e2: np.ndarray, eps: float):
    """
    Proper interior crossings between two edge sets.

    Returns
    -------
    (i, j, t, u)
        Edge i of set 1 crosses edge j of set 2 at s1[i] + t*r[i] == s2[j] + u*s[j].
    """
    r = e1 - s1
    sv = e2 - s2
    L1 = np.hypot(r[:, 0], r[:, 1])[:, None]
    L2 = np.hypot(sv[:, 0], sv[:, 1])[None, :]
    denom = r[:, 0][:, None] * sv[:, 1][None, :] - r[:, 1][:, None] * sv[:, 0][None, :]
    qx = s2[:, 0][None, :] - s1[:, 0][:, None]
    qy = s2[:, 1][None, :] - s1[:, 1][:, None]
    ok = np.abs(denom) > 1e-12 * L1 * L2
    with np.errstate(divide="ignore", invalid="ignore"):
        t = (qx * sv[:, 1][None, :] - qy * sv[:, 0][None, :]) / denom
        u = (qx * r[:, 1][:, None] - qy * r[:, 0][:, None]) / denom
    hit = ok & (t * L1 > eps) & ((1.0 - t) * L1 > eps) & (u * L2 > eps) & ((1.0 - u) * L2 > eps)
    i, j = np.nonzero(hit)
    return i, j, t[i, j], u[i, j]


def _chain(start_ids: np.ndarray, end_ids: np.ndarray, splits: Dict[int, List[Tuple[float, int]]]) -> np.ndarray:
    """Turn edges plus their split points into directed vertex-id pairs."""
    out = []
    for k in range(start_ids.shape[0]):
        seq = [int(start_ids[k])]
        for _t, vid in sorted(splits.get(k, ())):
            seq.append(vid)
        seq.append(int(end_ids[k]))
        for a, b in zip(seq[:-1], seq[1:]):
            if a != b:
                out.append((a, b))
    return np.asarray(out, dtype=np.int64).reshape(-1, 2)


def split_boundaries(a_starts: np.ndarray, a_ends: np.ndarray,
                     b_starts: np.ndarray, b_ends: np.ndarray,
                     eps: float):
    """
    Split two boundaries at all their mutual contacts.

    Parameters
    ----------
    a_starts, a_ends, b_starts, b_ends : np.ndarray
        (E, 2) edge start/end points of boundary A and boundary B.
    eps : float
        Absolute coincidence tolerance.

    Returns
    -------
    (coords, a_edges, b_edges)
        `coords` is the (V, 2) pooled vertex table; `a_edges`/`b_edges` are (K, 2)
        directed id pairs in the original traversal order.
    """
    pool = VertexPool(eps)
    a_s_id = pool.add_many(a_starts)
    a_e_id = pool.add_many(a_ends)
    b_s_id = pool.add_many(b_starts)
    b_e_id = pool.add_many(b_ends)

    a_splits: Dict[int, List[Tuple[float, int]]] = {}
    b_splits: Dict[int, List[Tuple[float, int]]] = {}

    ia = _edges_near_box(a_starts, a_ends, _bbox(b_starts, b_ends), eps)
    ib = _edges_near_box(b_starts, b_ends, _bbox(a_starts, a_ends), eps)
    if ia.size and ib.size:
        # B vertices touching A edge interiors
        ei, t, pj = _vertex_contacts(a_starts[ia], a_ends[ia], b_starts[ib], eps)
        for k, tk, j in zip(ei, t, pj):
            a_splits.setdefault(int(ia[k]), []).append((float(tk), int(b_s_id[ib[j]])))
        # A vertices touching B edge interiors
        ei, t, pj = _vertex_contacts(b_starts[ib], b_ends[ib], a_starts[ia], eps)
        for k, tk, j in zip(ei, t, pj):
            b_splits.setdefault(int(ib[k]), []).append((float(tk), int(a_s_id[ia[j]])))
        # Proper crossings
        ci, cj, t, u = _crossings(a_starts[ia], a_ends[ia], b_starts[ib], b_ends[ib], eps)
        for i, j, ti, uj in zip(ci, cj, t, u):
            ea, eb = int(ia[i]), int(ib[j])
            p = a_starts[ea] + ti * (a_ends[ea] - a_starts[ea])
            vid = pool.add(p[0], p[1])
            a_splits.setdefault(ea, []).append((float(ti), vid))
            b_splits.setdefault(eb, []).append((float(uj), vid))

    a_edges = _chain(a_s_id, a_e_id, a_splits)
    b_edges = _chain(b_s_id, b_e_id, b_splits)
    return pool.coords(), a_edges, b_edges
