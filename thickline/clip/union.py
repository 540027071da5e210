# -*- coding: utf-8 -*-
# Thickline/thickline/clip/union.py

"""
Project: Thickline
Date: 10/18/2026

Purpose
-------
Boolean union of polygon regions. Pairwise `union` is an edge-classification clipper;
`union_all` folds a list of shapes with it, either linearly or as a tree reduction on
a thread pool.

Pairwise algorithm
------------------
    1. Bounding boxes apart by more than eps -> the rings of both sides are returned.
    2. Split both boundaries at every mutual contact (`split_boundaries`), so edges
       coincide exactly or meet only at vertices.
    3. Classify each split edge:
         - shared with the other side in the same direction -> kept once,
         - shared in the opposite direction                 -> dropped (interior seam),
         - otherwise kept iff its midpoint has winding number 0 w.r.t. the other side.
    4. Walk the kept edges into rings. At a vertex with several outgoing edges the
       walk takes the leftmost turn, which joins outer rings that touch at a vertex
       and keeps a hole that touches its outer ring separate.
    5. Drop collinear vertices and zero-area slivers; CW rings are outer boundaries
       and CCW rings are holes.

Notes
-----
- Inputs must use the CW-outer / CCW-hole convention; `union_all` enforces it on
  primitive rings before folding.
- Union is associative, so the tree reduction returns the same region as the fold up
  to floating-point rounding.
"""

from multiprocessing.pool import ThreadPool
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, Union
import logging
import math
import multiprocessing as mp
import numpy as np

from ..errors import UnionFailure
from ..topology.loop import simplify_collinear
from .intersect import split_boundaries
from .region import Region, Ring
from .winding import winding_numbers

__all__ = ["default_eps", "as_region", "union", "union_all"]

logger = logging.getLogger(__name__)

Shape = Union[Ring, Region]


# Vertex merging never reaches this fraction of half the shortest input edge
_EDGE_FRACTION = 1e-3
# Collinear cleanup tolerance relative to eps
_COLLINEAR_FRACTION = 1e-3


def default_eps(*shapes: Shape, eps_rel: float = 1e-9) -> float:
    """
    Absolute tolerance for a union of `shapes`.

    `eps_rel` times the largest coordinate magnitude, capped at a small fraction of the
    shortest edge so that no edge of a small shape is ever merged away.
    """
    scale, shortest = 0.0, math.inf
    for s in shapes:
        for r in (s.rings if isinstance(s, Region) else (s,)):
            pts = r.points
            scale = max(scale, float(np.abs(pts).max()))
            seg = np.roll(pts, -1, axis=0) - pts
            shortest = min(shortest, float(np.hypot(seg[:, 0], seg[:, 1]).min()))
    return min(eps_rel * scale, _EDGE_FRACTION * 0.5 * shortest)


def as_region(shape: Shape) -> Region:
    """Wrap a Ring as a CW single-ring Region; Regions pass through unchanged."""
    if isinstance(shape, Region):
        return shape
    if isinstance(shape, Ring):
        return Region.from_ring(shape)
    raise TypeError("Expected a Ring or Region, got {!r}.".format(type(shape)))


def _boxes_apart(a: Region, b: Region, eps: float) -> bool:
    ax0, ay0, ax1, ay1 = a.bounds
    bx0, by0, bx1, by1 = b.bounds
    return ax1 < bx0 - eps or bx1 < ax0 - eps or ay1 < by0 - eps or by1 < ay0 - eps


def _outside(edges: np.ndarray, coords: np.ndarray, other: np.ndarray) -> np.ndarray:
    """Mask of edges whose midpoint lies outside the boundary given by `other` edges."""
    if edges.shape[0] == 0:
        return np.zeros(0, dtype=bool)
    mids = 0.5 * (coords[edges[:, 0]] + coords[edges[:, 1]])
    wn = winding_numbers(mids, coords[other[:, 0]], coords[other[:, 1]])
    return wn == 0


def _select_edges(coords: np.ndarray, a_edges: np.ndarray, b_edges: np.ndarray) -> List[Tuple[int, int]]:
    """Union rule: keep outside edges, one copy of same-direction shared edges, no seams."""
    set_a = set(map(tuple, a_edges.tolist()))
    set_b = set(map(tuple, b_edges.tolist()))
    out_a = _outside(a_edges, coords, b_edges)
    out_b = _outside(b_edges, coords, a_edges)

    kept = []
    seen = set()
    for (i, j), outside in zip(a_edges.tolist(), out_a):
        if (j, i) in set_b:
            continue
        if (i, j) in set_b or outside:
            if (i, j) not in seen:
                seen.add((i, j))
                kept.append((i, j))
    for (i, j), outside in zip(b_edges.tolist(), out_b):
        if (j, i) in set_a or (i, j) in set_a:
            continue
        if outside and (i, j) not in seen:
            seen.add((i, j))
            kept.append((i, j))
    # Seams left by touching rings of a single input
    return [e for e in kept if (e[1], e[0]) not in seen]


def _turn(coords: np.ndarray, prev: int, cur: int, nxt: int) -> float:
    """Signed turn angle in (-pi, pi]; positive turns left."""
    dx0, dy0 = coords[cur] - coords[prev]
    dx1, dy1 = coords[nxt] - coords[cur]
    ang = math.atan2(dx0 * dy1 - dy0 * dx1, dx0 * dx1 + dy0 * dy1)
    return math.pi if ang <= -math.pi + 1e-15 else ang


def _trace_rings(coords: np.ndarray, edges: List[Tuple[int, int]]) -> List[List[int]]:
    """Walk directed edges into closed vertex-id loops, taking the leftmost turn at junctions."""
    outgoing = {}
    for i, j in edges:
        outgoing.setdefault(i, []).append(j)
    used = set()
    loops = []
    for e0 in edges:
        if e0 in used:
            continue
        used.add(e0)
        start, prev, cur = e0[0], e0[0], e0[1]
        loop = [start]
        for _ in range(len(edges) + 1):
            cands = [w for w in outgoing.get(cur, ()) if (cur, w) not in used]
            if cur == start:
                cands.append(e0[1])
            if not cands:
                raise UnionFailure(
                    "Boundary walk reached a vertex with no outgoing edge.",
                    {"vertex": coords[cur].tolist(), "loop_length": len(loop)},
                )
            nxt = max(cands, key=lambda w: _turn(coords, prev, cur, w))
            if cur == start and nxt == e0[1]:
                break
            loop.append(cur)
            used.add((cur, nxt))
            prev, cur = cur, nxt
        else:
            raise UnionFailure("Boundary walk did not close.", {"start": coords[start].tolist()})
        loops.append(loop)
    return loops


def _rings_from_loops(coords: np.ndarray, loops: Iterable[List[int]], eps: float) -> List[Ring]:
    rings = []
    for loop in loops:
        pts = simplify_collinear(coords[np.asarray(loop, dtype=np.int64)], _COLLINEAR_FRACTION * eps)
        if pts.shape[0] < 3:
            continue
        if not np.isfinite(pts).all():
            raise UnionFailure("Non-finite coordinates in union result.", {"n_points": int(pts.shape[0])})
        perimeter = float(np.linalg.norm(np.roll(pts, -1, axis=0) - pts, axis=1).sum())
        x, y = pts[:, 0], pts[:, 1]
        area = 0.5 * abs(float(np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))))
        if area <= eps * perimeter:
            continue
        rings.append(Ring(pts))
    return rings


def union(a: Shape, b: Shape, *, eps: Optional[float] = None) -> Region:
    """
    Union of two shapes.

    Parameters
    ----------
    a, b : Ring or Region
        Rings are normalized to CW; Regions must already follow CW-outer/CCW-hole.
    eps : float, optional
        Absolute coincidence tolerance (default: `default_eps(a, b)`).

    Returns
    -------
    Region
        New region; the inputs are not modified.

    Raises
    ------
    UnionFailure
        If the kept edges cannot be walked into closed rings.
    """
    ra, rb = as_region(a), as_region(b)
    if not ra.rings:
        return rb
    if not rb.rings:
        return ra
    if eps is None:
        eps = default_eps(ra, rb)
    if _boxes_apart(ra, rb, eps):
        return Region(ra.rings + rb.rings)

    a_s, a_e = ra.edges()
    b_s, b_e = rb.edges()
    coords, a_edges, b_edges = split_boundaries(a_s, a_e, b_s, b_e, eps)
    kept = _select_edges(coords, a_edges, b_edges)
    loops = _trace_rings(coords, kept)
    rings = _rings_from_loops(coords, loops, eps)
    if not rings:
        raise UnionFailure("Union produced no rings.", {"edges_a": len(a_edges), "edges_b": len(b_edges)})
    logger.debug("[union] %d + %d edges -> %d kept, %d ring(s)", len(a_edges), len(b_edges), len(kept), len(rings))
    return Region(tuple(rings))


def _tree_reduce(regions: List[Region], eps: float, mapper: Callable) -> Region:
    """Merge neighbouring pairs level by level; an odd leftover moves up unchanged."""
    def _pair(pair):
        return union(pair[0], pair[1], eps=eps)

    level = list(regions)
    while len(level) > 1:
        pairs = [(level[k], level[k + 1]) for k in range(0, len(level) - 1, 2)]
        merged = list(mapper(_pair, pairs))
        if len(level) % 2:
            merged.append(level[-1])
        level = merged
    return level[0]


def union_all(shapes: Sequence[Shape], *,
              eps: Optional[float] = None,
              parallel: bool = False,
              threads: Optional[int] = None) -> Region:
    """
    Union of an arbitrary collection of shapes.

    Parameters
    ----------
    shapes : sequence of Ring or Region
        Shapes to merge; Rings are normalized to CW first.
    eps : float, optional
        Absolute tolerance shared by every pairwise union (default: scaled to all shapes).
    parallel : bool, optional
        If True, merge pairs concurrently level by level (tree reduction).
    threads : int, optional
        Worker count for the tree reduction (default: min(16, cpu_count)).
        Fewer than 2 runs the same tree reduction serially.

    Returns
    -------
    Region

    Raises
    ------
    UnionFailure
        If `shapes` is empty or any pairwise union fails.
    """
    regions = [as_region(s) for s in shapes]
    if not regions:
        raise UnionFailure("No shapes to union.", {"n_shapes": 0})
    if eps is None:
        eps = default_eps(*regions)

    if parallel:
        threads = threads if isinstance(threads, int) else min(16, mp.cpu_count())
        logger.debug("[union_all] tree reduction over %d shapes (threads=%d)", len(regions), threads)
        if threads < 2:
            return _tree_reduce(regions, eps, map)
        with ThreadPool(threads) as tp:
            return _tree_reduce(regions, eps, tp.map)

    acc = regions[0]
    for r in regions[1:]:
        acc = union(acc, r, eps=eps)
    return acc
