# -*- coding: utf-8 -*-
# Thickline/thickline/clip/region.py

"""
Project: Thickline
Date: 10/18/2026

Purpose
-------
Immutable value types handed between the shape generator, the union engine and the
caller.

    Ring   : one simple closed boundary, stored open (first point not repeated).
    Region : a tuple of non-crossing Rings; outer boundaries are CW, holes are CCW.

Notes
-----
- Coordinate arrays are copied on construction and flagged read-only.
- `Region.area` counts CW rings positive and CCW rings negative, so an outer ring
  with a hole yields the area between them.
- Membership uses the nonzero winding rule, which also tolerates overlapping rings.
"""

from dataclasses import dataclass, field
from typing import Iterator, Tuple
import numpy as np

from ..topology._validation import _assert_xy
from ..topology.loop import open_ring, signed_area, orientation, close_and_orient
from .winding import winding_numbers

__all__ = ["Ring", "Region"]


@dataclass(frozen=True, eq=False)
class Ring:
    """
    Simple closed polygon boundary.

    Parameters
    ----------
    points : array-like
        (N, 2) vertices. An explicitly closed input (last == first) is opened.

    Raises
    ------
    ValueError
        If the array is malformed, non-finite, or has fewer than 3 distinct points.
    """
    points: np.ndarray

    def __post_init__(self):
        pts = np.array(self.points, dtype=np.float64)
        _assert_xy(pts, check_finite=True)
        pts = open_ring(pts)
        if np.unique(pts, axis=0).shape[0] < 3:
            raise ValueError("A ring needs at least 3 distinct points (got {}).".format(pts.shape[0]))
        pts.setflags(write=False)
        object.__setattr__(self, "points", pts)

    def __len__(self) -> int:
        return int(self.points.shape[0])

    def __repr__(self) -> str:
        return "Ring(n={}, orientation={}, area={:.6g})".format(len(self), self.orientation, self.area)

    @property
    def signed_area(self) -> float:
        """Shoelace area; positive for CCW."""
        return signed_area(self.points)

    @property
    def area(self) -> float:
        return abs(self.signed_area)

    @property
    def orientation(self) -> str:
        return orientation(self.points)

    @property
    def is_hole(self) -> bool:
        return self.orientation == "CCW"

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """(xmin, ymin, xmax, ymax)"""
        lo = self.points.min(axis=0)
        hi = self.points.max(axis=0)
        return float(lo[0]), float(lo[1]), float(hi[0]), float(hi[1])

    def reversed(self) -> "Ring":
        return Ring(self.points[::-1])

    def oriented(self, desired: str = "CW") -> "Ring":
        """Return this ring (or its reversal) with the requested orientation."""
        if self.orientation == desired:
            return self
        return Ring(close_and_orient(self.points, desired=desired))

    def closed(self) -> np.ndarray:
        """(N+1, 2) copy with the first point repeated at the end."""
        return np.vstack((self.points, self.points[:1]))

    def edges(self) -> Tuple[np.ndarray, np.ndarray]:
        """Edge start and end points, each (N, 2)."""
        return self.points, np.roll(self.points, -1, axis=0)


@dataclass(frozen=True, eq=False)
class Region:
    """
    Planar area described by non-crossing rings (outer CW, holes CCW).

    An empty Region is allowed as a value but `outline` never returns one.
    """
    rings: Tuple[Ring, ...] = field(default_factory=tuple)

    def __post_init__(self):
        rings = tuple(self.rings)
        for r in rings:
            if not isinstance(r, Ring):
                raise TypeError("Region rings must be Ring instances, got {!r}.".format(type(r)))
        object.__setattr__(self, "rings", rings)

    @classmethod
    def from_ring(cls, ring: Ring) -> "Region":
        """Single-ring region with the ring normalized to CW."""
        return cls((ring.oriented("CW"),))

    def __iter__(self) -> Iterator[Ring]:
        return iter(self.rings)

    def __len__(self) -> int:
        return len(self.rings)

    def __repr__(self) -> str:
        return "Region(outers={}, holes={}, area={:.6g})".format(len(self.outers), len(self.holes), self.area)

    @property
    def num_rings(self) -> int:
        return len(self.rings)

    @property
    def outers(self) -> Tuple[Ring, ...]:
        return tuple(r for r in self.rings if not r.is_hole)

    @property
    def holes(self) -> Tuple[Ring, ...]:
        return tuple(r for r in self.rings if r.is_hole)

    @property
    def area(self) -> float:
        return -float(sum(r.signed_area for r in self.rings))

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        if not self.rings:
            raise ValueError("Empty region has no bounds.")
        b = np.array([r.bounds for r in self.rings])
        return float(b[:, 0].min()), float(b[:, 1].min()), float(b[:, 2].max()), float(b[:, 3].max())

    def edges(self) -> Tuple[np.ndarray, np.ndarray]:
        """Concatenated edge start/end arrays over all rings, each (E, 2)."""
        if not self.rings:
            empty = np.empty((0, 2), dtype=np.float64)
            return empty, empty
        starts, ends = zip(*(r.edges() for r in self.rings))
        return np.concatenate(starts), np.concatenate(ends)

    def contains(self, query) -> np.ndarray:
        """
        Nonzero-winding membership test.

        Parameters
        ----------
        query : array-like
            One point (2,) or a batch (M, 2).

        Returns
        -------
        bool or np.ndarray
            A bool for a single point, else a bool array of shape (M,).
        """
        q = np.asarray(query, dtype=np.float64)
        single = q.ndim == 1
        a, b = self.edges()
        inside = winding_numbers(np.atleast_2d(q), a, b) != 0
        return bool(inside[0]) if single else inside
