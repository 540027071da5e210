# -*- coding: utf-8 -*-
# Thickline/thickline/clip/__init__.py

"""
Project: Thickline
Date: 10/18/2026

Clip Subfolder:
---------------
Polygon union engine.

Modules:
--------
- region:    Ring and Region immutable value types (area, orientation, membership).
- winding:   Vectorized winding numbers against directed edges.
- intersect: Vertex pooling and boundary splitting at mutual contacts.
- union:     Pairwise union, linear fold and thread-pool tree reduction.
"""

from .region import Ring, Region
from .union import union, union_all

__all__ = ["Ring", "Region", "union", "union_all"]
