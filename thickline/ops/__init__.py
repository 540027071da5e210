# -*- coding: utf-8 -*-
# Thickline/thickline/ops/__init__.py

"""
Project: Thickline
Date: 10/18/2026

Ops Subfolder:
--------------
Lightweight 2D polyline utilities.

Contents
--------
- basic:    Input coercion, consecutive-duplicate removal, cumulative arclength.
- analysis: Point-to-polyline distance.
"""

from .basic import as_points, drop_consecutive_duplicates, cumulative_arclength
from .analysis import point_polyline_distance

__all__ = [
    # basic
    "as_points", "drop_consecutive_duplicates", "cumulative_arclength",
    # analysis
    "point_polyline_distance",
]
