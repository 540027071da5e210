# -*- coding: utf-8 -*-
# Thickline/thickline/__init__.py

"""
Project: Thickline
Date: 10/18/2026

Modules:
--------
- api:       Public facade.
               * outline(points, thickness, config=None)       → Region
               * outline_xy(x, y, thickness, config=None)      → NaN-separated (x, y)
               * to_patch_xy(region)                           → NaN-separated (x, y)

- config:    DEFAULTS policy dict (disk resolution, union tolerance and threading,
             single-point handling) and resolve_config for user overrides.

- errors:    Typed exceptions (InsufficientPoints, InvalidThickness, UnionFailure,
             ConfigError) with compact context in their string form.

- ops:       Polyline utilities: input coercion, duplicate removal, arclength and
             point-to-polyline distance.

- topology:  Ring-level operations: signed area, orientation, canonical orientation,
             collinear vertex cleanup, shared validation.

- offset:    Geometry preprocessor (segment frames, offset rails) and shape generator
             (joint disks, segment rectangles).

- clip:      Polygon union engine: Ring/Region value types, winding numbers, boundary
             splitting and the pairwise/folded union.

Usage:
    from thickline import outline
    region = outline([(0, 0), (10, 0)], 2.0)
"""

from .api import outline, outline_xy, to_patch_xy
from .clip.region import Ring, Region
from .errors import OutlineError, InsufficientPoints, InvalidThickness, UnionFailure, ConfigError

__all__ = [
    "outline", "outline_xy", "to_patch_xy",
    "Ring", "Region",
    "OutlineError", "InsufficientPoints", "InvalidThickness", "UnionFailure", "ConfigError",
]
