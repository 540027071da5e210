# -*- coding: utf-8 -*-
# Thickline/thickline/offset/__init__.py

"""
Project: Thickline
Date: 10/18/2026

Offset Subfolder:
-----------------
Everything that happens before the union.

- rails:  Segment frames (direction, length, unit normal, degenerate mask) and the
          offset rails at +/- thickness/2.
- shapes: Joint disks (one per point) and segment rectangles (one per non-degenerate
          segment), returned as Rings.
"""

from .rails import SegmentFrames, Rails, segment_frames, rails
from .shapes import unit_circle, joint_disk, joint_disks, segment_rectangles, primitive_shapes

__all__ = [
    "SegmentFrames", "Rails", "segment_frames", "rails",
    "unit_circle", "joint_disk", "joint_disks", "segment_rectangles", "primitive_shapes",
]
