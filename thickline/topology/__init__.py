# -*- coding: utf-8 -*-
# Thickline/thickline/topology/__init__.py

"""
Project: Thickline
Date: 10/18/2026

Topology Subfolder:
-------------------
Ring-level operations on closed 2D loops.

Modules:
--------
- loop:        Opening of explicitly closed loops, signed area, orientation (CW/CCW),
               orientation canonicalization and collinear vertex cleanup.

- _validation: Shared validation utilities (array structure, finite values, closure).
"""

__all__ = ["loop"]
