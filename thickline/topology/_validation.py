# -*- coding: utf-8 -*-
# Thickline/thickline/topology/_validation.py

"""
Project: Thickline
Date: 10/18/2026

Purpose:
--------
Centralized validation utilities shared by ring, polyline and shape modules so that
point arrays are checked the same way everywhere.

Main Tasks:
   1. Validate point array structure and data integrity.
   2. Provide an explicit closure predicate for rings that repeat their first point.
"""

from typing import Optional
import numpy as np


def _assert_xy(points: Optional[np.ndarray], check_finite: bool = False, name: str = "points") -> None:
    """
    Raise ValueError unless `points` is an (N, 2) array; with `check_finite`, every
    row must also be free of NaN/Inf. `name` labels the array in the message.
    """
    if points is None:
        raise ValueError("No {} given (got None).".format(name))

    shape = np.shape(points)
    if len(shape) != 2 or shape[1] != 2:
        raise ValueError("{} must have shape (N, 2), got {}.".format(name, shape))

    if check_finite:
        bad_rows = ~np.isfinite(points).all(axis=1)
        if bad_rows.any():
            raise ValueError("{} has {} non-finite row(s), first at row {}.".format(
                name, int(bad_rows.sum()), int(np.argmax(bad_rows))))


def _is_exactly_closed(points: np.ndarray, tol: float) -> bool:
    """First and last rows coincide within `tol` (per coordinate)."""
    if points.shape[0] < 2:
        return False
    return bool(np.abs(points[-1] - points[0]).max() <= tol)
