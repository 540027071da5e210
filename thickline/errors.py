# -*- coding: utf-8 -*-
# Thickline/thickline/errors.py

"""
Project: Thickline
Date: 10/18/2026

Purpose
-------
Provide typed exceptions for the outline pipeline with compact, context-aware messages
so that input validation, configuration and polygon-union failures are reported the
same way everywhere.

Main Tasks
----------
    1. Define OutlineError(message, context) with a compact context suffix in __str__.
    2. Provide typed subclasses: InsufficientPoints, InvalidThickness, UnionFailure,
       ConfigError.
    3. Supply _format_context helper and expose public names via __all__.

Notes
-----
- Context is optional; long values are truncated for readability.
- Consecutive duplicate points are not an error: the segment is skipped silently.
"""

__all__ = [
    "OutlineError",
    "InsufficientPoints",
    "InvalidThickness",
    "UnionFailure",
    "ConfigError",
]


def _format_context(ctx):
    """Return a compact ' | key1=val1, key2=val2' string or '' if no context."""
    if not ctx:
        return ""
    parts = []
    for k in sorted(ctx.keys()):
        sv = repr(ctx[k])
        if len(sv) > 120:
            sv = sv[:117] + "..."
        parts.append("{}={}".format(k, sv))
    return " | " + ", ".join(parts)


class OutlineError(Exception):
    """
    Base class for all errors raised by the outline pipeline.

    Parameters
    ----------
    message : str
        Human-readable error.
    context : dict, optional
        Extra fields to append in the string form (e.g., {"thickness": -1.0}).
    """
    def __init__(self, message, context=None):
        self.context = dict(context) if context else None
        super(OutlineError, self).__init__(message)

    def __str__(self):
        base = super(OutlineError, self).__str__()
        return base + _format_context(self.context)


class InsufficientPoints(OutlineError, ValueError):
    """
    Fewer points than the minimum accepted by `outline` were supplied.
    """


class InvalidThickness(OutlineError, ValueError):
    """
    Thickness is zero, negative, NaN or infinite.
    """


class UnionFailure(OutlineError):
    """
    The union engine could not rebuild a consistent boundary:
      - a boundary walk reached a vertex with no outgoing edge
      - a traced ring is non-finite
    No partial region is ever returned alongside this error.
    """


class ConfigError(OutlineError, ValueError):
    """
    A configuration override has an unknown section or an out-of-range value.
    """
