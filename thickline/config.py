# -*- coding: utf-8 -*-
# Thickline/thickline/config.py

"""
Project: Thickline
Date: 10/18/2026

Purpose
-------
Policy defaults for the outline pipeline and a resolver that merges user overrides on
top of them. The resolved dict is the only configuration object passed around.

Schema
------
{
  "disk":  {"n_vertices": int},                  # vertices per joint disk
  "union": {"eps_rel": float,                    # tolerance relative to coordinate scale
            "parallel": bool,                    # tree reduction on a ThreadPool
            "threads": Optional[int]},           # worker count (None -> cpu based)
  "input": {"allow_single_point": bool},         # one point -> single disk ("dot")
}

Notes
-----
- Disk resolution drives the area error of the result: an inscribed n-gon underestimates
  a circle's area by a relative (1 - sin(2*pi/n) * n / (2*pi)), about 0.16% at n=64
  and 0.016% at n=200.
"""

from typing import Any, Dict, Optional
import copy
import math

from .errors import ConfigError

__all__ = ["DEFAULTS", "MIN_DISK_VERTICES", "resolve_config"]

MIN_DISK_VERTICES = 8

DEFAULTS: Dict[str, Any] = {
    "disk": {
        "n_vertices": 200,
    },
    "union": {
        "eps_rel": 1e-9,
        "parallel": False,
        "threads": None,
    },
    "input": {
        "allow_single_point": True,
    },
}


def _deep_merge(base: Dict[str, Any], upd: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Deep-merge two nested dicts (right-biased), preserving types and not mutating inputs.
    """
    if not upd:
        return copy.deepcopy(base)
    out = copy.deepcopy(base)
    for k, v in upd.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = copy.deepcopy(v)
    return out


def _validate(cfg: Dict[str, Any]) -> None:
    unknown = sorted(set(cfg) - set(DEFAULTS))
    if unknown:
        raise ConfigError("Unknown configuration section(s).", {"sections": unknown})
    for section, keys in DEFAULTS.items():
        if not isinstance(cfg[section], dict):
            raise ConfigError("Configuration section must be a dict.", {"section": section})
        unknown = sorted(set(cfg[section]) - set(keys))
        if unknown:
            raise ConfigError("Unknown key(s) in configuration section.", {"section": section, "keys": unknown})

    n = cfg["disk"]["n_vertices"]
    if isinstance(n, bool) or not isinstance(n, int) or n < MIN_DISK_VERTICES:
        raise ConfigError(
            "disk.n_vertices must be an integer >= {}.".format(MIN_DISK_VERTICES),
            {"n_vertices": n},
        )

    eps_rel = cfg["union"]["eps_rel"]
    try:
        eps_rel = float(eps_rel)
    except (TypeError, ValueError):
        raise ConfigError("union.eps_rel must be a number.", {"eps_rel": eps_rel})
    if not (math.isfinite(eps_rel) and 0.0 < eps_rel < 1e-3):
        raise ConfigError("union.eps_rel must be in (0, 1e-3).", {"eps_rel": eps_rel})
    cfg["union"]["eps_rel"] = eps_rel

    for section, key in (("union", "parallel"), ("input", "allow_single_point")):
        if not isinstance(cfg[section][key], bool):
            raise ConfigError("{}.{} must be a bool.".format(section, key), {key: cfg[section][key]})

    threads = cfg["union"]["threads"]
    if threads is not None and (isinstance(threads, bool) or not isinstance(threads, int) or threads < 0):
        raise ConfigError("union.threads must be None or a non-negative integer.", {"threads": threads})


def resolve_config(config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Merge `config` over `DEFAULTS` and validate the result.

    Parameters
    ----------
    config : dict, optional
        Overrides with the same nested structure as `DEFAULTS`.

    Returns
    -------
    dict
        A fresh, fully-populated configuration dict.

    Raises
    ------
    ConfigError
        If a section or key is unknown, or a value has the wrong type or range.
    """
    cfg = _deep_merge(DEFAULTS, config or {})
    _validate(cfg)
    return cfg
