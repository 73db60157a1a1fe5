# rectgeom/core/config.py
"""
Tolerances shared by the geometry operations.
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class GeometryConfig:
    epsilon: float = 1e-4          # covers / is_on_edge / approximately
    approx_rel_tol: float = 1e-6   # edge alignment (get_edges, constraint solver)
    approx_abs_tol: float = 1e-9
    clamp_depth: float = 1e-5      # thin box used by clamp_point_to_rect
    ray_depth: float = 1e-4        # thin box used by intersects_line


DEFAULT_CONFIG = GeometryConfig()
DEFAULT_EPSILON = DEFAULT_CONFIG.epsilon
