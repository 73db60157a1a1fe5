# rectgeom/core/bounds.py
"""
Bounds - 3D axis-aligned box.

Rect clipping and clamping are expressed against a box with a very small
depth, so the third coordinate of a point passes through untouched.
"""

from __future__ import annotations
from typing import Optional

import numpy as np

from .math3d import Vec3

_PARALLEL_EPS = 1e-12


class Bounds:
    """Axis-aligned box stored as center + extents."""

    def __init__(self, center: Vec3, size: Vec3):
        self.center = center.to_array()
        self.extents = np.abs(size.to_array()) * 0.5

    @property
    def min(self) -> np.ndarray:
        return self.center - self.extents

    @property
    def max(self) -> np.ndarray:
        return self.center + self.extents

    def contains(self, p: Vec3) -> bool:
        a = p.to_array()
        return bool(np.all(a >= self.min) and np.all(a <= self.max))

    def closest_point(self, p: Vec3) -> Vec3:
        """Closest point on or inside the box."""
        return Vec3.from_array(np.clip(p.to_array(), self.min, self.max))

    def intersect_ray(self, origin: Vec3, direction: Vec3) -> Optional[float]:
        """
        Distance along the normalized direction at which the ray enters the
        box, 0.0 if the origin is already inside, None on a miss.
        """
        o = origin.to_array()
        d = direction.to_array()
        length = np.linalg.norm(d)
        if length < _PARALLEL_EPS:
            return 0.0 if self.contains(origin) else None
        d = d / length

        lo, hi = self.min, self.max
        parallel = np.abs(d) < _PARALLEL_EPS
        if np.any(parallel & ((o < lo) | (o > hi))):
            return None

        moving = ~parallel
        t1 = (lo[moving] - o[moving]) / d[moving]
        t2 = (hi[moving] - o[moving]) / d[moving]
        t_near = float(np.max(np.minimum(t1, t2)))
        t_far = float(np.min(np.maximum(t1, t2)))

        t_enter = max(t_near, 0.0)
        if t_far < t_enter:
            return None
        return t_enter

    def __repr__(self) -> str:
        return f"Bounds(center={self.center.tolist()}, extents={self.extents.tolist()})"
