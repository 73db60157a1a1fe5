# rectgeom/core/math3d.py
"""
Point types and scalar helpers.

Vec3 is used wherever a 2D operation must carry a depth coordinate through
unchanged (line clipping, clamping).
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Union

import numpy as np

# =============================================================================
# Point Types
# =============================================================================

@dataclass
class Vec2:
    """Point in rect space."""
    x: float = 0.0
    y: float = 0.0

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def distance(self, other: Vec2) -> float:
        return (other - self).length()


@dataclass
class Vec3:
    """Rect-space point with a depth coordinate riding along."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def lerp(self, other: Vec3, t: float) -> Vec3:
        return Vec3(
            lerp(self.x, other.x, t),
            lerp(self.y, other.y, t),
            lerp(self.z, other.z, t),
        )

    def xy(self) -> Vec2:
        return Vec2(self.x, self.y)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @staticmethod
    def from_array(a: np.ndarray) -> Vec3:
        return Vec3(float(a[0]), float(a[1]), float(a[2]))


@dataclass
class Vec4:
    """Packed (x, y, z, w); unpacked by Rect.from_vec4."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0


Point = Union[Vec2, Vec3]


def as_vec3(p: Point) -> Vec3:
    """Widen a point to Vec3 (z=0 for Vec2)."""
    if isinstance(p, Vec3):
        return p
    return Vec3(p.x, p.y, 0.0)


# =============================================================================
# Scalar Helpers
# =============================================================================

def clamp(value: float, min_val: float, max_val: float) -> float:
    return max(min_val, min(value, max_val))

def clamp01(value: float) -> float:
    return clamp(value, 0.0, 1.0)

def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t

def approximately(a: float, b: float, rel_tol: float = 1e-6, abs_tol: float = 1e-9) -> bool:
    """Float equality scaled to the magnitude of the operands."""
    return abs(b - a) < max(rel_tol * max(abs(a), abs(b)), abs_tol)
