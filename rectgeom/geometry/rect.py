# rectgeom/geometry/rect.py
"""
Rect - axis-aligned rectangle value type.

Stored as origin + extent. Edge accessors follow the usual engine
convention: x_max is always x + width, and assigning a min edge keeps the
opposite max edge where it was.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, Flag
from typing import Sequence, Union

import numpy as np

from rectgeom.core.math3d import Vec2, Vec4, Point


# =============================================================================
# Enums
# =============================================================================

class EdgeFlags(Flag):
    """Edges of a rect a point lies on. Corners set two bits."""
    NONE = 0
    LEFT = 1
    TOP = 2
    RIGHT = 4
    BOTTOM = 8


class RectConstraintsAdjustment(Enum):
    NONE = 0
    ADJUSTED_TO_MEET_CONSTRAINTS = 1
    ADJUSTED_BUT_FAILED_TO_MEET_CONSTRAINTS = 2


# =============================================================================
# Rect
# =============================================================================

@dataclass
class Rect:
    """Rectangle with origin (x, y) and size (width, height)."""
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    # -------------------------------------------------------------------------
    # Edges

    @property
    def x_min(self) -> float:
        return self.x

    @x_min.setter
    def x_min(self, value: float):
        old_max = self.x_max
        self.x = value
        self.width = old_max - value

    @property
    def x_max(self) -> float:
        return self.x + self.width

    @x_max.setter
    def x_max(self, value: float):
        self.width = value - self.x

    @property
    def y_min(self) -> float:
        return self.y

    @y_min.setter
    def y_min(self, value: float):
        old_max = self.y_max
        self.y = value
        self.height = old_max - value

    @property
    def y_max(self) -> float:
        return self.y + self.height

    @y_max.setter
    def y_max(self, value: float):
        self.height = value - self.y

    # -------------------------------------------------------------------------
    # Derived

    @property
    def center(self) -> Vec2:
        return Vec2(self.x + self.width / 2, self.y + self.height / 2)

    @property
    def min(self) -> Vec2:
        return Vec2(self.x_min, self.y_min)

    @property
    def max(self) -> Vec2:
        return Vec2(self.x_max, self.y_max)

    @property
    def size(self) -> Vec2:
        return Vec2(self.width, self.height)

    def contains_point(self, p: Point) -> bool:
        """Half-open test: min edges inside, max edges outside."""
        return self.x_min <= p.x < self.x_max and self.y_min <= p.y < self.y_max

    def overlaps(self, other: Rect) -> bool:
        """Open interiors intersect. Rects that only share an edge don't overlap."""
        return (
            other.x_max > self.x_min and
            other.x_min < self.x_max and
            other.y_max > self.y_min and
            other.y_min < self.y_max
        )

    def copy(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    def to_array(self, dtype=np.float32) -> np.ndarray:
        return np.array([self.x, self.y, self.width, self.height], dtype=dtype)

    # -------------------------------------------------------------------------
    # Constructors

    @staticmethod
    def from_min_max(x_min: float, y_min: float, x_max: float, y_max: float) -> Rect:
        return Rect(x_min, y_min, x_max - x_min, y_max - y_min)

    @staticmethod
    def from_vec4(v: Vec4) -> Rect:
        """Unpack (x, y, z, w) as (x, y, width, height)."""
        return Rect(v.x, v.y, v.z, v.w)

    @staticmethod
    def from_array(a: Union[np.ndarray, Sequence[float]]) -> Rect:
        a = np.asarray(a, dtype=np.float64)
        return Rect(float(a[0]), float(a[1]), float(a[2]), float(a[3]))

    @staticmethod
    def zero() -> Rect:
        return Rect(0.0, 0.0, 0.0, 0.0)

    @staticmethod
    def unit() -> Rect:
        return Rect(0.0, 0.0, 1.0, 1.0)
