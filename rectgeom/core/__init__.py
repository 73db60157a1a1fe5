# rectgeom/core/__init__.py
"""Vectors, boxes, config and diagnostics shared by the geometry modules."""

from .math3d import Vec2, Vec3, Vec4, Point, as_vec3, clamp, clamp01, lerp, approximately
from .bounds import Bounds
from .config import GeometryConfig, DEFAULT_CONFIG, DEFAULT_EPSILON
from .signal import SignalBridge, Connection, SIGNAL_DEGENERATE_GEOMETRY
from .diagnostics import GeometryWarning, report_degenerate
