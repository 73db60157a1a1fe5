# rectgeom/geometry/ops.py
"""
Rect operations.

Pure functions over Rect / Vec2 / Vec3 values. Nothing here raises on
degenerate input: sentinel results come back instead (False + zero rect,
NaN, the unit rect) and the degenerate cases that callers usually want to
know about are reported through rectgeom.core.diagnostics.
"""

from __future__ import annotations
import math
from typing import Optional, Tuple, Union

from rectgeom.core import math3d
from rectgeom.core.math3d import Vec2, Vec3, Point, as_vec3
from rectgeom.core.bounds import Bounds
from rectgeom.core.config import GeometryConfig, DEFAULT_CONFIG, DEFAULT_EPSILON
from rectgeom.core.diagnostics import GeometryWarning, report_degenerate
from rectgeom.core.signal import SignalBridge
from rectgeom.geometry.rect import Rect, EdgeFlags


# =============================================================================
# Interpolation
# =============================================================================

def lerp(r1: Rect, r2: Rect, t: float) -> Rect:
    """Component-wise interpolation, t clamped to [0, 1]."""
    return lerp_unclamped(r1, r2, math3d.clamp01(t))


def lerp_unclamped(r1: Rect, r2: Rect, t: float) -> Rect:
    return Rect(
        math3d.lerp(r1.x, r2.x, t),
        math3d.lerp(r1.y, r2.y, t),
        math3d.lerp(r1.width, r2.width, t),
        math3d.lerp(r1.height, r2.height, t),
    )


# =============================================================================
# Size
# =============================================================================

def area(r: Rect) -> float:
    return r.width * r.height


def aspect(r: Rect, bridge: Optional[SignalBridge] = None) -> float:
    """width / height, or NaN (reported) when height is not positive."""
    if r.height <= 0:
        report_degenerate(GeometryWarning.NON_POSITIVE_HEIGHT, r, bridge)
        return math.nan
    return r.width / r.height


# =============================================================================
# Containment
# =============================================================================

def contains(r: Rect, r2: Rect) -> bool:
    """
    True if r2 lies within r.

    The min corner of r2 uses the half-open point test; the max corner may
    sit on r's max edges, so every non-degenerate rect contains itself.
    """
    if not r.contains_point(r2.min):
        return False
    return r.x_min <= r2.x_max <= r.x_max and r.y_min <= r2.y_max <= r.y_max


def covers(r: Rect, other: Union[Rect, Point], epsilon: float = DEFAULT_EPSILON) -> bool:
    """
    Like contains, but r2 (or a point) may share r's edges within epsilon.
    """
    if isinstance(other, Rect):
        x_lo, x_hi, y_lo, y_hi = other.x_min, other.x_max, other.y_min, other.y_max
    else:
        x_lo = x_hi = other.x
        y_lo = y_hi = other.y

    if x_lo < r.x_min - epsilon:
        return False
    if x_hi > r.x_max + epsilon:
        return False
    if y_lo < r.y_min - epsilon:
        return False
    if y_hi > r.y_max + epsilon:
        return False
    return True


def is_on_edge(point: Point, r: Rect, epsilon: float = DEFAULT_EPSILON) -> bool:
    """
    True if point.x is within epsilon of either vertical edge line, or
    point.y of either horizontal edge line.

    The edges are treated as infinite lines: (5, 100) is "on edge" of
    Rect(5, 0, 10, 10).
    """
    if abs(point.x - r.x_min) <= epsilon:
        return True
    if abs(point.x - r.x_max) <= epsilon:
        return True
    if abs(point.y - r.y_min) <= epsilon:
        return True
    if abs(point.y - r.y_max) <= epsilon:
        return True
    return False


def get_edges(r: Rect, p: Point, config: GeometryConfig = None) -> EdgeFlags:
    """Edges colinear with p. A corner yields both adjacent edges."""
    cfg = config or DEFAULT_CONFIG

    def same(a: float, b: float) -> bool:
        return math3d.approximately(a, b, cfg.approx_rel_tol, cfg.approx_abs_tol)

    edges = EdgeFlags.NONE
    if same(p.x, r.x_min):
        edges |= EdgeFlags.LEFT
    if same(p.x, r.x_max):
        edges |= EdgeFlags.RIGHT
    if same(p.y, r.y_max):
        edges |= EdgeFlags.TOP
    if same(p.y, r.y_min):
        edges |= EdgeFlags.BOTTOM
    return edges


def get_corners(r: Rect) -> Tuple[Vec2, Vec2, Vec2, Vec2]:
    """(bottom_left, top_left, top_right, bottom_right)"""
    return (
        r.min,
        Vec2(r.x_min, r.y_max),
        r.max,
        Vec2(r.x_max, r.y_min),
    )


# =============================================================================
# Intersection
# =============================================================================

def intersects(r: Rect, r2: Rect) -> Tuple[bool, Rect]:
    """
    Returns (hit, intersection). On a miss the intersection is a zero rect.

    When one rect covers the other the covered rect is returned as-is, so
    nested rects don't pick up min/max rounding.
    """
    if covers(r, r2):
        return True, r2.copy()

    if covers(r2, r):
        return True, r.copy()

    if r.overlaps(r2):
        return True, Rect.from_min_max(
            max(r.x_min, r2.x_min),
            max(r.y_min, r2.y_min),
            min(r.x_max, r2.x_max),
            min(r.y_max, r2.y_max),
        )

    return False, Rect.zero()


def encapsulate(r: Rect, r2: Rect) -> Rect:
    """Smallest rect containing both r and r2."""
    return Rect.from_min_max(
        min(r.x_min, r2.x_min),
        min(r.y_min, r2.y_min),
        max(r.x_max, r2.x_max),
        max(r.y_max, r2.y_max),
    )


def intersects_line(r: Rect, p1: Point, p2: Point,
                    config: GeometryConfig = None) -> Tuple[bool, Vec3, Vec3]:
    """
    Clip the segment p1-p2 to r.

    Returns (hit, p1_clipped, p2_clipped). A segment fully inside r is a hit
    with both endpoints unchanged. Clipped endpoints are interpolated along
    the original segment, so z is carried through.
    """
    cfg = config or DEFAULT_CONFIG
    a = as_vec3(p1)
    b = as_vec3(p2)

    a_inside = r.contains_point(a)
    b_inside = r.contains_point(b)
    if a_inside and b_inside:
        return True, a, b

    length = a.xy().distance(b.xy())
    center = r.center
    box = Bounds(Vec3(center.x, center.y, 0.0), Vec3(r.width, r.height, cfg.ray_depth))

    def clip_from(start: Vec3, end: Vec3) -> Optional[Vec3]:
        # rays are cast in the z=0 plane of the box
        dist = box.intersect_ray(
            Vec3(start.x, start.y, 0.0),
            Vec3(end.x - start.x, end.y - start.y, 0.0),
        )
        if dist is None or dist > length:
            return None
        return start.lerp(end, dist / length if length > 0 else 0.0)

    hit = False
    a_out, b_out = a, b

    if not a_inside:
        clipped = clip_from(a, b)
        if clipped is not None:
            a_out = clipped
            hit = True

    if not b_inside:
        clipped = clip_from(b, a)
        if clipped is not None:
            b_out = clipped
            hit = True

    return hit, a_out, b_out


# =============================================================================
# Clamping / conversion
# =============================================================================

def clamp_point_to_rect(r: Rect, p: Point, config: GeometryConfig = None) -> Tuple[bool, Point]:
    """
    Returns (changed, point). A point outside r moves to the closest point
    on r; z (if any) is preserved. The returned point has p's type.
    """
    if r.contains_point(p):
        return False, p

    cfg = config or DEFAULT_CONFIG
    v = as_vec3(p)
    center = r.center
    box = Bounds(Vec3(center.x, center.y, v.z), Vec3(r.width, r.height, cfg.clamp_depth))
    clamped = box.closest_point(v)

    if isinstance(p, Vec3):
        return True, clamped
    return True, clamped.xy()


def in_viewport_coordinates(r: Rect, reference: Rect,
                            bridge: Optional[SignalBridge] = None) -> Rect:
    """
    Express r in reference's normalized [0, 1] x [0, 1] space.

    A collapsed reference (width or height <= 0) yields the unit rect.
    """
    if reference.width <= 0 or reference.height <= 0:
        report_degenerate(GeometryWarning.COLLAPSED_REFERENCE, reference, bridge)
        return Rect.unit()

    return Rect(
        (r.x - reference.x) / reference.width,
        (r.y - reference.y) / reference.height,
        r.width / reference.width,
        r.height / reference.height,
    )


def approximately(r: Rect, r2: Rect, epsilon: float = DEFAULT_EPSILON) -> bool:
    if abs(r.x - r2.x) > epsilon:
        return False
    if abs(r.y - r2.y) > epsilon:
        return False
    if abs(r.width - r2.width) > epsilon:
        return False
    if abs(r.height - r2.height) > epsilon:
        return False
    return True
