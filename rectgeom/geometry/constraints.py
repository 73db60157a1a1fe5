# rectgeom/geometry/constraints.py
"""
Constrained intersection.

Keeps the visible part of a panel (its intersection with some bounds) from
shrinking below a usable size. The adjustment is rule based and runs per
axis:

1. Disjoint rects: slide r against the nearest bound edge it is past, giving
   it the minimum size on that axis. Always reported as adjusted.
2. Intersection already big enough: returned unchanged.
3. Too small on an axis:
   - aligned with the bound's min edge  -> grow toward max
   - aligned with the bound's max edge  -> grow toward min
   - floating inside                    -> grow toward the nearer bound edge
     (clamped to the bounds), then snap the far edge to the far bound if it
     is still short.
"""

from __future__ import annotations
from typing import Tuple

from rectgeom.core import math3d
from rectgeom.core.config import GeometryConfig, DEFAULT_CONFIG
from rectgeom.geometry.rect import Rect, RectConstraintsAdjustment
from rectgeom.geometry.ops import intersects


def closest_intersection_meeting_constraints(
    r: Rect,
    bounds: Rect,
    min_width: float,
    min_height: float,
    config: GeometryConfig = None,
) -> Tuple[RectConstraintsAdjustment, Rect]:
    """
    Returns (adjustment, rect) where rect is the intersection of r and
    bounds, adjusted toward min_width x min_height.

    ADJUSTED_BUT_FAILED_TO_MEET_CONSTRAINTS means bounds itself is too small;
    callers must check for it.
    """
    cfg = config or DEFAULT_CONFIG

    hit, intersect = intersects(r, bounds)
    if not hit:
        return RectConstraintsAdjustment.ADJUSTED_TO_MEET_CONSTRAINTS, _pin_outside(
            r, bounds, min_width, min_height)

    if intersect.width >= min_width and intersect.height >= min_height:
        return RectConstraintsAdjustment.NONE, intersect

    x_lo, x_hi = intersect.x_min, intersect.x_max
    y_lo, y_hi = intersect.y_min, intersect.y_max

    if intersect.width < min_width:
        x_lo, x_hi = _grow_axis(x_lo, x_hi, bounds.x_min, bounds.x_max, min_width, cfg)

    if intersect.height < min_height:
        y_lo, y_hi = _grow_axis(y_lo, y_hi, bounds.y_min, bounds.y_max, min_height, cfg)

    result = Rect.from_min_max(x_lo, y_lo, x_hi, y_hi)
    if result.width >= min_width and result.height >= min_height:
        return RectConstraintsAdjustment.ADJUSTED_TO_MEET_CONSTRAINTS, result
    return RectConstraintsAdjustment.ADJUSTED_BUT_FAILED_TO_MEET_CONSTRAINTS, result


def _pin_outside(r: Rect, bounds: Rect, min_width: float, min_height: float) -> Rect:
    # axes r is not past keep r's own extent, even if that lies outside bounds
    pinned = r.copy()

    if r.x_min >= bounds.x_max:
        pinned.x_min = bounds.x_max - min_width
        pinned.x_max = bounds.x_max
    elif r.x_max <= bounds.x_min:
        pinned.x_min = bounds.x_min
        pinned.x_max = bounds.x_min + min_width

    if r.y_min >= bounds.y_max:
        pinned.y_min = bounds.y_max - min_height
        pinned.y_max = bounds.y_max
    elif r.y_max <= bounds.y_min:
        pinned.y_min = bounds.y_min
        pinned.y_max = bounds.y_min + min_height

    return pinned


def _grow_axis(lo: float, hi: float, bound_lo: float, bound_hi: float,
               min_size: float, cfg: GeometryConfig) -> Tuple[float, float]:
    def same(a: float, b: float) -> bool:
        return math3d.approximately(a, b, cfg.approx_rel_tol, cfg.approx_abs_tol)

    if same(lo, bound_lo):
        return lo, bound_lo + min_size
    if same(hi, bound_hi):
        return bound_hi - min_size, hi

    if abs(lo - bound_lo) < abs(bound_hi - hi):
        lo = math3d.clamp(hi - min_size, bound_lo, bound_hi)
        if hi - lo < min_size:
            hi = bound_hi
    else:
        # ties grow toward the max edge
        hi = math3d.clamp(lo + min_size, bound_lo, bound_hi)
        if hi - lo < min_size:
            lo = bound_lo
    return lo, hi
