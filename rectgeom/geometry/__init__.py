# rectgeom/geometry/__init__.py
"""Rect value type and the operations over it."""

from .rect import Rect, EdgeFlags, RectConstraintsAdjustment
from .ops import (
    lerp, lerp_unclamped,
    area, aspect,
    contains, covers, is_on_edge, get_edges, get_corners,
    intersects, encapsulate, intersects_line,
    clamp_point_to_rect, in_viewport_coordinates,
    approximately,
)
from .constraints import closest_intersection_meeting_constraints
