# rectgeom/__init__.py
"""
rectgeom - Axis-aligned rect geometry for UI panel layout.

Core components:
- Rect: value type (origin + size) with engine-style edge accessors
- geometry ops: interpolation, containment, intersection, clipping
- closest_intersection_meeting_constraints: min-size aware intersection
- SignalBridge: optional channel for degenerate-geometry diagnostics
"""

from .core import (
    # Math
    Vec2, Vec3, Vec4,

    # Config / diagnostics
    GeometryConfig,
    DEFAULT_CONFIG,
    SignalBridge,
    SIGNAL_DEGENERATE_GEOMETRY,
    GeometryWarning,
)

from .geometry import (
    Rect,
    EdgeFlags,
    RectConstraintsAdjustment,
    lerp, lerp_unclamped,
    area, aspect,
    contains, covers, is_on_edge, get_edges, get_corners,
    intersects, encapsulate, intersects_line,
    clamp_point_to_rect, in_viewport_coordinates,
    approximately,
    closest_intersection_meeting_constraints,
)

__version__ = '0.1.0'

__all__ = [
    # Math
    'Vec2', 'Vec3', 'Vec4',

    # Config / diagnostics
    'GeometryConfig',
    'DEFAULT_CONFIG',
    'SignalBridge',
    'SIGNAL_DEGENERATE_GEOMETRY',
    'GeometryWarning',

    # Rect
    'Rect',
    'EdgeFlags',
    'RectConstraintsAdjustment',
    'lerp', 'lerp_unclamped',
    'area', 'aspect',
    'contains', 'covers', 'is_on_edge', 'get_edges', 'get_corners',
    'intersects', 'encapsulate', 'intersects_line',
    'clamp_point_to_rect', 'in_viewport_coordinates',
    'approximately',
    'closest_intersection_meeting_constraints',
]
