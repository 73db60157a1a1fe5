# rectgeom/core/diagnostics.py
"""
Diagnostics for degenerate geometry.

Operations that hit a degenerate input return a sentinel value and report
the condition here: a logged warning plus an optional signal so callers can
react without parsing log output.
"""

from __future__ import annotations
from enum import Enum, auto
from typing import Optional, TYPE_CHECKING
import logging

from .signal import SignalBridge, SIGNAL_DEGENERATE_GEOMETRY

if TYPE_CHECKING:
    from rectgeom.geometry.rect import Rect

logger = logging.getLogger(__name__)


class GeometryWarning(Enum):
    NON_POSITIVE_HEIGHT = auto()    # aspect of a rect with height <= 0
    COLLAPSED_REFERENCE = auto()    # viewport reference with width or height <= 0


_MESSAGES = {
    GeometryWarning.NON_POSITIVE_HEIGHT: "aspect: height is not positive",
    GeometryWarning.COLLAPSED_REFERENCE: "in_viewport_coordinates: reference rect is collapsed",
}


def report_degenerate(warning: GeometryWarning, rect: Rect,
                      bridge: Optional[SignalBridge] = None) -> GeometryWarning:
    logger.warning(f"{_MESSAGES[warning]}: {rect}")
    if bridge is not None:
        bridge.emit(SIGNAL_DEGENERATE_GEOMETRY, warning, rect)
    return warning
