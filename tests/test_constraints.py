from rectgeom.geometry.rect import Rect, RectConstraintsAdjustment
from rectgeom.geometry.ops import approximately
from rectgeom.geometry.constraints import closest_intersection_meeting_constraints


BOUNDS = Rect(0.0, 0.0, 10.0, 10.0)


def test_covering_rect_returns_bounds_unadjusted():
    result, rect = closest_intersection_meeting_constraints(Rect(0.0, 0.0, 20.0, 20.0), BOUNDS, 5.0, 5.0)
    assert result == RectConstraintsAdjustment.NONE
    assert rect == BOUNDS

def test_big_enough_overlap_unadjusted():
    result, rect = closest_intersection_meeting_constraints(Rect(5.0, 5.0, 10.0, 10.0), BOUNDS, 4.0, 4.0)
    assert result == RectConstraintsAdjustment.NONE
    assert rect == Rect(5.0, 5.0, 5.0, 5.0)


# =============================================================================
# Disjoint
# =============================================================================

def test_disjoint_right_pins_to_right_edge():
    result, rect = closest_intersection_meeting_constraints(Rect(100.0, 0.0, 10.0, 10.0), BOUNDS, 4.0, 4.0)
    assert result == RectConstraintsAdjustment.ADJUSTED_TO_MEET_CONSTRAINTS
    assert rect.x_max == 10.0
    assert rect.width == 4.0
    # vertical extent overlapped, so r's own extent is kept
    assert rect.y == 0.0
    assert rect.height == 10.0

def test_disjoint_left_pins_to_left_edge():
    result, rect = closest_intersection_meeting_constraints(Rect(-50.0, 2.0, 10.0, 5.0), BOUNDS, 3.0, 3.0)
    assert result == RectConstraintsAdjustment.ADJUSTED_TO_MEET_CONSTRAINTS
    assert rect == Rect(0.0, 2.0, 3.0, 5.0)

def test_disjoint_above_and_below():
    _, above = closest_intersection_meeting_constraints(Rect(2.0, 40.0, 5.0, 5.0), BOUNDS, 2.0, 3.0)
    assert above == Rect(2.0, 7.0, 5.0, 3.0)

    _, below = closest_intersection_meeting_constraints(Rect(2.0, -40.0, 5.0, 5.0), BOUNDS, 2.0, 3.0)
    assert below == Rect(2.0, 0.0, 5.0, 3.0)

def test_disjoint_corner_pins_both_axes():
    _, rect = closest_intersection_meeting_constraints(Rect(20.0, 20.0, 5.0, 5.0), BOUNDS, 4.0, 2.0)
    assert rect == Rect(6.0, 8.0, 4.0, 2.0)

def test_disjoint_pin_may_extend_past_bounds():
    # min_width larger than bounds: left edge is not clamped
    result, rect = closest_intersection_meeting_constraints(Rect(100.0, 0.0, 10.0, 10.0), BOUNDS, 25.0, 1.0)
    assert result == RectConstraintsAdjustment.ADJUSTED_TO_MEET_CONSTRAINTS
    assert rect.x_min == -15.0
    assert rect.x_max == 10.0

def test_touching_edge_counts_as_disjoint():
    result, rect = closest_intersection_meeting_constraints(Rect(10.0, 0.0, 10.0, 10.0), BOUNDS, 4.0, 4.0)
    assert result == RectConstraintsAdjustment.ADJUSTED_TO_MEET_CONSTRAINTS
    assert rect == Rect(6.0, 0.0, 4.0, 10.0)


# =============================================================================
# Too narrow / too short
# =============================================================================

def test_narrow_on_left_edge_grows_right():
    result, rect = closest_intersection_meeting_constraints(Rect(-5.0, 0.0, 7.0, 10.0), BOUNDS, 4.0, 4.0)
    assert result == RectConstraintsAdjustment.ADJUSTED_TO_MEET_CONSTRAINTS
    assert rect == Rect(0.0, 0.0, 4.0, 10.0)

def test_narrow_on_right_edge_grows_left():
    result, rect = closest_intersection_meeting_constraints(Rect(9.0, 2.0, 10.0, 6.0), BOUNDS, 4.0, 4.0)
    assert result == RectConstraintsAdjustment.ADJUSTED_TO_MEET_CONSTRAINTS
    assert rect == Rect(6.0, 2.0, 4.0, 6.0)

def test_narrow_floating_nearer_left():
    # grows left to the bound, still short, so the right edge snaps to bounds
    result, rect = closest_intersection_meeting_constraints(Rect(1.0, 0.0, 1.0, 10.0), BOUNDS, 4.0, 4.0)
    assert result == RectConstraintsAdjustment.ADJUSTED_TO_MEET_CONSTRAINTS
    assert rect == BOUNDS

def test_narrow_floating_grows_without_snapping():
    result, rect = closest_intersection_meeting_constraints(Rect(3.0, 0.0, 1.0, 10.0), BOUNDS, 4.0, 4.0)
    assert result == RectConstraintsAdjustment.ADJUSTED_TO_MEET_CONSTRAINTS
    assert rect == Rect(0.0, 0.0, 4.0, 10.0)

def test_narrow_floating_nearer_right():
    result, rect = closest_intersection_meeting_constraints(Rect(6.0, 0.0, 1.0, 10.0), BOUNDS, 3.0, 4.0)
    assert result == RectConstraintsAdjustment.ADJUSTED_TO_MEET_CONSTRAINTS
    assert rect == Rect(6.0, 0.0, 3.0, 10.0)

def test_short_floating_adjusts_vertical_axis_only():
    result, rect = closest_intersection_meeting_constraints(Rect(0.0, 4.0, 10.0, 1.0), BOUNDS, 1.0, 4.0)
    assert result == RectConstraintsAdjustment.ADJUSTED_TO_MEET_CONSTRAINTS
    assert rect == Rect(0.0, 1.0, 10.0, 4.0)

def test_both_axes_adjusted():
    result, rect = closest_intersection_meeting_constraints(Rect(-5.0, 9.0, 6.0, 6.0), BOUNDS, 3.0, 3.0)
    assert result == RectConstraintsAdjustment.ADJUSTED_TO_MEET_CONSTRAINTS
    assert approximately(rect, Rect(0.0, 7.0, 3.0, 3.0))

def test_bounds_too_small_fails():
    bounds = Rect(0.0, 0.0, 3.0, 10.0)
    result, rect = closest_intersection_meeting_constraints(Rect(1.0, 0.0, 1.0, 10.0), bounds, 5.0, 1.0)
    assert result == RectConstraintsAdjustment.ADJUSTED_BUT_FAILED_TO_MEET_CONSTRAINTS
    assert rect == bounds

def test_aligned_growth_may_leave_narrow_bounds():
    # aligned with the left bound: grows to x_min + min_width without clamping,
    # so the size constraint is met even though bounds is only 3 wide
    bounds = Rect(0.0, 0.0, 3.0, 10.0)
    result, rect = closest_intersection_meeting_constraints(Rect(-5.0, 0.0, 20.0, 10.0), bounds, 5.0, 1.0)
    assert result == RectConstraintsAdjustment.ADJUSTED_TO_MEET_CONSTRAINTS
    assert rect == Rect(0.0, 0.0, 5.0, 10.0)
    assert rect.x_max > bounds.x_max

def test_aligned_right_growth_may_leave_narrow_bounds():
    bounds = Rect(0.0, 0.0, 3.0, 10.0)
    result, rect = closest_intersection_meeting_constraints(Rect(2.0, 0.0, 20.0, 10.0), bounds, 5.0, 1.0)
    assert result == RectConstraintsAdjustment.ADJUSTED_TO_MEET_CONSTRAINTS
    assert rect == Rect(-2.0, 0.0, 5.0, 10.0)


if __name__ == "__main__":
    test_covering_rect_returns_bounds_unadjusted()
    test_disjoint_right_pins_to_right_edge()
    test_narrow_floating_nearer_left()
    test_bounds_too_small_fails()
