import logging
import math

from rectgeom.core.diagnostics import GeometryWarning
from rectgeom.core.signal import SignalBridge, SIGNAL_DEGENERATE_GEOMETRY
from rectgeom.geometry.rect import Rect
from rectgeom.geometry.ops import aspect, in_viewport_coordinates


def _collect(bridge):
    seen = []
    bridge.connect(SIGNAL_DEGENERATE_GEOMETRY, lambda warning, rect: seen.append((warning, rect)))
    return seen


def test_aspect_reports_non_positive_height(caplog):
    bridge = SignalBridge()
    seen = _collect(bridge)
    r = Rect(0.0, 0.0, 4.0, 0.0)

    with caplog.at_level(logging.WARNING):
        assert math.isnan(aspect(r, bridge=bridge))

    assert seen == [(GeometryWarning.NON_POSITIVE_HEIGHT, r)]
    assert "height is not positive" in caplog.text

def test_viewport_reports_collapsed_reference(caplog):
    bridge = SignalBridge()
    seen = _collect(bridge)
    ref = Rect(0.0, 0.0, 0.0, 10.0)

    with caplog.at_level(logging.WARNING):
        assert in_viewport_coordinates(Rect(1.0, 1.0, 1.0, 1.0), ref, bridge=bridge) == Rect.unit()

    assert seen == [(GeometryWarning.COLLAPSED_REFERENCE, ref)]
    assert "collapsed" in caplog.text

def test_valid_input_reports_nothing(caplog):
    bridge = SignalBridge()
    seen = _collect(bridge)

    with caplog.at_level(logging.WARNING):
        aspect(Rect(0.0, 0.0, 4.0, 2.0), bridge=bridge)
        in_viewport_coordinates(Rect(1.0, 1.0, 1.0, 1.0), Rect(0.0, 0.0, 2.0, 2.0), bridge=bridge)

    assert seen == []
    assert caplog.text == ""


# =============================================================================
# SignalBridge
# =============================================================================

def test_block_and_unblock():
    bridge = SignalBridge()
    calls = []
    bridge.connect('x', lambda: calls.append(1))

    bridge.block('x')
    bridge.emit('x')
    assert calls == []

    bridge.unblock('x')
    bridge.emit('x')
    assert calls == [1]

def test_disconnect():
    bridge = SignalBridge()
    calls = []
    conn = bridge.connect('x', lambda: calls.append(1))
    assert bridge.is_connected('x')

    conn.disconnect()
    bridge.emit('x')
    assert calls == []
    assert not bridge.is_connected('x')

def test_disconnect_during_emit_is_deferred():
    bridge = SignalBridge()
    calls = []
    conns = []

    def once():
        calls.append(1)
        conns[0].disconnect()

    conns.append(bridge.connect('x', once))
    bridge.emit('x')
    bridge.emit('x')
    assert calls == [1]

def test_handler_error_is_logged_not_raised(caplog):
    bridge = SignalBridge()

    def broken(*args):
        raise RuntimeError("boom")

    bridge.connect(SIGNAL_DEGENERATE_GEOMETRY, broken)

    with caplog.at_level(logging.ERROR):
        assert math.isnan(aspect(Rect(0.0, 0.0, 1.0, -1.0), bridge=bridge))

    assert "boom" in caplog.text
