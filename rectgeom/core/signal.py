# rectgeom/core/signal.py
"""
SignalBridge - Observer hub used to surface geometry diagnostics.

Handlers run synchronously inside emit. A handler that raises is logged and
skipped; the geometry call that emitted never sees the exception.
"""

from __future__ import annotations
from typing import Callable, Dict, List, Tuple
from dataclasses import dataclass
import logging

logger = logging.getLogger(__name__)

# =============================================================================
# Signal Types
# =============================================================================

SIGNAL_DEGENERATE_GEOMETRY = 'geometry.degenerate'   # (warning, rect)


# =============================================================================
# Connection Handle
# =============================================================================

@dataclass
class Connection:
    """Returned by connect(); disconnect() is idempotent."""
    signal: str
    handler_id: int
    bridge: SignalBridge = None

    def disconnect(self):
        if self.bridge is None:
            return
        self.bridge._drop(self.signal, self.handler_id)
        self.bridge = None


# =============================================================================
# Signal Bridge
# =============================================================================

class SignalBridge:

    def __init__(self):
        self._handlers: Dict[str, Dict[int, Callable]] = {}
        self._muted: set = set()
        self._ids: int = 0
        self._dispatching: int = 0
        self._deferred: List[Tuple[str, int]] = []

    def connect(self, signal: str, handler: Callable) -> Connection:
        self._ids += 1
        self._handlers.setdefault(signal, {})[self._ids] = handler
        return Connection(signal, self._ids, self)

    def is_connected(self, signal: str) -> bool:
        return bool(self._handlers.get(signal))

    def block(self, signal: str):
        self._muted.add(signal)

    def unblock(self, signal: str):
        self._muted.discard(signal)

    def emit(self, signal: str, *args):
        if signal in self._muted:
            return

        self._dispatching += 1
        try:
            for handler in list(self._handlers.get(signal, {}).values()):
                try:
                    handler(*args)
                except Exception as e:
                    logger.error(f"Signal handler error [{signal}]: {e}")
        finally:
            self._dispatching -= 1
            if not self._dispatching:
                for sig, handler_id in self._deferred:
                    self._handlers.get(sig, {}).pop(handler_id, None)
                self._deferred.clear()

    def _drop(self, signal: str, handler_id: int):
        # removals requested from inside a handler wait for the outermost emit
        if self._dispatching:
            self._deferred.append((signal, handler_id))
        else:
            self._handlers.get(signal, {}).pop(handler_id, None)
