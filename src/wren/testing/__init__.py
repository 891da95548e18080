"""Testing utilities for wren applications.

Provides a synchronous test client that drives ``App.dispatch()``
directly. No HTTP, no server.
"""

from wren.testing.client import TestClient

__all__ = ["TestClient"]
