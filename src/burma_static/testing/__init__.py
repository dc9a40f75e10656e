"""Test utilities for burma-static applications.

    from burma_static.testing import TestClient
"""

from burma_static.testing.client import TestClient

__all__ = ["TestClient"]
