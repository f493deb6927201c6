"""Test utilities for sift applications.

    from sift.testing import TestClient
"""

from sift.testing.client import TestClient

__all__ = ["TestClient"]
