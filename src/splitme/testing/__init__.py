"""Test utilities for splitme::

    from splitme.testing import TestClient
"""

from splitme.testing.client import TestClient

__all__ = ["TestClient"]
