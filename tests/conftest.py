"""Global pytest configuration.

Shared graph fixtures live in ``tests/algorithms/conftest.py``.
"""

from __future__ import annotations

import pytest

from wgraph.logging import reset_logging


@pytest.fixture(autouse=True)
def _fresh_logging():
    """Give every test a freshly configured ``wgraph`` logger."""
    reset_logging()
    yield
    reset_logging()
