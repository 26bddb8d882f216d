"""
Shared pytest fixtures for TOut tests.
"""

import pytest

from tests.helpers.stubs import StubOptimizer


@pytest.fixture
def stub_optimizer():
    """Factory for ``StubOptimizer`` instances."""
    return StubOptimizer
