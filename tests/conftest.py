"""
Shared fixtures: every test gets its own multiton registry and core key.
"""
import pytest

from core.registry import MultitonRegistry


@pytest.fixture
def registry():
    """Fresh registry so cores never leak between tests"""
    return MultitonRegistry()


@pytest.fixture
def key(request):
    """Multiton key unique to the running test"""
    return f"core-{request.node.name}"
