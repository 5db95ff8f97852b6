"""Pytest configuration and shared fixtures for iris-functor tests."""

import pytest
from hypothesis import HealthCheck, settings

from iris_functor import clear_log_hooks, reset_config

# The autouse fixtures below only reset global state between tests
settings.register_profile('iris', suppress_health_check=[HealthCheck.function_scoped_fixture])
settings.load_profile('iris')


@pytest.fixture(autouse=True)
def fresh_config():
    """Give every test a configuration re-read from the environment."""
    reset_config()
    yield
    reset_config()


@pytest.fixture(autouse=True)
def cleanup_hooks():
    """Clear log hooks before and after each test."""
    clear_log_hooks()
    yield
    clear_log_hooks()


@pytest.fixture
def sample_present():
    """Sample Present value for testing."""
    from iris_functor import of

    return of(5)


@pytest.fixture
def sample_empty():
    """Sample empty value for testing."""
    from iris_functor import Empty

    return Empty


@pytest.fixture
def calls():
    """A list that records every consumer invocation."""
    return []
