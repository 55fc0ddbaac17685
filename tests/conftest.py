import pytest


@pytest.fixture
def example_times() -> list[float]:
    """Time points used across unit tests."""
    return [2.0, 4.0, 5.0, 6.0]


@pytest.fixture
def example_rates() -> list[float]:
    """Two-component failure rates used across unit tests."""
    return [0.001, 0.02]
