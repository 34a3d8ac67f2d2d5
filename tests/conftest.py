import pytest


@pytest.fixture
def royal_draw():
    """Four to a royal flush."""
    return ["Ah", "Kh", "Qh", "Jh"]


@pytest.fixture
def trips_draw():
    return ["2c", "2d", "2h", "7s"]
