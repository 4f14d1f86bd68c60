import pytest

from zillow.api.environment import EnvironmentManager
from zillow.util.log import shutdown_logging


@pytest.fixture(autouse=True)
def reset_state():
    """Every test starts without environments or logging sinks"""
    EnvironmentManager.reset()
    yield
    EnvironmentManager.reset()
    shutdown_logging()
