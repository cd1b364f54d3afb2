import pytest

from pathist.config import defaults


@pytest.fixture(autouse=True)
def reset_defaults():
    defaults.reset()
    yield
    defaults.reset()
