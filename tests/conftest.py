import pytest


@pytest.fixture
def some_phone():
    return ["+71234567890"]
