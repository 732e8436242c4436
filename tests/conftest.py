import pytest

from tests.fakes import FakeClock, FakeScreen


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def screen():
    return FakeScreen()
