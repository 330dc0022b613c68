import pytest
from datetime import date, timedelta

from allocation.adapters.repository import InMemoryRepository


@pytest.fixture(scope='session')
def today():
    return date.today()


@pytest.fixture(scope='session')
def tomorrow(today):
    return today + timedelta(days=1)


@pytest.fixture(scope='session')
def later(today):
    return today + timedelta(days=2)


@pytest.fixture
def repo():
    return InMemoryRepository()
