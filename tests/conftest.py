"""
Shared test fixtures.

Every test gets its own JobFactory, so arrival times start at 0 in each
test and no counter state leaks between tests.
"""

import pytest

from models.job import JobFactory
from scheduler.priority import JobScheduler


@pytest.fixture
def factory():
    return JobFactory()


@pytest.fixture
def scheduler():
    return JobScheduler()
