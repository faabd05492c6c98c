import itertools
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from electrostock.main import create_app
from electrostock.services.advisory_service import AdvisoryClient
from electrostock.services.inventory_service import InventoryService
from electrostock.services.state_store import MemoryStateStore

T0 = datetime(2025, 3, 1, 9, 0, tzinfo=timezone.utc)


class Ids:
    def __init__(self, prefix: str = "id"):
        self._counter = itertools.count(1)
        self.prefix = prefix

    def __call__(self) -> str:
        return f"{self.prefix}-{next(self._counter)}"


class TickingClock:
    """Advances one second per reading, so every record gets a distinct time."""

    def __init__(self, start: datetime = T0, step: timedelta = timedelta(seconds=1)):
        self.now = start
        self.step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now += self.step
        return current


@pytest.fixture
def ids():
    return Ids()


@pytest.fixture
def clock():
    return TickingClock()


@pytest.fixture
def store():
    return MemoryStateStore()


@pytest.fixture
def service(store, ids, clock):
    return InventoryService.load(store, seed_on_empty=False, id_factory=ids, clock=clock)


@pytest.fixture
def client(service):
    app = create_app(inventory=service, advisory_client=AdvisoryClient(api_key=""))
    return TestClient(app)
