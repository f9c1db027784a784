"""
Pytest configuration and fixtures.
"""

import sys
import datetime
from pathlib import Path
import pytest
from PySide6.QtCore import QCoreApplication

# Add project root
sys.path.insert(0, str(Path(__file__).parent.parent))

from timemanager.i18n import set_language
from timemanager.infra.db import SqlKeyValueStore
from timemanager.infra.repository import StateRepository
from timemanager.services.store import DashboardStore


class FixedClock:
    """Stand-in for datetime.now that only moves when told to"""

    def __init__(self, moment: datetime.datetime):
        self.moment = moment

    def __call__(self) -> datetime.datetime:
        return self.moment

    def advance(self, **kwargs) -> None:
        self.moment += datetime.timedelta(**kwargs)


@pytest.fixture(scope="session", autouse=True)
def qt_app():
    """QTimer needs an application instance; no event loop is run"""
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture(autouse=True)
def english():
    set_language("en")
    yield
    set_language("en")


@pytest.fixture
def clock():
    return FixedClock(datetime.datetime(2026, 10, 19, 10, 30, 0))


@pytest.fixture
def kv_store():
    """Create an in-memory SQLite key-value store for testing"""
    store = SqlKeyValueStore("sqlite://")
    yield store
    store.dispose()


@pytest.fixture
def repository(kv_store):
    return StateRepository(kv_store)


@pytest.fixture
def store(repository, clock):
    """A dashboard store over an empty in-memory database"""
    return DashboardStore(repository, clock=clock)


@pytest.fixture
def reload(repository, clock):
    """Build a fresh store from whatever has been persisted so far"""
    def _reload() -> DashboardStore:
        return DashboardStore(StateRepository(repository.store), clock=clock)
    return _reload
