from __future__ import annotations

from datetime import datetime

import pytest

from bistro_staff.container import build_container
from bistro_staff.storage.backends import InMemoryBackend
from bistro_staff.storage.bootstrap import DEMO_STATE
from bistro_staff.storage.state import AppState
from bistro_staff.storage.store import StateStore

# Monday of the demo week: shift-1..3 are scheduled on this date.
NOW = datetime(2024, 3, 25, 12, 0, 0)


@pytest.fixture(scope="session")
def demo_payload():
    # Hash the demo passwords once per session.
    return AppState.from_payload(DEMO_STATE).to_payload()


@pytest.fixture
def backend(demo_payload):
    return InMemoryBackend(demo_payload)


@pytest.fixture
def store(backend):
    return StateStore(backend)


@pytest.fixture
def clock():
    return lambda: NOW


@pytest.fixture
def container(store, clock):
    return build_container(store=store, clock=clock)
