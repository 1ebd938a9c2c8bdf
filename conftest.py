from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from src.hrms_system.hrms_system.container import build_container
from src.hrms_system.hrms_system.main import create_app

FIXED_NOW = datetime(2024, 6, 1, 9, 0, 0)


class FakeClock:
    """Deterministic clock; every call advances one second."""

    def __init__(self, start: datetime = FIXED_NOW):
        self.now = start

    def __call__(self) -> datetime:
        current = self.now
        self.now = current + timedelta(seconds=1)
        return current

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def container(clock):
    return build_container(storage_backend="memory", clock=clock)


@pytest.fixture
def app(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setenv("STORAGE_BACKEND", "memory")
    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def acme(container):
    return container.company_service.create_company({"name": "Acme"})


@pytest.fixture
def ali(container, acme):
    return container.employee_service.create_employee(acme.company_id, {"full_name": "Ali"})
