import pytest
from fastapi.testclient import TestClient

import main
from manager import build_manager


@pytest.fixture
def manager():
    return build_manager()


@pytest.fixture
def alice(manager):
    return manager.register_customer("Alice")


@pytest.fixture
def client(monkeypatch):
    # Fresh fleet for every test, the app module keeps one per process
    monkeypatch.setattr(main, "manager", build_manager())
    return TestClient(main.app)
