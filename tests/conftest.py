"""Test fixtures for the greeter app."""

from __future__ import annotations

import socket

import pytest
from fastapi.testclient import TestClient

from greeter.config import Settings
from greeter.main import create_app

GREETER_ENV_VARS = ("APP_PORT_NUMBER", "LOG_LEVEL", "METRICS_PORT")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the host environment from leaking into Settings()."""
    for name in GREETER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings() -> Settings:
    return Settings(APP_PORT_NUMBER="8080")


@pytest.fixture
def client(settings: Settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def free_port() -> int:
    """Return a port nothing is listening on right now."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("", 0))
        return sock.getsockname()[1]
