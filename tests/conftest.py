"""Shared fixtures."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from roadtotp.config import Settings
from roadtotp.main import create_app


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as c:
        yield c
