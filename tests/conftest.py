"""Shared fixtures for the dsr_api tests."""

import os

# Keep test runs from writing a log file (config is read at import time)
os.environ["LOG_FILE"] = ""

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402


@pytest.fixture(scope="module")
def test_client():
    from dsr_api.api import app

    with TestClient(app) as client:
        yield client
