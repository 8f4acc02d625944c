# pylint: disable=redefined-outer-name
import pytest
from fastapi.testclient import TestClient

from api import Settings, create_app
from task_queue import QueueRegistry


@pytest.fixture
def registry():
    return QueueRegistry()


@pytest.fixture
def settings():
    return Settings(HOST="127.0.0.1", PORT=8080, LOG_LEVEL="debug")


@pytest.fixture
def client(registry, settings):
    with TestClient(create_app(registry=registry, settings=settings)) as test_client:
        yield test_client
