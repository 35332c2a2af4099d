import pytest
from fastapi.testclient import TestClient
from versionapp.app import create_app
from versionapp.core.config import Settings


@pytest.fixture
def make_client():
    clients = []

    def _make(version="1.0.0", **overrides):
        settings = Settings(**overrides)
        client = TestClient(create_app(settings, version=version))
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.close()


@pytest.fixture
def client(make_client):
    return make_client(ENVIRONMENT="Production")


@pytest.fixture
def dev_client(make_client):
    return make_client(ENVIRONMENT="Development")
