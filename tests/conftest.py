import json

import pytest
from fastapi.testclient import TestClient

from pessoas_api.app.core.config import Settings
from pessoas_api.app.core.store import PersonStore
from pessoas_api.app.main import create_app
from pessoas_api.app.services.person_service import PersonService

VALID_PERSON = {
    "apelido": "roy",
    "nome": "Roy M",
    "nascimento": "1990-01-01",
    "stack": ["go", "python"],
}


@pytest.fixture
def make_body():
    """Encode a valid creation body with the given fields replaced."""

    def _make_body(**overrides):
        payload = dict(VALID_PERSON)
        payload.update(overrides)
        return json.dumps(payload).encode("utf-8")

    return _make_body


@pytest.fixture
def store():
    return PersonStore()


@pytest.fixture
def service(store):
    return PersonService(store)


@pytest.fixture
def client(store):
    app = create_app(Settings(), store=store)
    with TestClient(app) as test_client:
        yield test_client
