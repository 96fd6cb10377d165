import os

# Settings are read at import time
os.environ.setdefault("SESSION_SECRET_KEY", "test-secret")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("ADDRESS_POLICY", "strict")
os.environ.setdefault("FAUCET_API_URL", "http://faucet.test")
os.environ.setdefault("GITHUB_CLIENT_ID", "test-client-id")
os.environ.setdefault("GITHUB_CLIENT_SECRET", "test-client-secret")

import httpx
import pytest
from fastapi.testclient import TestClient

from opfaucet.config import settings
from opfaucet.main import app
from opfaucet.models.schemas import SessionInfo
from opfaucet.routes.claim import get_claim_submitter
from opfaucet.services.claim import ClaimSubmitter
from opfaucet.utils.auth import create_session_token

VALID_ADDRESS = "0xAb5801a7D398351b8bE11C439e05C5B3259aeC9B"

class ClaimBackend:
    """Records claim requests and answers them with a canned response."""

    def __init__(self, status_code=200, json=None, content=None, raise_error=None):
        self.status_code = status_code
        self.json = json if json is not None else {}
        self.content = content
        self.raise_error = raise_error
        self.requests = []
        self.on_request = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.on_request is not None:
            self.on_request(request)
        if self.raise_error is not None:
            raise self.raise_error
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.json)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self), base_url=settings.FAUCET_API_URL)

@pytest.fixture
def backend():
    return ClaimBackend()

@pytest.fixture
def session():
    return SessionInfo(github_name="octocat")

@pytest.fixture
def client(backend):
    async def override_submitter():
        async with backend.client() as http:
            yield ClaimSubmitter(http)

    app.dependency_overrides[get_claim_submitter] = override_submitter
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()

@pytest.fixture
def signed_in_client(client, session):
    client.cookies.set(settings.SESSION_COOKIE_NAME, create_session_token(session))
    return client
