import json

import httpx
import pytest

from loadtest.api_client import APIClient


class MockSubscriptionServer:
    """Records incoming requests and answers with a fixed response."""

    def __init__(self, status_code: int = 201, body=None):
        self.status_code = status_code
        self.body = body
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.body, (dict, list)):
            return httpx.Response(self.status_code, json=self.body)
        return httpx.Response(self.status_code, text=self.body or "")

    @property
    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)


CREATED_BODY = {
    "created_at": "2024-01-01T00:00:00Z",
    "subscription_id": "sub_123",
}


@pytest.fixture
def server():
    return MockSubscriptionServer(201, dict(CREATED_BODY))


@pytest.fixture
def make_client():
    clients = []

    def _make(handler, base_url="https://api.test", auth_token="Bearer x"):
        client = APIClient(base_url, auth_token, transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.close()
