"""Shared fixtures: a SlabClient backed by httpx.MockTransport.

Tests register a response envelope (or a handler) and every request the
client sends is recorded on ``slab_api.requests``.
"""

import json

import httpx
import pytest

from core.config import SlabConfig
from core.graphql_client import SlabClient
from core.slab import SlabService

from tests.factories import TEST_TOKEN, TEST_URL


class FakeSlabAPI:
    """Answers every POST with the configured status and JSON body."""

    def __init__(self):
        self.status_code = 200
        self.body: dict = {"data": {}}
        self.requests: list[httpx.Request] = []

    def respond(self, body: dict, status_code: int = 200) -> None:
        self.body = body
        self.status_code = status_code

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last_payload(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def config() -> SlabConfig:
    return SlabConfig(api_token=TEST_TOKEN, api_url=TEST_URL)


@pytest.fixture
def slab_api() -> FakeSlabAPI:
    return FakeSlabAPI()


@pytest.fixture
def client(config, slab_api) -> SlabClient:
    return SlabClient(config, transport=httpx.MockTransport(slab_api.handler))


@pytest.fixture
def service(client) -> SlabService:
    return SlabService(client)
