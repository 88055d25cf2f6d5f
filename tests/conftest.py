"""Shared fixtures: isolated settings and a recording fake HTTP transport."""

import json
from typing import Callable, List

import httpx
import pytest

from bridge.core.config import Settings


def make_settings(**overrides) -> Settings:
    """Settings that ignore the process environment and any local .env file."""
    values = {"FASTAPI_BASE_URL": None, "FASTAPI_API_KEY": None, "HTTP_TIMEOUT": None}
    values.update(overrides)
    return Settings(_env_file=None, **values)


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it receives."""

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return responder(request)

        super().__init__(handler)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def last_json(self):
        return json.loads(self.requests[-1].content)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def json_transport():
    """Factory for a transport that answers every request with the given JSON body."""

    def factory(body, status_code: int = 200) -> RecordingTransport:
        return RecordingTransport(lambda request: httpx.Response(status_code, json=body))

    return factory
