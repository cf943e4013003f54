"""Shared fixtures for player client tests."""

import json
from pathlib import Path

import pytest
import requests

from player_client.config import PlayerConfig
from player_client.http_client import HttpClient
from player_client.repository import SettingsRepository


def make_response(status_code: int = 200, body=None, raw: bytes = None) -> requests.Response:
    """Build a real requests.Response without touching the network."""
    response = requests.Response()
    response.status_code = status_code
    response.url = "https://www.youtube.com/oembed"
    if raw is not None:
        response._content = raw
    else:
        response._content = json.dumps(body if body is not None else {}).encode("utf-8")
    return response


class FakeSession:
    """Stands in for requests.Session; records calls and replays responses."""

    def __init__(self, responses=None, error: Exception = None):
        self.responses = list(responses or [])
        self.error = error
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.responses.pop(0)


@pytest.fixture
def config(tmp_path: Path) -> PlayerConfig:
    return PlayerConfig(
        data_dir=tmp_path / "data",
        oembed_url="https://www.youtube.com/oembed",
        embed_base_url="https://www.youtube.com/embed",
        http_timeout=5.0,
        max_retries=0,
    )


@pytest.fixture
def repo(config: PlayerConfig) -> SettingsRepository:
    return SettingsRepository(config)


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def http_client(fake_session: FakeSession) -> HttpClient:
    return HttpClient(timeout=5.0, max_retries=0, session=fake_session)
