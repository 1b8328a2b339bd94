from __future__ import annotations

import json
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

import pytest
import requests
from fastapi.testclient import TestClient

from hubspot_practicum.core.config import Settings, get_settings
from hubspot_practicum.main import app

TOKEN = "pat-na1-test-token"


def make_response(status_code: int = 200, body: Any = None, url: str = "") -> requests.Response:
    resp = requests.Response()
    resp.status_code = status_code
    resp.url = url
    resp.reason = "OK" if status_code < 400 else "Error"
    if body is not None:
        resp._content = json.dumps(body).encode("utf-8")
        resp.headers["Content-Type"] = "application/json"
    else:
        resp._content = b""
    return resp


@dataclass
class FakeHubSpot:
    """Stands in for requests.request; records calls and replays queued outcomes."""

    calls: list[dict[str, Any]] = field(default_factory=list)
    outcomes: list[Any] = field(default_factory=list)

    def queue(self, outcome: Any) -> None:
        self.outcomes.append(outcome)

    def __call__(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        self.calls.append({"method": method, "url": url, **kwargs})
        outcome = self.outcomes.pop(0) if self.outcomes else make_response(200, {"results": []})
        if isinstance(outcome, Exception):
            raise outcome
        outcome.url = url
        return outcome


@pytest.fixture
def fake_hubspot(monkeypatch) -> FakeHubSpot:
    fake = FakeHubSpot()
    monkeypatch.setattr("hubspot_practicum.services.hubspot_service.requests.request", fake)
    return fake


def _client(token: str) -> Iterator[TestClient]:
    settings = Settings(PRIVATE_APP_ACCESS=token, _env_file=None)
    app.dependency_overrides[get_settings] = lambda: settings
    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def client(fake_hubspot: FakeHubSpot) -> Iterator[TestClient]:
    yield from _client(TOKEN)


@pytest.fixture
def anonymous_client(fake_hubspot: FakeHubSpot) -> Iterator[TestClient]:
    yield from _client("")
