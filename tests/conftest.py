"""Pytest fixtures for the itsyhome client tests."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Tuple

import pytest
import requests

from itsyhome import config
from itsyhome.api import Client

BASE_URL = "http://itsyhome.test:8423"


class FakeResponse:
    def __init__(self, status_code: int, content: bytes):
        self.status_code = status_code
        self.content = content


class FakeSession:
    """Stand-in for requests.Session serving canned responses by path."""

    def __init__(self) -> None:
        self.routes: Dict[str, Tuple[int, bytes]] = {}
        self.requested: List[str] = []
        self.timeouts: List[float] = []
        self.error: Exception | None = None

    def add(self, path: str, payload: Any, status: int = 200) -> None:
        body = payload if isinstance(payload, bytes) else json.dumps(payload).encode()
        self.routes[path] = (status, body)

    def get(self, url: str, timeout: float | None = None) -> FakeResponse:
        assert url.startswith(BASE_URL), url
        path = url[len(BASE_URL):]
        self.requested.append(path)
        self.timeouts.append(timeout)
        if self.error is not None:
            raise self.error
        if path not in self.routes:
            return FakeResponse(404, b"")
        status, body = self.routes[path]
        return FakeResponse(status, body)


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def client(session: FakeSession) -> Client:
    return Client(base_url=BASE_URL, session=session)  # type: ignore[arg-type]


@pytest.fixture
def config_file(tmp_path, monkeypatch) -> str:
    """Point the config module at a temporary file."""
    path = str(tmp_path / "itsyhome" / "config.toml")
    monkeypatch.setattr(config, "CONFIG_PATH", path)
    return path


@pytest.fixture
def cli_session(session: FakeSession, config_file: str, monkeypatch) -> FakeSession:
    """Route every Client the CLI creates through the fake session."""
    config.save_config(config.Config(host="itsyhome.test", port=8423), config_file)
    monkeypatch.setattr(requests, "Session", lambda: session)
    return session


@pytest.fixture
def home(session: FakeSession) -> FakeSession:
    """Two rooms, three devices, one of them unreachable."""
    session.add("/status", {
        "rooms": 2, "devices": 3, "accessories": 3,
        "reachable": 2, "unreachable": 1, "scenes": 1, "groups": 0,
    })
    session.add("/list/rooms", [{"name": "Office"}, {"name": "Bedroom"}])
    session.add("/info/Office", [
        {"name": "Desk Lamp", "type": "light", "reachable": True,
         "state": {"on": True, "brightness": 80}},
        {"name": "AC Unit", "type": "thermostat", "reachable": True,
         "state": {"on": True, "temperature": 22.5}},
    ])
    session.add("/info/Bedroom", [
        {"name": "Fan", "type": "fan", "reachable": False, "state": {"on": True, "speed": 40}},
    ])
    return session
