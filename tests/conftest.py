"""
Shared fixtures for the readclub-runner tests.

- Environment isolation: no READCLUB_* variable or project .env leaks into
  AppSettings.
- Recording helpers for the network (httpx.MockTransport), the delay and
  the display, all appending to one ordered event log.
"""

import asyncio
import os

import httpx
import pytest

from adapters.display import BufferDisplay
from core.config import AppSettings


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Clear READCLUB_* variables and run from an empty directory."""
    for key in list(os.environ):
        if key.upper().startswith("READCLUB_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def events():
    """Ordered log of request/sleep/write events."""
    return []


class RecordingDisplay(BufferDisplay):
    def __init__(self, events):
        super().__init__()
        self._events = events

    def write(self, text, *, operation=None):
        self._events.append(("write", text))
        super().write(text, operation=operation)


class RecordingSleep:
    def __init__(self, events):
        self._events = events
        self.delays = []

    async def __call__(self, delay):
        self._events.append(("sleep", delay))
        self.delays.append(delay)
        await asyncio.sleep(0)


@pytest.fixture
def display(events):
    return RecordingDisplay(events)


@pytest.fixture
def sleep(events):
    return RecordingSleep(events)


@pytest.fixture
def settings():
    return AppSettings(api_base_url="http://api.test:4000")


@pytest.fixture
def captured():
    """Requests seen by the mock transport."""
    return []


@pytest.fixture
def ok_transport(captured, events):
    """MockTransport answering 201 with a fixed text body."""

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        events.append(("request", request.method, request.url.path))
        return httpx.Response(201, text='{"message": "ok"}')

    return httpx.MockTransport(handler)
