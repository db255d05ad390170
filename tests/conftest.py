"""Pytest configuration and fixtures for httpeek tests."""

from __future__ import annotations

import os
from typing import Callable

import httpx
import pytest


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    """Requests seen by the mock transport, in order."""
    return []


@pytest.fixture
def mock_transport(recorded_requests: list[httpx.Request]):
    """Build an `httpx.MockTransport` that records every request it handles."""

    def _create(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.MockTransport:
        def _record(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            return handler(request)

        return httpx.MockTransport(_record)

    return _create


@pytest.fixture
def unreachable_handler():
    """Handler that fails like a DNS lookup for a host that does not exist."""

    def _handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("[Errno -2] Name or service not known", request=request)

    return _handler


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep HTTPEEK_* and terminal-forcing variables from the developer shell out of the tests."""
    for name in list(os.environ):
        if name.upper().startswith("HTTPEEK_"):
            monkeypatch.delenv(name, raising=False)
    for name in ("FORCE_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE"):
        monkeypatch.delenv(name, raising=False)
