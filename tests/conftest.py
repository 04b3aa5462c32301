"""Pytest configuration and shared fixtures."""

import json
from dataclasses import dataclass
from typing import Any, Optional

import pytest

from betfair_ng.api import BetfairClient, ClientCertificate, TransportResponse


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (run offline)")


@dataclass
class RecordedCall:
    method: str
    url: str
    headers: dict
    data: Any
    timeout: float
    cert: Optional[ClientCertificate]


class StubTransport:
    """Transport that replays queued outcomes and records every request."""

    def __init__(self):
        self.outcomes: list = []
        self.calls: list[RecordedCall] = []
        self.closed = False

    @property
    def call_count(self) -> int:
        return len(self.calls)

    @property
    def last_call(self) -> RecordedCall:
        return self.calls[-1]

    def reply(self, body: Any, status: int = 200, reason: str = "OK") -> "StubTransport":
        """Queue a JSON response."""
        text = body if isinstance(body, str) else json.dumps(body)
        self.outcomes.append(TransportResponse(status=status, reason=reason, body=text))
        return self

    def fail(self, error: Exception) -> "StubTransport":
        """Queue a transport failure."""
        self.outcomes.append(error)
        return self

    async def request(self, method, url, *, headers, data=None, timeout, cert=None):
        self.calls.append(RecordedCall(method, url, dict(headers), data, timeout, cert))
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    async def close(self):
        self.closed = True


@pytest.fixture
def transport():
    return StubTransport()


@pytest.fixture
def client(transport):
    """A logged-in client with an application key."""
    return BetfairClient(
        {"applicationKey": "app-key", "sessionToken": "session-token"},
        transport=transport,
    )


@pytest.fixture
def logged_out_client(transport):
    return BetfairClient(
        {"certificatePath": "client.crt", "keyPath": "client.key", "applicationKey": "app-key"},
        transport=transport,
    )
