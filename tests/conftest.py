# Twist SDK — Python client for the Twist REST API
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Shared test fixtures for Twist SDK tests."""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from twist_sdk.config import ClientConfig
from twist_sdk._transport import BaseTransport, TransportResponse
from twist_sdk.rest_client import RestClient


def json_reply(status: int, data: Any = None, headers: dict[str, str] | None = None) -> TransportResponse:
    """Transport reply carrying ``data`` as a JSON body (``None`` = empty body)."""
    body = "" if data is None else json.dumps(data)
    return TransportResponse(status, headers or {"Content-Type": "application/json"}, body)


def batch_item(code: int, data: Any = None, headers: str = "Content-Type: application/json") -> dict[str, Any]:
    """One element of a batch reply's ``results`` list."""
    return {"code": code, "headers": headers, "body": "" if data is None else json.dumps(data)}


class FakeTransport(BaseTransport):
    """Replays queued replies and records every request it is asked to send."""

    def __init__(self, *replies: TransportResponse | BaseException):
        self.replies = list(replies)
        self.sent: list[dict[str, Any]] = []
        self.closed = False

    def queue(self, *replies: TransportResponse | BaseException) -> None:
        self.replies.extend(replies)

    async def send(self, url, method, headers, body=None):
        self.sent.append({"url": url, "method": method, "headers": dict(headers), "body": body})
        reply = self.replies.pop(0)
        if isinstance(reply, BaseException):
            raise reply
        return reply

    async def close(self) -> None:
        self.closed = True

    @property
    def last(self) -> dict[str, Any]:
        return self.sent[-1]

    def last_json(self) -> Any:
        return json.loads(self.last["body"])


@pytest.fixture
def config() -> ClientConfig:
    """Test config with dummy values."""
    return ClientConfig(
        token="test-token",
        base_url="https://api.example.test",
        request_timeout=5,
    )


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def rest(config, transport) -> RestClient:
    return RestClient(config, transport)


@pytest.fixture
def mock_executor() -> MagicMock:
    """Executor whose dispatch resolves to None; inspect dispatch.call_args for the descriptor."""
    x = MagicMock()
    x.dispatch = AsyncMock(return_value=None)
    return x
