# Twist SDK — Python client for the Twist REST API
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Low-level transports: send one HTTP request, return status/headers/body.

Transports never raise for non-2xx statuses; the caller inspects the status
and the error body. Only failures to complete the exchange raise
:class:`~twist_sdk.errors.TwistTransportError`.

Hosts that forbid direct networking (sandboxed plugin runtimes) can route
traffic through their own primitive::

    async def host_fetch(url, method, headers, body):
        reply = await host.request_url(url=url, method=method, headers=headers, body=body)
        return {"status": reply.status, "headers": reply.headers, "body": reply.text}

    client = AsyncTwistClient(token, fetch=host_fetch)
"""

from __future__ import annotations

import asyncio
import inspect
import threading
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Coroutine, TypeVar, Union

import aiohttp

from .config import ClientConfig
from .errors import TwistError, TwistProtocolError, TwistTransportError

T = TypeVar("T")


@dataclass(frozen=True)
class TransportResponse:
    """Raw reply of one physical exchange."""

    status: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: str | bytes | None = None


FetchResult = Union[TransportResponse, Mapping[str, Any], tuple]
FetchFunction = Callable[
    [str, str, dict[str, str], Union[str, None]],
    Union[FetchResult, Awaitable[FetchResult]],
]


class BaseTransport:
    """Capability: send an HTTP request, receive status/headers/body."""

    async def send(
        self,
        url: str,
        method: str,
        headers: dict[str, str],
        body: str | None = None,
    ) -> TransportResponse:
        raise NotImplementedError

    async def close(self) -> None:
        pass

    async def __aenter__(self) -> BaseTransport:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()


class AiohttpTransport(BaseTransport):
    """Default transport backed by a shared :class:`aiohttp.ClientSession`.

    Usage::

        async with AiohttpTransport(config) as t:
            reply = await t.send("https://api.twist.com/api/v3/users/get_session_user", "GET", headers)
    """

    def __init__(self, config: ClientConfig | None = None):
        self.config = config or ClientConfig.from_env()
        self._session: aiohttp.ClientSession | None = None

    async def __aenter__(self) -> AiohttpTransport:
        await self._ensure_session()
        return self

    async def _ensure_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.config.request_timeout)
            )
        return self._session

    async def send(
        self,
        url: str,
        method: str,
        headers: dict[str, str],
        body: str | None = None,
    ) -> TransportResponse:
        session = await self._ensure_session()
        try:
            async with session.request(method, url, headers=headers, data=body) as resp:
                raw = await resp.read()
                return TransportResponse(resp.status, dict(resp.headers), raw)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TwistTransportError(f"{method} {url} failed: {str(e) or type(e).__name__}") from e

    async def close(self) -> None:
        if self._session:
            await self._session.close()
            self._session = None


class CustomTransport(BaseTransport):
    """Routes every exchange through a caller-supplied fetch function.

    The function receives ``(url, method, headers, body)`` and returns (or
    resolves to) a :class:`TransportResponse`, a ``{"status", "headers",
    "body"}`` mapping, or a ``(status, headers, body)`` tuple.
    """

    def __init__(self, fetch: FetchFunction):
        self._fetch = fetch

    async def send(
        self,
        url: str,
        method: str,
        headers: dict[str, str],
        body: str | None = None,
    ) -> TransportResponse:
        try:
            result = self._fetch(url, method, dict(headers), body)
            if inspect.isawaitable(result):
                result = await result
        except TwistError:
            raise
        except Exception as e:
            raise TwistTransportError(f"{method} {url} failed: {e}") from e
        return _coerce_response(result)


def _coerce_response(result: Any) -> TransportResponse:
    if isinstance(result, TransportResponse):
        return result
    if isinstance(result, Mapping):
        if "status" not in result:
            raise TwistProtocolError("custom fetch result has no 'status'")
        return TransportResponse(
            int(result["status"]), dict(result.get("headers") or {}), result.get("body")
        )
    if isinstance(result, tuple) and len(result) == 3:
        status, headers, body = result
        return TransportResponse(int(status), dict(headers or {}), body)
    raise TwistProtocolError(f"unsupported custom fetch result: {type(result).__name__}")


class BackgroundLoop:
    """Event loop on a daemon thread, for driving async code synchronously.

    Safe to use in Jupyter notebooks and other environments where an event loop
    may already be running.
    """

    def __init__(self) -> None:
        self.loop = asyncio.new_event_loop()
        self._thread = threading.Thread(target=self.loop.run_forever, daemon=True)
        self._thread.start()

    def run(self, coro: Coroutine[Any, Any, T], timeout: float | None = None) -> T:
        future = asyncio.run_coroutine_threadsafe(coro, self.loop)
        return future.result(timeout=timeout)

    def close(self) -> None:
        self.loop.call_soon_threadsafe(self.loop.stop)
        self._thread.join(timeout=5)
