# Twist SDK — Python client for the Twist REST API
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level Twist clients with typed namespace objects.

Usage (async)::

    async with AsyncTwistClient("token") as client:
        user = await client.users.get_session_user()
        channels = await client.channels.get_channels(workspace_id=1)

Usage (sync, safe in Jupyter)::

    client = TwistClient("token")
    user = client.users.get_session_user()
    client.close()

Batching (one HTTP request for several calls)::

    me, channel = await client.batch(
        lambda c: c.users.get_session_user(),
        lambda c: c.channels.get_channel(42),
    )
    if channel.ok:
        print(channel.data.name)
"""

from __future__ import annotations

import dataclasses
from typing import Any, Awaitable, Callable

from .batch import BatchBuilder, BatchResponse
from .config import ClientConfig
from ._transport import AiohttpTransport, BackgroundLoop, BaseTransport, CustomTransport, FetchFunction
from .namespaces import (
    NAMESPACES,
    ChannelsNamespace,
    CommentsNamespace,
    ConversationMessagesNamespace,
    ConversationsNamespace,
    Executor,
    GroupsNamespace,
    InboxNamespace,
    ReactionsNamespace,
    SearchNamespace,
    ThreadsNamespace,
    UsersNamespace,
    WorkspaceUsersNamespace,
    WorkspacesNamespace,
)
from .rest_client import RestClient


class _Namespaces:
    """The resource namespaces, all bound to one executor."""

    users: UsersNamespace
    workspaces: WorkspacesNamespace
    workspace_users: WorkspaceUsersNamespace
    channels: ChannelsNamespace
    threads: ThreadsNamespace
    groups: GroupsNamespace
    conversations: ConversationsNamespace
    comments: CommentsNamespace
    conversation_messages: ConversationMessagesNamespace
    inbox: InboxNamespace
    reactions: ReactionsNamespace
    search: SearchNamespace

    def _bind(self, executor: Executor) -> None:
        for name, namespace in NAMESPACES.items():
            setattr(self, name, namespace(executor))


class BatchFacade(_Namespaces):
    """Same namespaces as the client, but every call is recorded into a batch."""

    def __init__(self, builder: BatchBuilder) -> None:
        self._bind(builder)


class AsyncTwistClient(_Namespaces):
    """Async client with typed namespace objects.

    Use as an async context manager::

        async with AsyncTwistClient("token") as client:
            workspaces = await client.workspaces.get_workspaces()

    ``fetch`` replaces the HTTP stack with a caller-supplied function (see
    :class:`~twist_sdk._transport.CustomTransport`); ``transport`` injects a
    ready-made transport. Without either, an aiohttp session is used.
    """

    def __init__(
        self,
        token: str | None = None,
        config: ClientConfig | None = None,
        *,
        fetch: FetchFunction | None = None,
        transport: BaseTransport | None = None,
    ):
        self.config = config or ClientConfig.from_env()
        if token is not None:
            self.config = dataclasses.replace(self.config, token=token)
        if transport is None:
            transport = CustomTransport(fetch) if fetch is not None else AiohttpTransport(self.config)
        self._rest = RestClient(self.config, transport)
        self._bind(self._rest)

    async def call(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        api_version: str | None = None,
    ) -> Any:
        """Call any endpoint directly; returns the decoded, unvalidated body."""
        response = await self._rest.request(method.upper(), path, params, api_version=api_version)
        return response.body

    def new_batch(self) -> BatchBuilder:
        return BatchBuilder(self._rest, BatchFacade)

    async def batch(self, *factories: Callable[[BatchFacade], Awaitable[Any]]) -> list[BatchResponse[Any]]:
        """Record one call per factory and execute them as a single request."""
        builder = self.new_batch()
        for factory in factories:
            builder.add(factory)
        return await builder.execute()

    async def __aenter__(self) -> "AsyncTwistClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def close(self) -> None:
        await self._rest.close()


class TwistClient:
    """Synchronous client with typed namespace objects.

    Uses a background thread event loop, safe for Jupyter notebooks::

        client = TwistClient("token")
        channels = client.channels.get_channels(1)
        client.close()
    """

    def __init__(
        self,
        token: str | None = None,
        config: ClientConfig | None = None,
        *,
        fetch: FetchFunction | None = None,
        transport: BaseTransport | None = None,
    ):
        self._loop = BackgroundLoop()
        self._async = AsyncTwistClient(token, config, fetch=fetch, transport=transport)
        self.config = self._async.config
        timeout = self.config.request_timeout * 4

        for name in NAMESPACES:
            setattr(self, name, _SyncNamespace(getattr(self._async, name), self._loop, timeout))
        self._timeout = timeout

    def call(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        api_version: str | None = None,
    ) -> Any:
        """Call any endpoint directly by path."""
        return self._loop.run(self._async.call(method, path, params, api_version), self._timeout)

    def batch(self, *factories: Callable[[BatchFacade], Awaitable[Any]]) -> list[BatchResponse[Any]]:
        """Execute one batch; returns the per-item outcomes.

        Failed items carry their error in ``BatchResponse.error``.
        """
        return self._loop.run(self._async.batch(*factories), self._timeout)

    def close(self) -> None:
        try:
            self._loop.run(self._async.close(), self._timeout)
        finally:
            self._loop.close()

    def __enter__(self) -> "TwistClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class _SyncNamespace:
    """Proxy that wraps async namespace methods into synchronous calls."""

    def __init__(self, async_ns: Any, loop: BackgroundLoop, timeout: float):
        self._ns = async_ns
        self._loop = loop
        self._timeout = timeout

    def __getattr__(self, name: str) -> Any:
        attr = getattr(self._ns, name)
        if not callable(attr):
            return attr

        def wrapper(*args: Any, **kwargs: Any) -> Any:
            awaitable = attr(*args, **kwargs)
            return self._loop.run(_await(awaitable), self._timeout)

        wrapper.__name__ = name
        wrapper.__doc__ = attr.__doc__
        return wrapper


async def _await(awaitable: Awaitable[Any]) -> Any:
    return await awaitable
