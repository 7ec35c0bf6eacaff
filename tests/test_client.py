# Twist SDK — Python client for the Twist REST API
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Tests for AsyncTwistClient, TwistClient and ClientConfig."""

import pytest

from conftest import FakeTransport, batch_item, json_reply
from twist_sdk import __version__
from twist_sdk.batch import BatchBuilder
from twist_sdk.client import AsyncTwistClient, BatchFacade, TwistClient
from twist_sdk.config import ClientConfig
from twist_sdk.errors import TwistApiError, TwistUsageError
from twist_sdk.models import Channel, User
from twist_sdk.namespaces import (
    ChannelsNamespace,
    CommentsNamespace,
    ConversationMessagesNamespace,
    ConversationsNamespace,
    GroupsNamespace,
    InboxNamespace,
    ReactionsNamespace,
    SearchNamespace,
    ThreadsNamespace,
    UsersNamespace,
    WorkspaceUsersNamespace,
    WorkspacesNamespace,
)
from twist_sdk._transport import AiohttpTransport, CustomTransport

CHANNEL_WIRE = {
    "id": 42, "name": "general", "creator": 1, "public": True, "workspace_id": 1,
    "archived": False, "created_ts": 1700000000, "version": 3,
}

USER_WIRE = {
    "id": 1, "name": "Ada Lovelace", "short_name": "Ada", "bot": False, "timezone": "UTC",
    "removed": False, "email": "ada@example.com", "lang": "en",
}


class TestClientConfig:
    def test_defaults(self):
        c = ClientConfig()
        assert c.base_url == "https://api.twist.com"
        assert c.api_version == "v3"
        assert c.base_uri() == "https://api.twist.com/api/v3/"
        assert c.base_uri("v4") == "https://api.twist.com/api/v4/"

    def test_trailing_slash_in_base_url(self):
        assert ClientConfig(base_url="https://x.test/").base_uri() == "https://x.test/api/v3/"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("TWIST_API_TOKEN", "env-token")
        monkeypatch.setenv("TWIST_BASE_URL", "https://staging.test")
        monkeypatch.setenv("TWIST_REQUEST_TIMEOUT", "12.5")
        c = ClientConfig.from_env()
        assert c.token == "env-token"
        assert c.base_url == "https://staging.test"
        assert c.request_timeout == 12.5


class TestAsyncTwistClient:
    def test_construction(self, config):
        client = AsyncTwistClient(config=config)
        assert client.config is config
        assert isinstance(client.users, UsersNamespace)
        assert isinstance(client.workspaces, WorkspacesNamespace)
        assert isinstance(client.workspace_users, WorkspaceUsersNamespace)
        assert isinstance(client.channels, ChannelsNamespace)
        assert isinstance(client.threads, ThreadsNamespace)
        assert isinstance(client.groups, GroupsNamespace)
        assert isinstance(client.conversations, ConversationsNamespace)
        assert isinstance(client.comments, CommentsNamespace)
        assert isinstance(client.conversation_messages, ConversationMessagesNamespace)
        assert isinstance(client.inbox, InboxNamespace)
        assert isinstance(client.reactions, ReactionsNamespace)
        assert isinstance(client.search, SearchNamespace)
        assert isinstance(client._rest.transport, AiohttpTransport)

    def test_token_argument_overrides_config(self, config):
        client = AsyncTwistClient("other-token", config)
        assert client.config.token == "other-token"
        assert config.token == "test-token"

    def test_default_config_from_env(self, monkeypatch):
        monkeypatch.setenv("TWIST_API_TOKEN", "env-token")
        monkeypatch.delenv("TWIST_BASE_URL", raising=False)
        client = AsyncTwistClient()
        assert client.config.token == "env-token"
        assert client.config.base_url == "https://api.twist.com"

    def test_fetch_selects_custom_transport(self, config):
        client = AsyncTwistClient(config=config, fetch=lambda *a: (200, {}, ""))
        assert isinstance(client._rest.transport, CustomTransport)

    def test_new_batch(self, config):
        batch = AsyncTwistClient(config=config).new_batch()
        assert isinstance(batch, BatchBuilder)
        assert isinstance(batch._facade, BatchFacade)
        assert isinstance(batch._facade.channels, ChannelsNamespace)

    @pytest.mark.asyncio
    async def test_namespace_call(self, config, transport):
        transport.queue(json_reply(200, USER_WIRE))
        async with AsyncTwistClient(config=config, transport=transport) as client:
            user = await client.users.get_session_user()
        assert isinstance(user, User)
        assert user.short_name == "Ada"
        assert transport.closed

    @pytest.mark.asyncio
    async def test_raw_call(self, config, transport):
        transport.queue(json_reply(200, {"user_ids": [1, 2]}))
        client = AsyncTwistClient(config=config, transport=transport)
        result = await client.call("get", "workspace_users/get_ids", {"id": 1}, api_version="v4")
        assert result == {"userIds": [1, 2]}
        assert transport.last["method"] == "GET"
        assert transport.last["url"] == "https://api.example.test/api/v4/workspace_users/get_ids?id=1"

    @pytest.mark.asyncio
    async def test_batch_helper(self, config, transport):
        transport.queue(json_reply(200, {"results": [batch_item(200, USER_WIRE), batch_item(200, CHANNEL_WIRE)]}))
        client = AsyncTwistClient(config=config, transport=transport)
        me, channel = await client.batch(
            lambda c: c.users.get_session_user(),
            lambda c: c.channels.get_channel(42),
        )
        assert me.data.email == "ada@example.com"
        assert isinstance(channel.data, Channel)
        assert len(transport.sent) == 1


class TestTwistClientSync:
    def test_construction(self, config):
        client = TwistClient(config=config, transport=FakeTransport())
        try:
            for name in (
                "users", "workspaces", "workspace_users", "channels", "threads", "groups",
                "conversations", "comments", "conversation_messages", "inbox", "reactions", "search",
            ):
                assert hasattr(client, name)
        finally:
            client.close()

    def test_namespace_call_is_synchronous(self, config):
        transport = FakeTransport(json_reply(200, CHANNEL_WIRE))
        with TwistClient(config=config, transport=transport) as client:
            channel = client.channels.get_channel(42)
        assert isinstance(channel, Channel)
        assert channel.name == "general"
        assert transport.closed

    def test_errors_propagate(self, config):
        transport = FakeTransport(json_reply(404, {"error_code": 404, "error_string": "Not found"}))
        with TwistClient(config=config, transport=transport) as client:
            with pytest.raises(TwistApiError):
                client.channels.get_channel(1)

    def test_usage_error_raised_before_any_request(self, config):
        transport = FakeTransport()
        with TwistClient(config=config, transport=transport) as client:
            with pytest.raises(TwistUsageError):
                client.reactions.add("👍")
        assert transport.sent == []

    def test_sync_batch(self, config):
        transport = FakeTransport(json_reply(200, {"results": [batch_item(200, CHANNEL_WIRE), batch_item(403)]}))
        with TwistClient(config=config, transport=transport) as client:
            results = client.batch(
                lambda c: c.channels.get_channel(42),
                lambda c: c.channels.get_channel(43),
            )
        assert results[0].data.id == 42
        assert isinstance(results[1].error, TwistApiError)

    def test_sync_raw_call(self, config):
        transport = FakeTransport(json_reply(200, {"ok": True}))
        with TwistClient(config=config, transport=transport) as client:
            assert client.call("POST", "threads/star", {"id": 1}) == {"ok": True}


def test_version():
    assert __version__
