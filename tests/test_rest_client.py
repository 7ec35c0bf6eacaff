# Twist SDK — Python client for the Twist REST API
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Tests for the request executor: URL/body building and reply normalization."""

import json
from datetime import datetime, timezone

import pytest

from conftest import FakeTransport, json_reply
from twist_sdk._transport import TransportResponse
from twist_sdk.descriptors import CallDescriptor, shape
from twist_sdk.errors import (
    TwistApiError,
    TwistProtocolError,
    TwistTransportError,
    TwistValidationError,
)
from twist_sdk.models import Channel
from twist_sdk.rest_client import HttpResponse, is_success, request, serialize_params

BASE = "https://api.example.test/api/v3/"


class TestSerializeParams:
    def test_none_omitted(self):
        assert serialize_params({"a": 1, "b": None}) == "a=1"

    def test_bools_and_lists(self):
        assert serialize_params({"archived": True, "ids": [1, 2]}) == "archived=true&ids=1%2C2"


@pytest.mark.asyncio
async def test_get_puts_wire_params_in_query(transport):
    transport.queue(json_reply(200, []))
    await request(transport, "GET", BASE, "channels/get", "tok", {"workspaceId": 1, "archived": None})
    sent = transport.last
    assert sent["method"] == "GET"
    assert sent["url"] == "https://api.example.test/api/v3/channels/get?workspace_id=1"
    assert sent["headers"]["Authorization"] == "Bearer tok"
    assert sent["body"] is None


@pytest.mark.asyncio
async def test_get_without_params_has_no_query(transport):
    transport.queue(json_reply(200, {}))
    await request(transport, "GET", BASE, "users/get_session_user", "tok")
    assert transport.last["url"] == "https://api.example.test/api/v3/users/get_session_user"


@pytest.mark.asyncio
async def test_post_sends_json_without_nulls(transport):
    transport.queue(json_reply(200, {}))
    params = {"workspaceId": 1, "description": None, "extra": {"aB": None, "cD": 2}}
    await request(transport, "POST", BASE, "channels/add", "tok", params)
    sent = transport.last
    assert sent["headers"]["Content-Type"] == "application/json"
    assert json.loads(sent["body"]) == {"workspace_id": 1, "extra": {"c_d": 2}}


@pytest.mark.asyncio
async def test_post_datetime_param_becomes_ts(transport):
    transport.queue(json_reply(200, {}))
    when = datetime(2024, 1, 1, tzinfo=timezone.utc)
    await request(transport, "POST", BASE, "x", None, {"since": when})
    assert json.loads(transport.last["body"]) == {"since_ts": 1704067200}
    assert "Authorization" not in transport.last["headers"]


@pytest.mark.asyncio
async def test_success_body_converted_to_internal(transport):
    transport.queue(json_reply(200, {"workspace_id": 1, "created_ts": 0}, {"X-Thing": "1"}))
    response = await request(transport, "GET", BASE, "workspaces/getone", "tok", {"id": 1})
    assert isinstance(response, HttpResponse)
    assert is_success(response)
    assert response.body == {"workspaceId": 1, "created": datetime(1970, 1, 1, tzinfo=timezone.utc)}
    assert response.headers == {"x-thing": "1"}


@pytest.mark.asyncio
async def test_empty_body_is_none(transport):
    transport.queue(TransportResponse(200, {}, ""))
    response = await request(transport, "POST", BASE, "channels/archive", "tok", {"id": 1})
    assert response.status_code == 200
    assert response.body is None


@pytest.mark.asyncio
async def test_unconverted_body_keeps_wire_keys(transport):
    transport.queue(json_reply(200, {"created_ts": 0}))
    response = await request(transport, "GET", BASE, "x", "tok", convert=False)
    assert response.body == {"created_ts": 0}


@pytest.mark.asyncio
async def test_non_2xx_raises_api_error(transport):
    transport.queue(json_reply(401, {"error_code": "INVALID_TOKEN", "error_string": "Invalid token"}))
    with pytest.raises(TwistApiError) as exc_info:
        await request(transport, "GET", BASE, "users/get_session_user", "bad")
    err = exc_info.value
    assert err.status_code == 401
    assert err.error_code == "INVALID_TOKEN"
    assert err.error_string == "Invalid token"
    assert err.kind == "api"
    assert "Invalid token" in err.message
    assert err.to_dict()["error_code"] == "INVALID_TOKEN"


@pytest.mark.asyncio
async def test_non_json_error_body_kept_as_text(transport):
    transport.queue(TransportResponse(502, {}, b"<html>Bad Gateway</html>"))
    with pytest.raises(TwistApiError) as exc_info:
        await request(transport, "GET", BASE, "x", "tok")
    assert exc_info.value.response_data == "<html>Bad Gateway</html>"
    assert exc_info.value.error_code is None


@pytest.mark.asyncio
async def test_invalid_json_on_success_is_protocol_error(transport):
    transport.queue(TransportResponse(200, {}, "{not json"))
    with pytest.raises(TwistProtocolError):
        await request(transport, "GET", BASE, "x", "tok")


@pytest.mark.asyncio
async def test_transport_error_propagates():
    transport = FakeTransport(TwistTransportError("connection refused"))
    with pytest.raises(TwistTransportError, match="connection refused"):
        await request(transport, "GET", BASE, "x", "tok")


class TestRestClient:
    def test_base_uri(self, rest):
        assert rest.base_uri() == "https://api.example.test/api/v3/"
        assert rest.base_uri("v4") == "https://api.example.test/api/v4/"

    @pytest.mark.asyncio
    async def test_call_now_validates(self, rest, transport):
        transport.queue(json_reply(200, {
            "id": 42, "name": "general", "creator": 1, "public": True,
            "workspace_id": 1, "archived": False, "created_ts": 1700000000, "version": 3,
        }))
        descriptor = CallDescriptor("GET", "channels/getone", {"id": 42}, shape(Channel))
        channel = await rest.dispatch(descriptor)
        assert isinstance(channel, Channel)
        assert channel.workspace_id == 1
        assert transport.last["url"] == "https://api.example.test/api/v3/channels/getone?id=42"
        assert transport.last["headers"]["Authorization"] == "Bearer test-token"

    @pytest.mark.asyncio
    async def test_call_now_uses_descriptor_version(self, rest, transport):
        transport.queue(json_reply(200, [1, 2]))
        descriptor = CallDescriptor("GET", "workspace_users/get_ids", {"id": 1}, api_version="v4")
        assert await rest.call_now(descriptor) == [1, 2]
        assert transport.last["url"].startswith("https://api.example.test/api/v4/")

    @pytest.mark.asyncio
    async def test_call_now_shape_mismatch(self, rest, transport):
        transport.queue(json_reply(200, {"id": "not-a-channel"}))
        descriptor = CallDescriptor("GET", "channels/getone", {"id": 1}, shape(Channel))
        with pytest.raises(TwistValidationError) as exc_info:
            await rest.call_now(descriptor)
        assert exc_info.value.response_data == {"id": "not-a-channel"}

    @pytest.mark.asyncio
    async def test_close_closes_transport(self, rest, transport):
        await rest.close()
        assert transport.closed
