# Twist SDK — Python client for the Twist REST API
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Request executor: builds the wire request, sends it, normalizes the reply."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlencode, urljoin

from ._transport import BaseTransport
from .case_conversion import from_wire, to_wire
from .config import ClientConfig
from .descriptors import CallDescriptor
from .errors import TwistApiError, TwistProtocolError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpResponse:
    """Uniform envelope for one physical reply."""

    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    body: Any = None


def is_success(response: HttpResponse) -> bool:
    return 200 <= response.status_code < 300


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_query_value(v) for v in value)
    return str(value)


def serialize_params(params: Mapping[str, Any]) -> str:
    """Query string for ``params``; ``None`` values are omitted."""
    pairs = [(key, _query_value(value)) for key, value in params.items() if value is not None]
    return urlencode(pairs)


def _drop_none(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _drop_none(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [_drop_none(v) for v in value]
    return value


def decode_body(raw: str | bytes | None) -> Any:
    """Parse a JSON body; blank bodies decode to ``None``.

    Raises :class:`json.JSONDecodeError` (or ``UnicodeDecodeError``) on
    malformed input; callers decide how to surface it.
    """
    if raw is None:
        return None
    text = raw.decode("utf-8") if isinstance(raw, bytes) else raw
    if not text.strip():
        return None
    return json.loads(text)


def _decode_error_body(raw: str | bytes | None) -> Any:
    try:
        return decode_body(raw)
    except (ValueError, UnicodeDecodeError):
        return raw.decode("utf-8", "replace") if isinstance(raw, bytes) else raw


def to_internal(data: Any, context: str) -> Any:
    """``from_wire`` with undecodable timestamps raised as a protocol error."""
    try:
        return from_wire(data)
    except (OverflowError, ValueError, OSError) as e:
        raise TwistProtocolError(f"{context}: invalid timestamp in response: {e}", response_data=data) from e


async def request(
    transport: BaseTransport,
    method: str,
    base_uri: str,
    path: str,
    token: str | None = None,
    params: Mapping[str, Any] | None = None,
    *,
    request_id: str | None = None,
    convert: bool = True,
) -> HttpResponse:
    """Execute one API call and return its envelope.

    With ``convert=False`` the decoded body is returned in wire format.

    Raises:
        TwistTransportError: the transport could not complete the exchange.
        TwistApiError: the status code is outside 2xx.
        TwistProtocolError: a 2xx reply carried a body that is not JSON, or a
            timestamp that cannot be represented as a datetime.
    """
    url = urljoin(base_uri, path)
    headers: dict[str, str] = {}
    if token:
        headers["Authorization"] = f"Bearer {token}"
    if request_id:
        headers["X-Request-Id"] = request_id

    body: str | None = None
    if method == "GET":
        if params:
            query = serialize_params(to_wire(params))
            if query:
                url = f"{url}?{query}"
    else:
        headers["Content-Type"] = "application/json"
        if params is not None:
            body = json.dumps(_drop_none(to_wire(params)))

    logger.debug("%s %s", method, url)
    reply = await transport.send(url, method, headers, body)
    reply_headers = {str(k).lower(): str(v) for k, v in reply.headers.items()}

    if not 200 <= reply.status < 300:
        logger.debug("%s %s -> %s", method, url, reply.status)
        raise TwistApiError.from_response(reply.status, _decode_error_body(reply.body))

    try:
        data = decode_body(reply.body)
    except (ValueError, UnicodeDecodeError) as e:
        raise TwistProtocolError(
            f"{method} {url}: response body is not valid JSON", status_code=reply.status
        ) from e

    if convert:
        data = to_internal(data, f"{method} {url}")
    return HttpResponse(reply.status, reply_headers, data)


class RestClient:
    """Executes call descriptors immediately against one token and base URL."""

    def __init__(self, config: ClientConfig, transport: BaseTransport) -> None:
        self.config = config
        self.transport = transport

    def base_uri(self, version: str | None = None) -> str:
        return self.config.base_uri(version)

    async def request(
        self,
        method: str,
        path: str,
        params: Mapping[str, Any] | None = None,
        *,
        api_version: str | None = None,
        request_id: str | None = None,
        convert: bool = True,
    ) -> HttpResponse:
        return await request(
            self.transport,
            method,
            self.base_uri(api_version),
            path,
            self.config.token,
            params,
            request_id=request_id,
            convert=convert,
        )

    async def call_now(self, descriptor: CallDescriptor) -> Any:
        response = await self.request(
            descriptor.method,
            descriptor.path,
            descriptor.params,
            api_version=descriptor.api_version,
        )
        return descriptor.parse(response.body)

    def dispatch(self, descriptor: CallDescriptor) -> Any:
        """Returns a coroutine performing the call; await it for the result."""
        return self.call_now(descriptor)

    async def close(self) -> None:
        await self.transport.close()
