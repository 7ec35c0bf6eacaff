# Twist SDK — Python client for the Twist REST API
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""OAuth 2 authorization-code flow helpers.

Usage::

    state = get_auth_state_parameter()
    url = get_authorization_url(client_id, ["user:read", "channels:read"], state)
    # ... redirect the user, receive ``code`` on the callback ...
    token = await get_auth_token(client_id, client_secret, code)
    client = AsyncTwistClient(token.access_token)
"""

from __future__ import annotations

import logging
import uuid
from typing import Literal, Optional, Sequence
from urllib.parse import urlencode

from .consts.endpoints import DEFAULT_OAUTH_BASE_URL
from ._transport import AiohttpTransport, BaseTransport, CustomTransport, FetchFunction
from .errors import TwistApiError
from .models import AuthTokenResponse
from .rest_client import request

logger = logging.getLogger(__name__)

TwistPermission = Literal[
    "user:read",
    "user:write",
    "workspaces:read",
    "workspaces:write",
    "channels:read",
    "channels:write",
    "threads:read",
    "threads:write",
    "groups:read",
    "groups:write",
    "conversations:read",
    "conversations:write",
]


def _oauth_uri(base_url: Optional[str]) -> str:
    return f"{(base_url or DEFAULT_OAUTH_BASE_URL).rstrip('/')}/oauth/"


def get_auth_state_parameter() -> str:
    """Random ``state`` value to correlate the authorization callback."""
    return str(uuid.uuid4())


def get_authorization_url(
    client_id: str,
    permissions: Sequence[TwistPermission],
    state: str,
    redirect_uri: Optional[str] = None,
    base_url: Optional[str] = None,
) -> str:
    if not permissions:
        raise ValueError("At least one scope value should be passed for permissions.")

    params = {
        "client_id": client_id,
        "response_type": "code",
        "scope": " ".join(permissions),
        "state": state,
    }
    if redirect_uri:
        params["redirect_uri"] = redirect_uri
    return f"{_oauth_uri(base_url)}authorize?{urlencode(params)}"


async def _post(
    path: str,
    params: dict,
    base_url: Optional[str],
    transport: Optional[BaseTransport],
    fetch: Optional[FetchFunction],
):
    owned = transport is None
    if transport is None:
        transport = CustomTransport(fetch) if fetch is not None else AiohttpTransport()
    try:
        return await request(transport, "POST", _oauth_uri(base_url), path, None, params)
    finally:
        if owned:
            await transport.close()


async def get_auth_token(
    client_id: str,
    client_secret: str,
    code: str,
    redirect_uri: Optional[str] = None,
    *,
    base_url: Optional[str] = None,
    transport: Optional[BaseTransport] = None,
    fetch: Optional[FetchFunction] = None,
) -> AuthTokenResponse:
    """Exchange an authorization code for an access token.

    Raises:
        TwistApiError: the exchange was refused or returned no access token.
        TwistTransportError: the token endpoint could not be reached.
    """
    params = {
        "clientId": client_id,
        "clientSecret": client_secret,
        "code": code,
        "grantType": "authorization_code",
        "redirectUri": redirect_uri,
    }
    try:
        response = await _post("token", params, base_url, transport, fetch)
    except TwistApiError as e:
        raise TwistApiError(
            "Authentication token exchange failed.",
            status_code=e.status_code,
            error_code=e.error_code,
            response_data=e.response_data,
        ) from e

    body = response.body
    if not isinstance(body, dict) or not body.get("accessToken"):
        raise TwistApiError(
            "Authentication token exchange failed.",
            status_code=response.status_code,
            response_data=body,
        )
    return AuthTokenResponse.model_validate(body)


async def revoke_auth_token(
    client_id: str,
    client_secret: str,
    access_token: str,
    *,
    base_url: Optional[str] = None,
    transport: Optional[BaseTransport] = None,
    fetch: Optional[FetchFunction] = None,
) -> bool:
    """Revoke ``access_token``; ``False`` when the server refuses."""
    params = {"clientId": client_id, "clientSecret": client_secret, "token": access_token}
    try:
        await _post("revoke", params, base_url, transport, fetch)
    except TwistApiError as e:
        logger.debug("token revocation refused: %s", e.message)
        return False
    return True
