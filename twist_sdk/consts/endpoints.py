# Twist SDK — Python client for the Twist REST API
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""API hosts, versions and endpoint names."""

from __future__ import annotations

from urllib.parse import urljoin

DEFAULT_BASE_URL = "https://api.twist.com"
DEFAULT_OAUTH_BASE_URL = "https://twist.com"
DEFAULT_WEB_URL = "https://twist.com"

API_VERSION = "v3"
API_VERSION_V4 = "v4"
API_BASE_URI = f"/api/{API_VERSION}/"

ENDPOINT_USERS = "users"
ENDPOINT_WORKSPACES = "workspaces"
ENDPOINT_WORKSPACE_USERS = "workspace_users"
ENDPOINT_CHANNELS = "channels"
ENDPOINT_THREADS = "threads"
ENDPOINT_GROUPS = "groups"
ENDPOINT_CONVERSATIONS = "conversations"
ENDPOINT_COMMENTS = "comments"
ENDPOINT_NOTIFICATIONS = "notifications"
ENDPOINT_INBOX = "inbox"
ENDPOINT_REACTIONS = "reactions"
ENDPOINT_SEARCH = "search"
ENDPOINT_CONVERSATION_MESSAGES = "conversation_messages"
ENDPOINT_BATCH = "batch"


def get_twist_base_uri(domain_base: str = DEFAULT_BASE_URL, version: str = API_VERSION) -> str:
    return urljoin(domain_base, f"/api/{version}/")
