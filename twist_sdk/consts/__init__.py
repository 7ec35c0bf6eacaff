# Twist SDK — Python client for the Twist REST API
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Constants shared across the SDK."""

from .endpoints import (
    API_VERSION,
    API_VERSION_V4,
    DEFAULT_BASE_URL,
    DEFAULT_OAUTH_BASE_URL,
    DEFAULT_WEB_URL,
    get_twist_base_uri,
)

__all__ = [
    "API_VERSION",
    "API_VERSION_V4",
    "DEFAULT_BASE_URL",
    "DEFAULT_OAUTH_BASE_URL",
    "DEFAULT_WEB_URL",
    "get_twist_base_uri",
]
