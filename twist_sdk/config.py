# Twist SDK — Python client for the Twist REST API
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later
"""Client configuration loaded from arguments or environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .consts.endpoints import API_VERSION, DEFAULT_BASE_URL, DEFAULT_OAUTH_BASE_URL


@dataclass
class ClientConfig:
    """All configuration for a Twist API client."""

    token: str = ""
    base_url: str = DEFAULT_BASE_URL
    api_version: str = API_VERSION
    oauth_base_url: str = DEFAULT_OAUTH_BASE_URL
    request_timeout: float = 30.0

    def base_uri(self, version: str | None = None) -> str:
        """Versioned API root, always ending with a slash."""
        base = self.base_url.rstrip("/")
        return f"{base}/api/{version or self.api_version}/"

    @classmethod
    def from_env(cls) -> ClientConfig:
        """Load configuration from environment variables."""
        return cls(
            token=os.environ.get("TWIST_API_TOKEN", ""),
            base_url=os.environ.get("TWIST_BASE_URL", DEFAULT_BASE_URL),
            api_version=os.environ.get("TWIST_API_VERSION", API_VERSION),
            oauth_base_url=os.environ.get("TWIST_OAUTH_BASE_URL", DEFAULT_OAUTH_BASE_URL),
            request_timeout=float(os.environ.get("TWIST_REQUEST_TIMEOUT", "30")),
        )
