# Twist SDK — Python client for the Twist REST API
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Users namespace: the authenticated user."""

from __future__ import annotations

from typing import Awaitable

from .base import BaseNamespace
from ..consts.endpoints import ENDPOINT_USERS
from ..models import User


class UsersNamespace(BaseNamespace):

    def get_session_user(self) -> Awaitable[User]:
        """The user the API token belongs to."""
        return self._call("GET", f"{ENDPOINT_USERS}/get_session_user", response=User)
