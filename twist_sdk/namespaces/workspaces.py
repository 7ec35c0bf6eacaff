# Twist SDK — Python client for the Twist REST API
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Workspaces namespace."""

from __future__ import annotations

from typing import Awaitable

from .base import BaseNamespace
from ..consts.endpoints import ENDPOINT_WORKSPACES
from ..models import Workspace


class WorkspacesNamespace(BaseNamespace):

    def get_workspaces(self) -> Awaitable[list[Workspace]]:
        return self._call("GET", f"{ENDPOINT_WORKSPACES}/get", response=list[Workspace])

    def get_workspace(self, workspace_id: int) -> Awaitable[Workspace]:
        return self._call("GET", f"{ENDPOINT_WORKSPACES}/getone", {"id": workspace_id}, Workspace)
