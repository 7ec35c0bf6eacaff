# Twist SDK — Python client for the Twist REST API
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Groups namespace: named sets of workspace users."""

from __future__ import annotations

from typing import Any, Awaitable, Optional

from .base import BaseNamespace, compact
from ..consts.endpoints import ENDPOINT_GROUPS
from ..models import Group


class GroupsNamespace(BaseNamespace):

    def get_groups(self, workspace_id: int) -> Awaitable[list[Group]]:
        return self._call("GET", f"{ENDPOINT_GROUPS}/get", {"workspaceId": workspace_id}, list[Group])

    def get_group(self, group_id: int) -> Awaitable[Group]:
        return self._call("GET", f"{ENDPOINT_GROUPS}/getone", {"id": group_id}, Group)

    def create_group(
        self,
        workspace_id: int,
        name: str,
        *,
        description: Optional[str] = None,
        color: Optional[str] = None,
        user_ids: Optional[list[int]] = None,
    ) -> Awaitable[Group]:
        params = compact({
            "workspaceId": workspace_id,
            "name": name,
            "description": description,
            "color": color,
            "userIds": user_ids,
        })
        return self._call("POST", f"{ENDPOINT_GROUPS}/add", params, Group)

    def update_group(
        self,
        group_id: int,
        *,
        name: Optional[str] = None,
        description: Optional[str] = None,
        color: Optional[str] = None,
    ) -> Awaitable[Group]:
        params = compact({"id": group_id, "name": name, "description": description, "color": color})
        return self._call("POST", f"{ENDPOINT_GROUPS}/update", params, Group)

    def delete_group(self, group_id: int) -> Awaitable[Any]:
        return self._call("POST", f"{ENDPOINT_GROUPS}/remove", {"id": group_id})
