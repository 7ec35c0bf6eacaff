# Twist SDK — Python client for the Twist REST API
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Workspace users namespace (v4 API).

Every call addresses the workspace as ``id``; the member is named by
``user_id`` or ``email``.
"""

from __future__ import annotations

from typing import Any, Awaitable, Optional

from .base import BaseNamespace, compact
from ..consts.endpoints import API_VERSION_V4, ENDPOINT_WORKSPACE_USERS
from ..models import UserType, WorkspaceUser


class WorkspaceUsersNamespace(BaseNamespace):
    api_version = API_VERSION_V4

    def get_workspace_users(
        self, workspace_id: int, archived: Optional[bool] = None
    ) -> Awaitable[list[WorkspaceUser]]:
        params = compact({"id": workspace_id, "archived": archived})
        return self._call("GET", f"{ENDPOINT_WORKSPACE_USERS}/get", params, list[WorkspaceUser])

    def get_user_ids(self, workspace_id: int) -> Awaitable[list[int]]:
        return self._call("GET", f"{ENDPOINT_WORKSPACE_USERS}/get_ids", {"id": workspace_id}, list[int])

    def get_user_by_id(self, workspace_id: int, user_id: int) -> Awaitable[WorkspaceUser]:
        params = {"id": workspace_id, "userId": user_id}
        return self._call("GET", f"{ENDPOINT_WORKSPACE_USERS}/getone", params, WorkspaceUser)

    def get_user_by_email(self, workspace_id: int, email: str) -> Awaitable[WorkspaceUser]:
        params = {"id": workspace_id, "email": email}
        return self._call("GET", f"{ENDPOINT_WORKSPACE_USERS}/get_by_email", params, WorkspaceUser)

    def get_user_info(self, workspace_id: int, user_id: int) -> Awaitable[dict[str, Any]]:
        """Free-form profile information; returned as decoded, unvalidated."""
        params = {"id": workspace_id, "userId": user_id}
        return self._call("GET", f"{ENDPOINT_WORKSPACE_USERS}/get_info", params)

    def get_user_local_time(self, workspace_id: int, user_id: int) -> Awaitable[str]:
        params = {"id": workspace_id, "userId": user_id}
        return self._call("GET", f"{ENDPOINT_WORKSPACE_USERS}/get_local_time", params)

    def add_user(
        self,
        workspace_id: int,
        email: str,
        *,
        name: Optional[str] = None,
        user_type: Optional[UserType] = None,
        channel_ids: Optional[list[int]] = None,
    ) -> Awaitable[WorkspaceUser]:
        params = compact({
            "id": workspace_id,
            "email": email,
            "name": name,
            "userType": user_type,
            "channelIds": channel_ids,
        })
        return self._call("POST", f"{ENDPOINT_WORKSPACE_USERS}/add", params, WorkspaceUser)

    def update_user(
        self,
        workspace_id: int,
        user_type: UserType,
        *,
        email: Optional[str] = None,
        user_id: Optional[int] = None,
    ) -> Awaitable[WorkspaceUser]:
        params = compact({"id": workspace_id, "userType": user_type, "email": email, "userId": user_id})
        return self._call("POST", f"{ENDPOINT_WORKSPACE_USERS}/update", params, WorkspaceUser)

    def remove_user(
        self, workspace_id: int, *, email: Optional[str] = None, user_id: Optional[int] = None
    ) -> Awaitable[Any]:
        params = compact({"id": workspace_id, "email": email, "userId": user_id})
        return self._call("POST", f"{ENDPOINT_WORKSPACE_USERS}/remove", params)

    def resend_invite(
        self, workspace_id: int, *, email: Optional[str] = None, user_id: Optional[int] = None
    ) -> Awaitable[Any]:
        params = compact({"id": workspace_id, "email": email, "userId": user_id})
        return self._call("POST", f"{ENDPOINT_WORKSPACE_USERS}/resend_invite", params)
