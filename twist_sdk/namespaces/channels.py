# Twist SDK — Python client for the Twist REST API
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Channels namespace: list, create, update, archive, membership."""

from __future__ import annotations

from typing import Any, Awaitable, Optional

from .base import BaseNamespace, compact
from ..consts.endpoints import ENDPOINT_CHANNELS
from ..models import Channel


class ChannelsNamespace(BaseNamespace):

    def get_channels(self, workspace_id: int, archived: Optional[bool] = None) -> Awaitable[list[Channel]]:
        params = compact({"workspaceId": workspace_id, "archived": archived})
        return self._call("GET", f"{ENDPOINT_CHANNELS}/get", params, list[Channel])

    def get_channel(self, channel_id: int) -> Awaitable[Channel]:
        return self._call("GET", f"{ENDPOINT_CHANNELS}/getone", {"id": channel_id}, Channel)

    def create_channel(
        self,
        workspace_id: int,
        name: str,
        *,
        description: Optional[str] = None,
        color: Optional[int] = None,
        user_ids: Optional[list[int]] = None,
        public: Optional[bool] = None,
        default_groups: Optional[list[int]] = None,
        default_recipients: Optional[list[int]] = None,
        is_favorited: Optional[bool] = None,
        icon: Optional[int] = None,
        temp_id: Optional[int] = None,
    ) -> Awaitable[Channel]:
        params = compact({
            "workspaceId": workspace_id,
            "name": name,
            "description": description,
            "color": color,
            "userIds": user_ids,
            "public": public,
            "defaultGroups": default_groups,
            "defaultRecipients": default_recipients,
            "isFavorited": is_favorited,
            "icon": icon,
            "tempId": temp_id,
        })
        return self._call("POST", f"{ENDPOINT_CHANNELS}/add", params, Channel)

    def update_channel(
        self,
        channel_id: int,
        name: str,
        *,
        description: Optional[str] = None,
        color: Optional[int] = None,
        public: Optional[bool] = None,
        default_groups: Optional[list[int]] = None,
        default_recipients: Optional[list[int]] = None,
        is_favorited: Optional[bool] = None,
        icon: Optional[int] = None,
    ) -> Awaitable[Channel]:
        params = compact({
            "id": channel_id,
            "name": name,
            "description": description,
            "color": color,
            "public": public,
            "defaultGroups": default_groups,
            "defaultRecipients": default_recipients,
            "isFavorited": is_favorited,
            "icon": icon,
        })
        return self._call("POST", f"{ENDPOINT_CHANNELS}/update", params, Channel)

    def delete_channel(self, channel_id: int) -> Awaitable[Any]:
        return self._call("POST", f"{ENDPOINT_CHANNELS}/remove", {"id": channel_id})

    def archive_channel(self, channel_id: int) -> Awaitable[Any]:
        return self._call("POST", f"{ENDPOINT_CHANNELS}/archive", {"id": channel_id})

    def unarchive_channel(self, channel_id: int) -> Awaitable[Any]:
        return self._call("POST", f"{ENDPOINT_CHANNELS}/unarchive", {"id": channel_id})

    def favorite_channel(self, channel_id: int) -> Awaitable[Any]:
        return self._call("POST", f"{ENDPOINT_CHANNELS}/favorite", {"id": channel_id})

    def unfavorite_channel(self, channel_id: int) -> Awaitable[Any]:
        return self._call("POST", f"{ENDPOINT_CHANNELS}/unfavorite", {"id": channel_id})

    def add_user(self, channel_id: int, user_id: int) -> Awaitable[Any]:
        return self._call("POST", f"{ENDPOINT_CHANNELS}/add_user", {"id": channel_id, "userId": user_id})

    def add_users(self, channel_id: int, user_ids: list[int]) -> Awaitable[Any]:
        return self._call("POST", f"{ENDPOINT_CHANNELS}/add_users", {"id": channel_id, "userIds": user_ids})

    def remove_user(self, channel_id: int, user_id: int) -> Awaitable[Any]:
        return self._call("POST", f"{ENDPOINT_CHANNELS}/remove_user", {"id": channel_id, "userId": user_id})

    def remove_users(self, channel_id: int, user_ids: list[int]) -> Awaitable[Any]:
        return self._call(
            "POST", f"{ENDPOINT_CHANNELS}/remove_users", {"id": channel_id, "userIds": user_ids}
        )
