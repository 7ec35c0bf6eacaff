# Twist SDK — Python client for the Twist REST API
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Conversations namespace: direct and group messages between users."""

from __future__ import annotations

from typing import Any, Awaitable, Optional

from .base import BaseNamespace, compact
from ..consts.endpoints import ENDPOINT_CONVERSATIONS
from ..models import Conversation


class ConversationsNamespace(BaseNamespace):

    def get_conversations(
        self, workspace_id: int, archived: Optional[bool] = None
    ) -> Awaitable[list[Conversation]]:
        params = compact({"workspaceId": workspace_id, "archived": archived})
        return self._call("GET", f"{ENDPOINT_CONVERSATIONS}/get", params, list[Conversation])

    def get_conversation(self, conversation_id: int) -> Awaitable[Conversation]:
        return self._call("GET", f"{ENDPOINT_CONVERSATIONS}/getone", {"id": conversation_id}, Conversation)

    def get_or_create_conversation(self, workspace_id: int, user_ids: list[int]) -> Awaitable[Conversation]:
        """The conversation between exactly ``user_ids``, created if missing."""
        params = {"workspaceId": workspace_id, "userIds": user_ids}
        return self._call("POST", f"{ENDPOINT_CONVERSATIONS}/get_or_create", params, Conversation)

    def archive_conversation(self, conversation_id: int) -> Awaitable[Any]:
        return self._call("POST", f"{ENDPOINT_CONVERSATIONS}/archive", {"id": conversation_id})

    def unarchive_conversation(self, conversation_id: int) -> Awaitable[Any]:
        return self._call("POST", f"{ENDPOINT_CONVERSATIONS}/unarchive", {"id": conversation_id})

    def add_user(self, conversation_id: int, user_id: int) -> Awaitable[Any]:
        params = {"id": conversation_id, "userId": user_id}
        return self._call("POST", f"{ENDPOINT_CONVERSATIONS}/add_user", params)

    def remove_user(self, conversation_id: int, user_id: int) -> Awaitable[Any]:
        params = {"id": conversation_id, "userId": user_id}
        return self._call("POST", f"{ENDPOINT_CONVERSATIONS}/remove_user", params)
